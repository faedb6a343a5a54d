"""Capability interface for regression results that can fill a table column."""

from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable

import numpy as np
from pydantic import BaseModel, Field, field_validator, model_validator


@runtime_checkable
class RegressionModel(Protocol):
    """What a fitted model must expose to be turned into a regression column.

    Coefficient names, estimates and standard errors are returned in the same
    order. ``dof_residual`` may return None for large-sample (normal) inference.
    """

    def coefnames(self) -> Sequence[str]: ...

    def coef(self) -> Sequence[float]: ...

    def stderror(self) -> Sequence[float]: ...

    def dof_residual(self) -> Optional[float]: ...


class ModelSummary(BaseModel):
    """Estimated coefficients and fit statistics held as plain values."""

    names: List[str] = Field(..., description="Coefficient names, in display order")
    estimates: List[float] = Field(..., description="Point estimates")
    standard_errors: List[float] = Field(..., description="Standard errors")
    dof: Optional[float] = Field(None, gt=0, description="Residual degrees of freedom")
    n_obs: Optional[int] = Field(None, ge=0, description="Number of observations")
    r_squared: Optional[float] = Field(None, description="Coefficient of determination")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("names", "estimates", "standard_errors", mode="before")
    def coerce_arrays(cls, v: Any) -> Any:
        if isinstance(v, np.ndarray):
            return v.tolist()
        return v

    @model_validator(mode="after")
    def validate_lengths(self) -> "ModelSummary":
        lengths = {len(self.names), len(self.estimates), len(self.standard_errors)}
        if len(lengths) > 1:
            raise ValueError(
                "names, estimates and standard_errors must have equal lengths, "
                f"got {len(self.names)}, {len(self.estimates)}, {len(self.standard_errors)}"
            )
        return self

    def coefnames(self) -> List[str]:
        return list(self.names)

    def coef(self) -> List[float]:
        return list(self.estimates)

    def stderror(self) -> List[float]:
        return list(self.standard_errors)

    def dof_residual(self) -> Optional[float]:
        return self.dof

    def nobs(self) -> int:
        if self.n_obs is None:
            raise ValueError("Model summary has no observation count")
        return self.n_obs

    def r2(self) -> float:
        if self.r_squared is None:
            raise ValueError("Model summary has no R^2")
        return self.r_squared
