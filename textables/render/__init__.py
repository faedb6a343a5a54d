"""ASCII and LaTeX renderers."""

from .ascii import to_ascii
from .latex import to_latex, to_tex

__all__ = ["to_ascii", "to_latex", "to_tex"]
