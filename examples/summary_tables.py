#!/usr/bin/env python3
"""Summary statistics and frequency tables from a DataFrame."""

import numpy as np
import pandas as pd

from textables import hcat, summarize, summarize_by, tabulate

rng = np.random.default_rng(1)
species = np.repeat(["setosa", "versicolor", "virginica"], 50)
df = pd.DataFrame(
    {
        "SepalLength": rng.normal(5.8, 0.8, 150).round(1),
        "SepalWidth": rng.normal(3.0, 0.4, 150).round(1),
        "Species": species,
    }
)

print(summarize(df, detail=True).to_ascii())
print()

# Grouped summaries line up on their row keys when concatenated
by_species = summarize_by(df, "Species", ["SepalLength", "SepalWidth"])
quartiles = summarize_by(
    df,
    "Species",
    ["SepalLength", "SepalWidth"],
    stats=[(f"p{q}", lambda s, q=q: s.quantile(q / 100)) for q in (25, 50, 75)],
)
print(hcat(by_species, quartiles).to_ascii())
print()

print(tabulate(df, "Species").to_ascii())
