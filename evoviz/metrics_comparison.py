from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from evoviz.charts import GENERATED_SERIES, INPUT_SERIES, comparison_chart, to_vega_spec
from evoviz.config import DEFAULT_FITNESS_MAX
from evoviz.latex import DEFAULT_LABEL

logger = logging.getLogger(__name__)

COMPARISON_COLUMNS = ["series", "x", "y"]


def comparison_frame(
    x_values: Sequence[float],
    y_values: Sequence[float],
    *,
    fitness_max: float = DEFAULT_FITNESS_MAX,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """Input points (x[i], y[i]) plus one generated point per x.

    A y value missing for an x plots as 0. Generated y values are uniform
    random in [0, fitness_max).
    """
    x = np.asarray(list(x_values), dtype=float)
    y = np.zeros(len(x), dtype=float)
    paired = np.asarray(list(y_values)[: len(x)], dtype=float)
    y[: len(paired)] = np.nan_to_num(paired, nan=0.0)

    rng = np.random.default_rng(seed)
    generated = rng.random(len(x)) * float(fitness_max)
    if len(y_values) != len(x):
        logger.debug("x/y length mismatch: %d x values, %d y values", len(x), len(y_values))

    input_df = pd.DataFrame({"series": INPUT_SERIES, "x": x, "y": y})
    generated_df = pd.DataFrame({"series": GENERATED_SERIES, "x": x, "y": generated})
    df = pd.concat([input_df, generated_df], ignore_index=True)
    return df.reindex(columns=COMPARISON_COLUMNS).astype({"series": str, "x": float, "y": float})


def _points(df: pd.DataFrame, series: str) -> List[Dict[str, float]]:
    return df[df["series"] == series][["x", "y"]].to_dict(orient="records")


def compute_comparison(
    x_values: Sequence[float],
    y_values: Sequence[float],
    latex_expression: str = DEFAULT_LABEL,
    *,
    fitness_max: float = DEFAULT_FITNESS_MAX,
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    df = comparison_frame(x_values, y_values, fitness_max=fitness_max, seed=seed)
    return {
        "label": latex_expression,
        "input": _points(df, INPUT_SERIES),
        "generated": _points(df, GENERATED_SERIES),
        "kpis": {"points": int(len(x_values)), "y_missing": max(0, len(x_values) - len(y_values))},
        "charts": {"comparison": to_vega_spec(comparison_chart(df))},
    }
