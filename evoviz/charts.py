from __future__ import annotations

from typing import Any, Dict, List

import altair as alt
import pandas as pd

alt.data_transformers.disable_max_rows()

INPUT_COLOR = "rgb(75, 192, 192)"
GENERATED_COLOR = "rgb(255, 99, 132)"

EVOLUTION_SERIES = "Fitness Evolution"
INPUT_SERIES = "Input Data"
GENERATED_SERIES = "Generated Data"

CHART_TITLES = {
    "evolution": "Evolutionary Algorithm Progress",
    "comparison": "Data Comparison",
}
AXIS_TITLES = {
    "evolution": ("Generation", "Fitness"),
    "comparison": ("X Value", "Y Value"),
}


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def chart_title(tab: str) -> str:
    return CHART_TITLES.get(tab, CHART_TITLES["comparison"])


def axis_titles(tab: str):
    return AXIS_TITLES.get(tab, AXIS_TITLES["comparison"])


def evolution_chart(frame: pd.DataFrame, *, height: int = 400) -> alt.Chart:
    """Line chart of fitness per generation.

    Excluded generations are left out of the line but keep their slot on the
    x axis, so the axis always lists every generation in order.
    """
    x_title, y_title = axis_titles("evolution")
    labels: List[str] = frame["label"].tolist() if "label" in frame.columns else []
    visible = frame[~frame["excluded"]] if "excluded" in frame.columns else frame
    visible = visible.assign(series=EVOLUTION_SERIES)
    x = alt.X("label:O", title=x_title, axis=alt.Axis(labelAngle=0))
    if labels:
        x = alt.X("label:O", title=x_title, sort=labels, scale=alt.Scale(domain=labels), axis=alt.Axis(labelAngle=0))

    return (
        alt.Chart(visible, title=chart_title("evolution"))
        .mark_line(point={"filled": True})
        .encode(
            x=x,
            y=alt.Y("fitness:Q", title=y_title, scale=alt.Scale(zero=True), axis=alt.Axis(gridDash=[4, 4])),
            color=alt.Color(
                "series:N",
                title=None,
                scale=alt.Scale(domain=[EVOLUTION_SERIES], range=[INPUT_COLOR]),
                legend=alt.Legend(orient="top"),
            ),
            tooltip=[
                alt.Tooltip("label:N", title="Generation"),
                alt.Tooltip("fitness:Q", title="Fitness", format=".2f"),
            ],
        )
        .properties(height=height)
    )


def comparison_chart(frame: pd.DataFrame, *, height: int = 400) -> alt.Chart:
    """Scatter of the pasted input points against the generated points."""
    x_title, y_title = axis_titles("comparison")
    return (
        alt.Chart(frame, title=chart_title("comparison"))
        .mark_circle(size=50, opacity=1)
        .encode(
            x=alt.X("x:Q", title=x_title),
            y=alt.Y("y:Q", title=y_title, scale=alt.Scale(zero=True), axis=alt.Axis(gridDash=[4, 4])),
            color=alt.Color(
                "series:N",
                title=None,
                scale=alt.Scale(domain=[INPUT_SERIES, GENERATED_SERIES], range=[INPUT_COLOR, GENERATED_COLOR]),
                legend=alt.Legend(orient="top"),
            ),
            tooltip=[
                alt.Tooltip("series:N", title="Series"),
                alt.Tooltip("x:Q", title="X", format=".3g"),
                alt.Tooltip("y:Q", title="Y", format=".3g"),
            ],
        )
        .properties(height=height)
    )
