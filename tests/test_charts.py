from __future__ import annotations

import json

from evoviz.charts import (
    GENERATED_COLOR,
    INPUT_COLOR,
    axis_titles,
    chart_title,
    comparison_chart,
    evolution_chart,
    to_vega_spec,
)
from evoviz.evolution import Generation, evolution_frame
from evoviz.metrics_comparison import comparison_frame


def test_titles_per_tab() -> None:
    assert chart_title("evolution") == "Evolutionary Algorithm Progress"
    assert chart_title("comparison") == "Data Comparison"
    assert axis_titles("evolution") == ("Generation", "Fitness")
    assert axis_titles("comparison") == ("X Value", "Y Value")


def test_evolution_chart_spec_keeps_all_labels() -> None:
    gens = [Generation(1, 5.0), Generation(2, 6.0), Generation(3, 7.0)]
    spec = to_vega_spec(evolution_chart(evolution_frame(gens, {2})))
    json.dumps(spec)
    x = spec["encoding"]["x"]
    assert x["scale"]["domain"] == ["Gen 1", "Gen 2", "Gen 3"]
    assert spec["encoding"]["y"]["scale"]["zero"] is True
    assert spec["encoding"]["color"]["scale"]["range"] == [INPUT_COLOR]
    assert spec["title"] == "Evolutionary Algorithm Progress"


def test_evolution_chart_with_no_generations() -> None:
    spec = to_vega_spec(evolution_chart(evolution_frame([])))
    assert spec["mark"]["type"] == "line"


def test_comparison_chart_colors() -> None:
    spec = to_vega_spec(comparison_chart(comparison_frame([1.0, 2.0], [3.0], seed=0)))
    assert spec["encoding"]["color"]["scale"]["range"] == [INPUT_COLOR, GENERATED_COLOR]
    assert spec["encoding"]["x"]["title"] == "X Value"
    assert spec["encoding"]["y"]["title"] == "Y Value"
