from __future__ import annotations

import pytest

from evoviz.config import Settings
from evoviz.latex import DEFAULT_LABEL, format_function_label
from evoviz.state import (
    VisualizerState,
    apply_values,
    set_active_tab,
    set_function_expression,
    submit,
    toggle_individual,
)


def test_defaults() -> None:
    s = VisualizerState()
    assert s.x_values == () and s.y_values == ()
    assert s.generations == ()
    assert s.excluded == frozenset()
    assert s.active_tab == "evolution"
    assert s.latex_expression == DEFAULT_LABEL


def test_apply_values_updates_axis() -> None:
    s = apply_values(VisualizerState(), "x", "[1, 2, 3]")
    s = apply_values(s, "y", "4,5,oops")
    assert s.x_values == (1.0, 2.0, 3.0)
    assert s.y_values == (4.0, 5.0)


def test_apply_values_keeps_state_on_rejected_json() -> None:
    s = apply_values(VisualizerState(), "x", "[1, 2]")
    assert apply_values(s, "x", '{"not": "an array"}') is s


def test_submit_generates_and_relabels() -> None:
    s = set_function_expression(VisualizerState(), "x => Math.sin(x)")
    s = submit(s, Settings(generations=10), seed=1)
    assert len(s.generations) == 10
    assert s.latex_expression == r"f(x) = x \mapsto Math.sin(x)"


def test_submit_honors_settings() -> None:
    s = submit(VisualizerState(), Settings(generations=3, fitness_max=1.0), seed=2)
    assert [g.generation for g in s.generations] == [1, 2, 3]
    assert all(g.fitness < 1.0 for g in s.generations)


def test_toggle_individual_twice_is_identity() -> None:
    s = submit(VisualizerState(), seed=5)
    toggled = toggle_individual(toggle_individual(s, 3), 3)
    assert toggled.excluded == s.excluded


def test_set_active_tab() -> None:
    assert set_active_tab(VisualizerState(), "comparison").active_tab == "comparison"
    with pytest.raises(ValueError):
        set_active_tab(VisualizerState(), "histogram")


@pytest.mark.parametrize("expression", ["", "x^2", "x => x + 1", "a => b => c"])
def test_label_prefix(expression: str) -> None:
    assert format_function_label(expression).startswith("f(x) = ")


def test_label_replaces_first_arrow_only() -> None:
    assert format_function_label("a => b => c") == r"f(x) = a \mapsto b => c"


def test_apply_values_survives_unreadable_input() -> None:
    s = apply_values(VisualizerState(), "x", "[1, 2]")
    assert apply_values(s, "x", "[" * 100_000 + "]" * 100_000) is s
    assert apply_values(s, "x", '"' + "1" * 200_000) is s
