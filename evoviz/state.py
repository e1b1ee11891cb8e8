"""Session state of the visualizer page and its transitions.

Every transition returns a new ``VisualizerState``; the Streamlit page keeps
the current one in ``st.session_state``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Literal, Optional, Tuple

from evoviz.config import Settings
from evoviz.evolution import Generation, mock_generations, toggle_generation
from evoviz.latex import DEFAULT_LABEL, format_function_label
from evoviz.parsing import parse_values

logger = logging.getLogger(__name__)

TabType = Literal["evolution", "comparison"]
TABS: Tuple[str, ...] = ("evolution", "comparison")
Axis = Literal["x", "y"]


@dataclass(frozen=True)
class VisualizerState:
    x_values: Tuple[float, ...] = ()
    y_values: Tuple[float, ...] = ()
    function_expression: str = ""
    generations: Tuple[Generation, ...] = ()
    excluded: FrozenSet[int] = field(default_factory=frozenset)
    active_tab: TabType = "evolution"
    latex_expression: str = DEFAULT_LABEL


def set_values(state: VisualizerState, axis: Axis, values) -> VisualizerState:
    if axis == "x":
        return replace(state, x_values=tuple(values))
    if axis == "y":
        return replace(state, y_values=tuple(values))
    raise ValueError(f"Unknown axis: {axis!r}")


def apply_values(state: VisualizerState, axis: Axis, text: Optional[str]) -> VisualizerState:
    """Update one series from pasted text, keeping it as is when the text is rejected."""
    values = parse_values(text)
    if values is None:
        return state
    return set_values(state, axis, values)


def set_function_expression(state: VisualizerState, expression: str) -> VisualizerState:
    return replace(state, function_expression=expression or "")


def submit(state: VisualizerState, settings: Optional[Settings] = None, *, seed: Optional[int] = None) -> VisualizerState:
    settings = settings or Settings()
    generations = mock_generations(settings.generations, settings.fitness_max, seed=seed)
    label = format_function_label(state.function_expression)
    logger.info("submitted expression %r", state.function_expression)
    return replace(state, generations=tuple(generations), latex_expression=label)


def toggle_individual(state: VisualizerState, generation: int) -> VisualizerState:
    return replace(state, excluded=toggle_generation(state.excluded, generation))


def set_active_tab(state: VisualizerState, tab: str) -> VisualizerState:
    if tab not in TABS:
        raise ValueError(f"Unknown tab: {tab!r}")
    return replace(state, active_tab=tab)  # type: ignore[arg-type]
