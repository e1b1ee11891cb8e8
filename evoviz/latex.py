from __future__ import annotations

LABEL_PREFIX = "f(x) = "
DEFAULT_LABEL = LABEL_PREFIX + "x^2"


def format_function_label(expression: str) -> str:
    """Build the LaTeX label, rendering an arrow-function ``=>`` as ``\\mapsto``."""
    return LABEL_PREFIX + (expression or "").replace("=>", r"\mapsto", 1)
