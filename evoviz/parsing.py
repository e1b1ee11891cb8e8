from __future__ import annotations

import csv
import json
import logging
import math
from numbers import Real
from typing import List, Optional

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(float(value))


def csv_tokens(text: str) -> List[str]:
    """Flatten comma-separated text into cell tokens, row by row, skipping empty lines."""
    rows = csv.reader(line for line in text.splitlines() if line != "")
    return [cell for row in rows for cell in row]


def numeric_tokens(tokens: List[str]) -> List[float]:
    if not tokens:
        return []
    values = pd.to_numeric(pd.Series([t.strip() for t in tokens], dtype=object), errors="coerce").astype(float)
    values = values[np.isfinite(values)]
    return values.tolist()


def _reject_constant(name: str) -> float:
    # NaN / Infinity are not JSON; such text is read as CSV instead
    raise ValueError(f"non-standard JSON constant {name}")


def parse_values(text: Optional[str]) -> Optional[List[float]]:
    """Parse pasted text as a JSON array of numbers, falling back to CSV.

    Returns None when the text is valid JSON that is not an array of finite
    numbers, or when it is too deeply nested or has a cell too large to
    read; callers keep their current values in that case. Otherwise the CSV
    fallback yields a list, dropping tokens that are not numbers.
    """
    text = text or ""
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except RecursionError:
        logger.debug("ignoring JSON input nested too deeply")
        return None
    except ValueError:
        try:
            tokens = csv_tokens(text)
        except csv.Error as exc:
            logger.debug("ignoring unreadable CSV input: %s", exc)
            return None
        values = numeric_tokens(tokens)
        logger.debug("parsed %d numeric CSV tokens", len(values))
        return values

    if isinstance(parsed, list) and all(_is_finite_number(v) for v in parsed):
        return [float(v) for v in parsed]
    logger.debug("ignoring JSON input of type %s", type(parsed).__name__)
    return None
