from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

ENV_PREFIX = "EVOVIZ_"

DEFAULT_GENERATIONS = 10
DEFAULT_FITNESS_MAX = 100.0
DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


@dataclass(frozen=True)
class Settings:
    generations: int = DEFAULT_GENERATIONS
    fitness_max: float = DEFAULT_FITNESS_MAX
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_file: Optional[str] = None


def _as_origin_list(value: object) -> List[str]:
    if value is None:
        return list(DEFAULT_CORS_ORIGINS)
    if isinstance(value, str):
        items = value.split(",")
    else:
        try:
            items = list(value)  # type: ignore[call-overload]
        except TypeError:
            return list(DEFAULT_CORS_ORIGINS)
    out = [str(x).strip() for x in items if x is not None and str(x).strip()]
    return out or list(DEFAULT_CORS_ORIGINS)


def normalize_settings(raw: Mapping[str, object]) -> Settings:
    generations = raw.get("generations", DEFAULT_GENERATIONS)
    try:
        generations = int(generations)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        generations = DEFAULT_GENERATIONS
    generations = max(1, min(200, generations))

    fitness_max = raw.get("fitness_max", DEFAULT_FITNESS_MAX)
    try:
        fitness_max = float(fitness_max)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        fitness_max = DEFAULT_FITNESS_MAX
    if not fitness_max > 0 or fitness_max == float("inf"):
        fitness_max = DEFAULT_FITNESS_MAX

    log_level = str(raw.get("log_level") or "INFO").strip().upper()
    if not isinstance(getattr(logging, log_level, None), int):
        log_level = "INFO"

    return Settings(
        generations=generations,
        fitness_max=fitness_max,
        log_level=log_level,
        cors_origins=_as_origin_list(raw.get("cors_origins")),
        log_file=str(raw.get("log_file") or "").strip() or None,
    )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from ``EVOVIZ_*`` environment variables."""
    env = os.environ if environ is None else environ
    raw = {
        "generations": env.get(ENV_PREFIX + "GENERATIONS"),
        "fitness_max": env.get(ENV_PREFIX + "FITNESS_MAX"),
        "log_level": env.get(ENV_PREFIX + "LOG_LEVEL"),
        "cors_origins": env.get(ENV_PREFIX + "CORS_ORIGINS"),
        "log_file": env.get(ENV_PREFIX + "LOG_FILE"),
    }
    return normalize_settings({k: v for k, v in raw.items() if v is not None})
