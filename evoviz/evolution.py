from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Iterable, List, Optional

import numpy as np
import pandas as pd

from evoviz.config import DEFAULT_FITNESS_MAX, DEFAULT_GENERATIONS

logger = logging.getLogger(__name__)

EVOLUTION_COLUMNS = ["generation", "label", "fitness", "excluded"]


@dataclass(frozen=True)
class Generation:
    generation: int
    fitness: float

    @property
    def label(self) -> str:
        return f"Gen {self.generation}"


def mock_generations(
    count: int = DEFAULT_GENERATIONS,
    fitness_max: float = DEFAULT_FITNESS_MAX,
    seed: Optional[int] = None,
) -> List[Generation]:
    """Placeholder generations 1..count with uniform random fitness in [0, fitness_max)."""
    count = max(0, int(count))
    rng = np.random.default_rng(seed)
    fitness = rng.random(count) * float(fitness_max)
    logger.info("generated %d mock generations", count)
    return [Generation(generation=i + 1, fitness=float(f)) for i, f in enumerate(fitness)]


def toggle_generation(excluded: AbstractSet[int], generation: int) -> FrozenSet[int]:
    current = set(excluded)
    if generation in current:
        current.discard(generation)
    else:
        current.add(generation)
    return frozenset(current)


def visible_generations(generations: Iterable[Generation], excluded: AbstractSet[int]) -> List[Generation]:
    return [g for g in generations if g.generation not in excluded]


def evolution_frame(generations: Iterable[Generation], excluded: AbstractSet[int] = frozenset()) -> pd.DataFrame:
    rows = [
        {
            "generation": g.generation,
            "label": g.label,
            "fitness": g.fitness,
            "excluded": g.generation in excluded,
        }
        for g in generations
    ]
    df = pd.DataFrame(rows, columns=EVOLUTION_COLUMNS)
    return df.astype({"generation": int, "label": str, "fitness": float, "excluded": bool})
