from __future__ import annotations

from typing import AbstractSet, Any, Dict, Iterable, Optional

from evoviz.charts import evolution_chart, to_vega_spec
from evoviz.evolution import Generation, evolution_frame


def _best(visible) -> Optional[Dict[str, Any]]:
    if visible.empty:
        return None
    row = visible.loc[visible["fitness"].idxmax()]
    return {"generation": int(row["generation"]), "fitness": float(row["fitness"])}


def compute_evolution(generations: Iterable[Generation], excluded: AbstractSet[int] = frozenset()) -> Dict[str, Any]:
    df = evolution_frame(generations, excluded)
    visible = df[~df["excluded"]]

    latest = None
    if not visible.empty:
        last = visible.sort_values("generation").iloc[-1]
        latest = {"generation": int(last["generation"]), "fitness": float(last["fitness"])}

    return {
        "generations": df.drop(columns=["excluded"]).to_dict(orient="records"),
        "visible": visible.drop(columns=["excluded"]).to_dict(orient="records"),
        "excluded": sorted(int(g) for g in excluded),
        "kpis": {
            "count": int(len(df)),
            "visible_count": int(len(visible)),
            "best": _best(visible),
            "latest": latest,
        },
        "charts": {"evolution": to_vega_spec(evolution_chart(df))},
    }
