from __future__ import annotations

import logging
import math

import numpy as np
import pandas as pd
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.responses import Response

from api.schemas import (
    ComparisonRequest,
    EvolutionRequest,
    ExportRequest,
    GenerateRequest,
    GenerationModel,
    ParseRequest,
    ToggleRequest,
)
from evoviz.config import load_settings
from evoviz.evolution import Generation, evolution_frame, mock_generations, toggle_generation
from evoviz.latex import DEFAULT_LABEL, format_function_label
from evoviz.logging_config import configure_logging
from evoviz.metrics_comparison import comparison_frame, compute_comparison
from evoviz.metrics_evolution import compute_evolution
from evoviz.parsing import parse_values


settings = load_settings()
configure_logging(settings)

app = FastAPI(title="Evolution Visualizer API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _generations(models: list[GenerationModel]) -> list[Generation]:
    return [Generation(generation=m.generation, fitness=m.fitness) for m in models]


def _error(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc), "type": type(exc).__name__})


def _json(data: object) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                np.ndarray: lambda arr: arr.tolist(),
            },
        )
    )


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/parse")
def parse(request: ParseRequest):
    try:
        values = parse_values(request.text)
        return _json({"values": values, "changed": values is not None})
    except Exception as exc:
        logger.exception("parse failed")
        return _error(exc)


@app.post("/generate")
def generate(request: GenerateRequest):
    try:
        count = request.count or settings.generations
        generations = mock_generations(count, settings.fitness_max, seed=request.seed)
        return _json(
            {
                "generations": [{"generation": g.generation, "fitness": g.fitness} for g in generations],
                "latex_expression": format_function_label(request.function_expression),
            }
        )
    except Exception as exc:
        logger.exception("generate failed")
        return _error(exc)


@app.post("/toggle")
def toggle(request: ToggleRequest):
    try:
        excluded = toggle_generation(set(request.excluded), request.generation)
        return _json({"excluded": sorted(excluded)})
    except Exception as exc:
        logger.exception("toggle failed")
        return _error(exc)


@app.post("/evolution")
def evolution(request: EvolutionRequest):
    try:
        return _json(compute_evolution(_generations(request.generations), frozenset(request.excluded)))
    except Exception as exc:
        logger.exception("evolution failed")
        return _error(exc)


@app.post("/comparison")
def comparison(request: ComparisonRequest):
    try:
        label = request.latex_expression or DEFAULT_LABEL
        payload = compute_comparison(
            request.x_values,
            request.y_values,
            label,
            fitness_max=settings.fitness_max,
            seed=request.seed,
        )
        return _json(payload)
    except Exception as exc:
        logger.exception("comparison failed")
        return _error(exc)


@app.post("/export/{view}")
def export_view(view: str, request: ExportRequest):
    export_df = None
    filename = f"{view}.csv"
    if view == "evolution":
        export_df = evolution_frame(_generations(request.generations), frozenset(request.excluded))
    elif view == "comparison":
        export_df = comparison_frame(
            request.x_values,
            request.y_values,
            fitness_max=settings.fitness_max,
            seed=request.seed,
        )
    else:
        export_df = pd.DataFrame()

    csv_bytes = export_df.to_csv(index=False).encode("utf-8")
    return Response(content=csv_bytes, media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={filename}"})
