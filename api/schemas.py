from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    text: str = ""


class GenerationModel(BaseModel):
    generation: int
    fitness: float


class GenerateRequest(BaseModel):
    function_expression: str = ""
    count: Optional[int] = Field(default=None, ge=1, le=200)
    seed: Optional[int] = None


class ToggleRequest(BaseModel):
    excluded: List[int] = Field(default_factory=list)
    generation: int


class EvolutionRequest(BaseModel):
    generations: List[GenerationModel] = Field(default_factory=list)
    excluded: List[int] = Field(default_factory=list)


class ComparisonRequest(BaseModel):
    x_values: List[float] = Field(default_factory=list)
    y_values: List[float] = Field(default_factory=list)
    latex_expression: Optional[str] = None
    seed: Optional[int] = None


class ExportRequest(BaseModel):
    generations: List[GenerationModel] = Field(default_factory=list)
    excluded: List[int] = Field(default_factory=list)
    x_values: List[float] = Field(default_factory=list)
    y_values: List[float] = Field(default_factory=list)
    seed: Optional[int] = None
