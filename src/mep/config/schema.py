"""Pydantic config schema and loader."""
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator


class GenomeConfig(BaseModel):
    inputs: int = 3
    length: int = 16
    mutation_intensity: int = 4
    crossover_points: int = 1

    @field_validator("inputs", "mutation_intensity", "crossover_points")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be >= 1")
        return v

    @field_validator("length")
    @classmethod
    def validate_length(cls, v: int) -> int:
        if v < 0:
            raise ValueError("length must be non-negative")
        return v


class CrossoverConfig(BaseModel):
    point_mode: str = "uniform"

    @field_validator("point_mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        if v not in ("uniform", "trait"):
            raise ValueError("point_mode must be 'uniform' or 'trait'")
        return v


class EvaluationConfig(BaseModel):
    outputs: int = 1
    inputs: list[float] = Field(default_factory=lambda: [1.0, 2.0, 3.0])

    @field_validator("outputs")
    @classmethod
    def validate_outputs(cls, v: int) -> int:
        if v < 1:
            raise ValueError("outputs must be >= 1")
        return v

    @field_validator("inputs", mode="before")
    @classmethod
    def validate_lists(cls, v):
        if isinstance(v, tuple):
            return list(v)
        return v


class ConfigSchema(BaseModel):
    seed: int = 0
    genome: GenomeConfig = Field(default_factory=GenomeConfig)
    crossover: CrossoverConfig = Field(default_factory=CrossoverConfig)
    evaluation: EvaluationConfig = Field(default_factory=EvaluationConfig)


def load_config(path: Path) -> ConfigSchema:
    data = yaml.safe_load(Path(path).read_text()) or {}
    return ConfigSchema(**data)
