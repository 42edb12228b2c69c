"""Configuration for mutation and gene addition rates."""

from __future__ import annotations

import structlog
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = structlog.get_logger(__name__)


class GenomeConfig(BaseModel):
    """Breeding rates threaded through mutate / spawn_with calls."""
    mutation_probability: float = Field(
        default=0.01,
        ge=0.0,
        allow_inf_nan=False,
        description="Bit-flip attempts per chromosome; the integer part is guaranteed",
    )
    addition_probability: float = Field(
        default=0.001,
        ge=0.0,
        le=1.0,
        allow_inf_nan=False,
        description="Chance of appending one gene per chromosome",
    )

    model_config = {"frozen": True}


class Settings(BaseSettings):
    # Breeding defaults
    bitgenome_mutation_probability: float = 0.01
    bitgenome_addition_probability: float = 0.001

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def to_config(self) -> GenomeConfig:
        return GenomeConfig(
            mutation_probability=self.bitgenome_mutation_probability,
            addition_probability=self.bitgenome_addition_probability,
        )


_default_config: GenomeConfig | None = None


def get_default_config() -> GenomeConfig:
    """Return the process-wide defaults, loading them from the environment once."""
    global _default_config
    if _default_config is None:
        _default_config = Settings().to_config()
    return _default_config


def set_default_config(config: GenomeConfig | None = None, **overrides: float) -> GenomeConfig:
    """Replace the process-wide defaults.

    Keyword overrides are applied on top of ``config`` (or the current
    defaults when ``config`` is omitted) and validated.
    """
    global _default_config
    _default_config = resolve_config(config, **overrides)
    logger.info(
        "genome_defaults_configured",
        mutation_probability=_default_config.mutation_probability,
        addition_probability=_default_config.addition_probability,
    )
    return _default_config


def reset_default_config() -> None:
    """Drop the cached defaults so the next read reloads the environment."""
    global _default_config
    _default_config = None


def resolve_config(config: GenomeConfig | None = None, **overrides: float | None) -> GenomeConfig:
    """Merge per-call overrides over ``config`` or the process defaults.

    ``None`` values mean "not given" and are skipped.
    """
    base = config if config is not None else get_default_config()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return base
    return GenomeConfig(**{**base.model_dump(), **updates})
