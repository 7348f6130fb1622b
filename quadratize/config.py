"""Conversion configuration from environment variables."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    quadratize_log_level: str = "warning"

    # Search bounds
    quadratize_max_segments: int = 100
    quadratize_max_quad_pow2: int = 5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


@dataclass
class ConversionConfig:
    """Bounds on how hard a conversion may try before giving up."""

    # Cubic fitter: never split a cubic into more quads than this
    max_segments: int = 100
    # Conic subdivider: at most 2**max_quad_pow2 quads per conic
    max_quad_pow2: int = 5

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> ConversionConfig:
        source = source or settings
        return cls(
            max_segments=source.quadratize_max_segments,
            max_quad_pow2=source.quadratize_max_quad_pow2,
        )


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at the configured level. Never run on import."""
    name = (level or settings.quadratize_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
