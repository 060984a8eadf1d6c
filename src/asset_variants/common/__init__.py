"""Common module - schemas, configuration and errors."""

from .config import default_config
from .errors import SourceNotFoundError
from .schemas import (
    CreatedVariant,
    EncodingSpec,
    HeroImageSpec,
    RunSummary,
    SingleImageSpec,
    SkippedSource,
    VariantConfig,
)

__all__ = [
    "CreatedVariant",
    "EncodingSpec",
    "HeroImageSpec",
    "RunSummary",
    "SingleImageSpec",
    "SkippedSource",
    "SourceNotFoundError",
    "VariantConfig",
    "default_config",
]
