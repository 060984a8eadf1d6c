"""asset_variants - batch generator of resized WebP/AVIF/JPEG asset variants."""

from .algo.image_variant import image_variant
from .common.config import default_config
from .common.errors import SourceNotFoundError
from .common.schemas import (
    CreatedVariant,
    EncodingSpec,
    HeroImageSpec,
    RunSummary,
    SingleImageSpec,
    SkippedSource,
    VariantConfig,
)
from .generator import VariantGenerator

__version__ = "0.1.0"

__all__ = [
    "CreatedVariant",
    "EncodingSpec",
    "HeroImageSpec",
    "RunSummary",
    "SingleImageSpec",
    "SkippedSource",
    "SourceNotFoundError",
    "VariantConfig",
    "VariantGenerator",
    "default_config",
    "image_variant",
    "__version__",
]
