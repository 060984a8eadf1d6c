"""Image variant algorithms."""

from .image_variant import get_pil_format, image_variant, scaled_size

__all__ = ["image_variant", "get_pil_format", "scaled_size"]
