"""Pure image variant computation logic (single file)."""

from pathlib import Path

from PIL import Image, features

from ..common.schemas import EncodingSpec
from ..utils.profiling import timed


@timed
def image_variant(
    *,
    input_path: str | Path,
    output_path: str | Path,
    encoding: EncodingSpec,
    width: int | None = None,
) -> str:
    """
    Resize (optionally) and encode a single image.

    Framework-agnostic, single-image operation.

    Args:
        input_path: Path to source image
        output_path: Path to output image
        encoding: Target format and quality
        width: Target width; height follows the source aspect ratio.
            None keeps the original resolution.

    Returns:
        Output file path as string

    Raises:
        FileNotFoundError: If the input file or the output directory does not exist
        OSError: If Pillow fails to read/write the image
        RuntimeError: If Pillow was built without the requested codec
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    if not output_path.parent.exists():
        raise FileNotFoundError(f"Output directory does not exist: {output_path.parent}")

    if encoding.format == "avif" and not features.check("avif"):
        raise RuntimeError("Pillow was built without AVIF support. Install pillow>=11.3")

    with Image.open(input_path) as img:
        img.load()

        # Palette and 1-bit images only resample with NEAREST
        img = normalize_mode(img, encoding.format)

        if width is not None:
            img = img.resize(scaled_size(img.size, width), Image.Resampling.LANCZOS)

        img.save(
            output_path,
            format=get_pil_format(encoding.format),
            **get_save_options(encoding),
        )

    return str(output_path)


def scaled_size(size: tuple[int, int], width: int) -> tuple[int, int]:
    """Target size for `width`, keeping the aspect ratio of `size`."""
    original_width, original_height = size
    height = round(original_height * width / original_width)
    return width, max(1, height)


def normalize_mode(img: Image.Image, format: str) -> Image.Image:
    """Convert to a mode the target encoder accepts."""
    if format in ("jpg", "jpeg"):
        # JPEG does not support alpha channel
        return img if img.mode == "RGB" else img.convert("RGB")

    if img.mode in ("RGB", "RGBA"):
        return img
    if img.mode in ("P", "PA", "LA") or "transparency" in img.info:
        return img.convert("RGBA")
    return img.convert("RGB")


def get_save_options(encoding: EncodingSpec) -> dict[str, object]:
    """Encoder keyword arguments for Image.save()."""
    save_kwargs: dict[str, object] = {"quality": encoding.quality}

    if encoding.format == "jpg":
        # Optimized Huffman tables and progressive scan
        save_kwargs["optimize"] = True
        save_kwargs["progressive"] = True

    return save_kwargs


def get_pil_format(format_str: str) -> str:
    """Convert format string to PIL format name."""
    format_map = {
        "jpg": "JPEG",
        "jpeg": "JPEG",
        "webp": "WEBP",
        "avif": "AVIF",
    }
    return format_map.get(format_str.lower(), format_str.upper())
