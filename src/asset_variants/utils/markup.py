"""Download hints and the `<picture>` usage snippet printed after a run."""

from ..common.schemas import HeroImageSpec, SingleImageSpec, VariantConfig

PICTURE_SIZES = "(max-width: 768px) 100vw, 33vw"

# Width:height of the hero photography
HERO_ASPECT = (3, 2)


def hero_download_hint(config: VariantConfig, spec: HeroImageSpec) -> str:
    return f"{config.asset_base_url}/assets/hero/{spec.filename}"


def single_download_hint(config: VariantConfig, spec: SingleImageSpec) -> str:
    return f"{config.asset_base_url}/assets/{spec.input_relative_path}"


def hero_variant_url(config: VariantConfig, spec: HeroImageSpec, width: int, ext: str) -> str:
    return f"{config.asset_base_url}/assets/optimized/hero/{spec.name}-{width}w.{ext}"


def picture_snippet(
    config: VariantConfig,
    spec: HeroImageSpec,
    alt: str = "AF Theatricals community",
    aspect: tuple[int, int] = HERO_ASPECT,
) -> str:
    """
    Render an example `<picture>` element for a hero image.

    AVIF and WebP sources list every configured width; the `<img>` fallback
    points at the largest JPEG, with a height derived from `aspect`.
    """
    indent = " " * 12

    def srcset(ext: str) -> str:
        entries = [f"{hero_variant_url(config, spec, w, ext)} {w}w" for w in config.widths]
        return f",\n{indent}".join(entries)

    largest = max(config.widths)
    height = round(largest * aspect[1] / aspect[0])
    lines = [
        "<picture>",
        '  <source type="image/avif"',
        f'    srcset="{srcset("avif")}"',
        f'    sizes="{PICTURE_SIZES}">',
        '  <source type="image/webp"',
        f'    srcset="{srcset("webp")}"',
        f'    sizes="{PICTURE_SIZES}">',
        f'  <img src="{hero_variant_url(config, spec, largest, "jpg")}"',
        f'    alt="{alt}"',
        '    fetchpriority="high"',
        f'    width="{largest}" height="{height}">',
        "</picture>",
    ]
    return "\n".join(lines)


def completion_message(config: VariantConfig) -> str:
    """Human-readable closing note with a usage example. Advisory only."""
    lines = [
        f"Done! Upload contents of {config.output_root} to the asset host,",
        "then update index.html image paths to reference the new variants.",
    ]
    if config.hero_images:
        lines += [
            "",
            "Example <picture> element for hero images:",
            "",
            picture_snippet(config, config.hero_images[0]),
        ]
    return "\n".join(lines)
