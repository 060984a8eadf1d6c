"""Process-wide constants and the default VariantConfig."""

from pathlib import Path

from .schemas import HeroImageSpec, SingleImageSpec, VariantConfig

INPUT_DIRNAME = ".assets"
OUTPUT_DIRNAME = Path("assets") / "optimized"

HERO_WIDTHS = [640, 1280, 1920]
WEBP_QUALITY = 80
AVIF_QUALITY = 65
JPEG_QUALITY = 80

ASSET_BASE_URL = "https://pub-43545990593741a6b5e64edec34eabee.r2.dev"

# Hero sources live under .assets/hero/ (or directly under .assets/)
HERO_IMAGES = [
    HeroImageSpec(name="hero3", extension=".jpg"),
    HeroImageSpec(name="hero2", extension=".jpg"),
    HeroImageSpec(name="disco", extension=".jpg"),
]

SINGLE_IMAGES = [
    SingleImageSpec(input_relative_path="theater/peppino-impastato.png", output_name="peppino-impastato"),
    SingleImageSpec(input_relative_path="logos/af-wallpaper.png", output_name="af-wallpaper"),
]


def default_config(project_root: str | Path | None = None) -> VariantConfig:
    """
    Build the configuration for a project checkout.

    Args:
        project_root: Directory holding `.assets/`. Defaults to the current
            working directory.

    Returns:
        VariantConfig with inputs at `<root>/.assets` and outputs at
        `<root>/assets/optimized`.
    """
    root = Path(project_root) if project_root is not None else Path.cwd()
    root = root.resolve()

    return VariantConfig(
        input_root=root / INPUT_DIRNAME,
        output_root=root / OUTPUT_DIRNAME,
        widths=list(HERO_WIDTHS),
        webp_quality=WEBP_QUALITY,
        avif_quality=AVIF_QUALITY,
        jpeg_quality=JPEG_QUALITY,
        hero_images=list(HERO_IMAGES),
        single_images=list(SINGLE_IMAGES),
        asset_base_url=ASSET_BASE_URL,
    )
