"""Test configuration and fixtures for asset_variants.

This module provides:
- Pytest configuration (codec checks)
- Function-scoped fixtures (project trees with synthetic sources, configs)
- A loguru capture fixture
"""

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw, features

from asset_variants.common.schemas import HeroImageSpec, SingleImageSpec, VariantConfig

ASSET_BASE_URL = "https://cdn.example.test"


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_runtest_setup(item):
    """Check codec support before running tests - FAIL if missing (not skip)."""
    if item.get_closest_marker("requires_avif") and not features.check("avif"):
        pytest.fail(
            "Pillow was built without AVIF support. Install: pip install 'pillow>=11.3'\n"
            "Or exclude with: pytest -m 'not requires_avif'",
            pytrace=False,
        )


# ============================================================================
# Helpers
# ============================================================================


def make_image(path: Path, size: tuple[int, int] = (800, 600), mode: str = "RGB") -> Path:
    """Write a synthetic image with a few shapes so encoders have real content."""
    path.parent.mkdir(parents=True, exist_ok=True)

    img = Image.new("RGB", size, (200, 200, 200))
    draw = ImageDraw.Draw(img)
    w, h = size
    draw.rectangle((w // 8, h // 8, w // 2, h // 2), fill=(220, 40, 40))
    draw.ellipse((w // 2, h // 3, w - w // 8, h - h // 8), fill=(40, 80, 220))

    if mode != "RGB":
        img = img.convert(mode)
    img.save(path)
    return path


# ============================================================================
# Function-Scoped Fixtures
# ============================================================================


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project tree with hero3 under .assets/hero/, disco at the .assets/ fallback,
    hero2 missing, and one single image under .assets/theater/."""
    root = tmp_path / "project"
    assets = root / ".assets"

    _ = make_image(assets / "hero" / "hero3.jpg", size=(2400, 1600))
    _ = make_image(assets / "disco.jpg", size=(1000, 500))
    _ = make_image(assets / "theater" / "peppino-impastato.png", size=(300, 450), mode="RGBA")

    return root


@pytest.fixture
def variant_config(project_root: Path) -> VariantConfig:
    return VariantConfig(
        input_root=project_root / ".assets",
        output_root=project_root / "assets" / "optimized",
        hero_images=[
            HeroImageSpec(name="hero3", extension=".jpg"),
            HeroImageSpec(name="hero2", extension=".jpg"),
            HeroImageSpec(name="disco", extension=".jpg"),
        ],
        single_images=[
            SingleImageSpec(
                input_relative_path="theater/peppino-impastato.png",
                output_name="peppino-impastato",
            ),
            SingleImageSpec(
                input_relative_path="logos/af-wallpaper.png",
                output_name="af-wallpaper",
            ),
        ],
        asset_base_url=ASSET_BASE_URL,
    )


@pytest.fixture
def image_factory():
    """Return the synthetic image writer for tests that need custom sources."""
    return make_image
