"""Tests for download hints and the <picture> usage snippet."""

from pathlib import Path

from asset_variants.common.schemas import HeroImageSpec, SingleImageSpec, VariantConfig
from asset_variants.utils.markup import (
    completion_message,
    hero_download_hint,
    picture_snippet,
    single_download_hint,
)

BASE = "https://cdn.example.test"


def make_config(**overrides: object) -> VariantConfig:
    values: dict[str, object] = {
        "input_root": Path("/p/.assets"),
        "output_root": Path("/p/assets/optimized"),
        "asset_base_url": BASE,
        "hero_images": [HeroImageSpec(name="hero2", extension=".jpg")],
    }
    values.update(overrides)
    return VariantConfig.model_validate(values)


def test_download_hints():
    config = make_config()

    assert hero_download_hint(config, HeroImageSpec(name="hero2", extension=".jpg")) == (
        f"{BASE}/assets/hero/hero2.jpg"
    )
    spec = SingleImageSpec(input_relative_path="theater/p.png", output_name="p")
    assert single_download_hint(config, spec) == f"{BASE}/assets/theater/p.png"


def test_picture_snippet_lists_every_width():
    config = make_config()
    snippet = picture_snippet(config, config.hero_images[0])

    for ext in ("avif", "webp"):
        for width in (640, 1280, 1920):
            assert f"{BASE}/assets/optimized/hero/hero2-{width}w.{ext} {width}w" in snippet

    assert f'<img src="{BASE}/assets/optimized/hero/hero2-1920w.jpg"' in snippet
    assert 'width="1920" height="1280"' in snippet
    assert snippet.count('sizes="(max-width: 768px) 100vw, 33vw"') == 2
    assert snippet.index('type="image/avif"') < snippet.index('type="image/webp"')


def test_picture_snippet_follows_configured_widths():
    config = make_config(widths=[480, 960])
    snippet = picture_snippet(config, config.hero_images[0])

    assert "hero2-480w.avif 480w" in snippet
    assert "hero2-960w.jpg" in snippet
    assert 'width="960" height="640"' in snippet
    assert "1920w" not in snippet


def test_completion_message_without_heroes_has_no_snippet():
    message = completion_message(make_config(hero_images=[]))

    assert message.startswith("Done!")
    assert "<picture>" not in message


def test_completion_message_uses_first_hero():
    config = make_config(
        hero_images=[
            HeroImageSpec(name="hero3", extension=".jpg"),
            HeroImageSpec(name="disco", extension=".jpg"),
        ]
    )

    message = completion_message(config)

    assert "hero3-640w.webp" in message
    assert "disco-" not in message


def test_picture_snippet_custom_aspect():
    config = make_config()
    snippet = picture_snippet(config, config.hero_images[0], aspect=(16, 9))

    assert 'width="1920" height="1080"' in snippet
