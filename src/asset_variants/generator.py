"""VariantGenerator - produces resized, re-encoded copies of configured sources."""

import asyncio
from pathlib import Path

from loguru import logger

from .algo.image_variant import image_variant
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
from .utils.markup import hero_download_hint, single_download_hint


class VariantGenerator:
    """Sequential variant pipeline over a VariantConfig.

    Responsibilities:
    - Locates each source under the input root (hero specs have a fallback path)
    - Writes one file per (width x encoding) for hero specs
    - Writes WebP + AVIF at original size for single specs
    - Treats a missing source as a skip; every other failure propagates

    Each encode is awaited before the next one starts.

    Example:
        generator = VariantGenerator(default_config())
        summary = asyncio.run(generator.run())
    """

    def __init__(self, config: VariantConfig):
        self.config: VariantConfig = config
        self.summary: RunSummary = RunSummary()

    def resolve_source(self, spec: HeroImageSpec | SingleImageSpec) -> Path:
        """Return the first existing candidate path for `spec`.

        Raises:
            SourceNotFoundError: If no candidate exists
        """
        input_root = self.config.input_root

        if isinstance(spec, HeroImageSpec):
            label = spec.filename
            candidates = [input_root / "hero" / spec.filename, input_root / spec.filename]
            hint = hero_download_hint(self.config, spec)
        else:
            label = spec.input_relative_path
            candidates = [input_root / spec.input_relative_path]
            hint = single_download_hint(self.config, spec)

        for candidate in candidates:
            if candidate.is_file():
                return candidate

        raise SourceNotFoundError(label, candidates, hint)

    async def emit_hero_variants(self, spec: HeroImageSpec) -> list[CreatedVariant]:
        try:
            source = self.resolve_source(spec)
        except SourceNotFoundError as exc:
            self._skip(exc)
            return []

        hero_dir = self.config.hero_output_dir
        hero_dir.mkdir(parents=True, exist_ok=True)

        created: list[CreatedVariant] = []
        for width in self.config.widths:
            base = f"{spec.name}-{width}w"
            for encoding in self.config.hero_encodings:
                output_path = hero_dir / f"{base}.{encoding.format}"
                created.append(await self._encode(source, output_path, encoding, width))

        return created

    async def emit_single_variants(self, spec: SingleImageSpec) -> list[CreatedVariant]:
        try:
            source = self.resolve_source(spec)
        except SourceNotFoundError as exc:
            self._skip(exc)
            return []

        output_dir = self.config.output_root / spec.relative_dir
        output_dir.mkdir(parents=True, exist_ok=True)

        created: list[CreatedVariant] = []
        for encoding in self.config.single_encodings:
            output_path = output_dir / f"{spec.output_name}.{encoding.format}"
            created.append(await self._encode(source, output_path, encoding, None))

        return created

    async def run(self) -> RunSummary:
        """Process every hero spec, then every single spec, in list order."""
        self.summary = RunSummary()

        logger.info(f"Input:  {self.config.input_root}")
        logger.info(f"Output: {self.config.output_root}")

        self.config.output_root.mkdir(parents=True, exist_ok=True)

        logger.info("Processing hero images...")
        for hero in self.config.hero_images:
            logger.info(f"  {hero.filename}:")
            _ = await self.emit_hero_variants(hero)

        logger.info("Processing single images...")
        for single in self.config.single_images:
            logger.info(f"  {single.input_relative_path}:")
            _ = await self.emit_single_variants(single)

        logger.info(
            f"Created {len(self.summary.created)} files, "
            + f"skipped {len(self.summary.skipped)} sources"
        )
        return self.summary

    async def _encode(
        self,
        source: Path,
        output_path: Path,
        encoding: EncodingSpec,
        width: int | None,
    ) -> CreatedVariant:
        _ = await asyncio.to_thread(
            image_variant,
            input_path=source,
            output_path=output_path,
            encoding=encoding,
            width=width,
        )
        logger.info(f"    Created {output_path.name}")

        variant = CreatedVariant(path=output_path, format=encoding.format, width=width)
        self.summary.created.append(variant)
        return variant

    def _skip(self, exc: SourceNotFoundError) -> None:
        paths = " or ".join(str(c) for c in exc.candidates)
        logger.warning(f"    Skipping {exc.label} - file not found at {paths}")
        logger.warning(f"    Download it first: {exc.download_hint}")

        self.summary.skipped.append(
            SkippedSource(label=exc.label, candidates=exc.candidates, download_hint=exc.download_hint)
        )
