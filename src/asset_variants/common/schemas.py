"""Pydantic schemas for variant configuration and run results."""

from pathlib import Path, PurePosixPath
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# ─────────────────────────────────────────────────────────────
# Source specs
# ─────────────────────────────────────────────────────────────


class HeroImageSpec(BaseModel):
    """A full-width banner source that gets one variant per width and encoding."""

    name: str = Field(..., min_length=1, description="Base name, e.g. 'hero3'")
    extension: str = Field(..., min_length=1, description="Source extension, e.g. '.jpg'")

    model_config: ClassVar[ConfigDict] = {"frozen": True}

    @field_validator("extension")
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        v = v.strip()
        if v in ("", "."):
            raise ValueError("extension must not be empty")
        return v if v.startswith(".") else f".{v}"

    @property
    def filename(self) -> str:
        return f"{self.name}{self.extension}"


class SingleImageSpec(BaseModel):
    """A one-off source converted at original resolution."""

    input_relative_path: str = Field(
        ..., min_length=1, description="Path relative to the input root, e.g. 'theater/poster.png'"
    )
    output_name: str = Field(..., min_length=1, description="Output basename without extension")

    model_config: ClassVar[ConfigDict] = {"frozen": True}

    @field_validator("input_relative_path")
    @classmethod
    def validate_relative(cls, v: str) -> str:
        path = PurePosixPath(v)
        if path.is_absolute() or ".." in path.parts:
            raise ValueError("input_relative_path must stay inside the input root")
        return v

    @property
    def relative_dir(self) -> str:
        """Directory part of the input path ('' when the source sits at the root)."""
        parent = PurePosixPath(self.input_relative_path).parent
        return "" if str(parent) == "." else str(parent)


# ─────────────────────────────────────────────────────────────
# Encodings and process-wide configuration
# ─────────────────────────────────────────────────────────────

ImageFormat = Literal["webp", "avif", "jpg"]


class EncodingSpec(BaseModel):
    """One output encoding. The file extension equals the format name."""

    format: ImageFormat
    quality: int = Field(..., ge=0, le=100)

    model_config: ClassVar[ConfigDict] = {"frozen": True}


class VariantConfig(BaseModel):
    """Everything the generator needs, passed explicitly."""

    input_root: Path
    output_root: Path
    widths: list[int] = Field(default_factory=lambda: [640, 1280, 1920], min_length=1)
    webp_quality: int = Field(default=80, ge=0, le=100)
    avif_quality: int = Field(default=65, ge=0, le=100)
    jpeg_quality: int = Field(default=80, ge=0, le=100)
    hero_images: list[HeroImageSpec] = Field(default_factory=list)
    single_images: list[SingleImageSpec] = Field(default_factory=list)
    asset_base_url: str = Field(..., min_length=1, description="Remote host serving /assets/")

    model_config: ClassVar[ConfigDict] = {"frozen": True}

    @field_validator("widths")
    @classmethod
    def validate_widths(cls, v: list[int]) -> list[int]:
        if any(w <= 0 for w in v):
            raise ValueError("widths must be positive")
        if len(v) != len(set(v)):
            raise ValueError("widths must be unique")
        return v

    @field_validator("asset_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_unique_single_outputs(self) -> "VariantConfig":
        """Two single specs writing the same output file would overwrite each other."""
        targets = [(s.relative_dir, s.output_name) for s in self.single_images]
        if len(targets) != len(set(targets)):
            raise ValueError("single image outputs must be unique")
        return self

    @property
    def hero_output_dir(self) -> Path:
        return self.output_root / "hero"

    @property
    def hero_encodings(self) -> list[EncodingSpec]:
        return [
            EncodingSpec(format="webp", quality=self.webp_quality),
            EncodingSpec(format="avif", quality=self.avif_quality),
            EncodingSpec(format="jpg", quality=self.jpeg_quality),
        ]

    @property
    def single_encodings(self) -> list[EncodingSpec]:
        return [
            EncodingSpec(format="webp", quality=self.webp_quality),
            EncodingSpec(format="avif", quality=self.avif_quality),
        ]


# ─────────────────────────────────────────────────────────────
# Run results
# ─────────────────────────────────────────────────────────────


class CreatedVariant(BaseModel):
    path: Path
    format: ImageFormat
    width: int | None = Field(default=None, description="Target width, None at original size")


class SkippedSource(BaseModel):
    label: str
    candidates: list[Path]
    download_hint: str


class RunSummary(BaseModel):
    """Result returned by VariantGenerator.run()."""

    created: list[CreatedVariant] = Field(default_factory=list)
    skipped: list[SkippedSource] = Field(default_factory=list)

    model_config: ClassVar[ConfigDict] = {"extra": "forbid"}
