"""Rendering configuration value type."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from .colors import RGB, resolve_color


class ErrorCorrection(Enum):
    """QR error-correction tiers."""
    LOW = "low"
    MEDIUM = "medium"
    QUARTILE = "quartile"
    HIGH = "high"


class OutputFormat(Enum):
    """Image formats the codec can write."""
    PNG = "png"
    SVG = "svg"


def resolve_error_correction(token: str) -> ErrorCorrection:
    """Map a token to a level; anything unrecognized means HIGH."""
    try:
        return ErrorCorrection(token.strip().lower())
    except ValueError:
        return ErrorCorrection.HIGH


def resolve_output_format(token: str) -> OutputFormat:
    """Map a token to a format; anything unrecognized means PNG."""
    try:
        return OutputFormat(token.strip().lower())
    except ValueError:
        return OutputFormat.PNG


@dataclass(frozen=True)
class LogoSpec:
    """Image to composite in the center of the code."""
    source: str
    width_px: int = 50

    def __post_init__(self):
        if self.width_px <= 0:
            raise ValueError("logo width must be positive")


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable render settings. Builder methods return a new config."""
    payload: str = ""
    size_px: int = 300
    margin_modules: int = 10
    foreground: RGB = (0, 0, 0)
    background: RGB = (255, 255, 255)
    error_correction: ErrorCorrection = ErrorCorrection.HIGH
    output_format: OutputFormat = OutputFormat.PNG
    logo: Optional[LogoSpec] = None

    def __post_init__(self):
        # Early validation
        if self.size_px <= 0:
            raise ValueError("size must be positive")
        if self.margin_modules < 0:
            raise ValueError("margin must not be negative")
        for rgb in (self.foreground, self.background):
            if len(rgb) != 3 or not all(0 <= c <= 255 for c in rgb):
                raise ValueError(f"invalid RGB triple: {rgb}")

    def with_payload(self, payload: str) -> "GenerationConfig":
        return replace(self, payload=payload)

    def with_size(self, size_px: int) -> "GenerationConfig":
        return replace(self, size_px=int(size_px))

    def with_margin(self, margin_modules: int) -> "GenerationConfig":
        return replace(self, margin_modules=int(margin_modules))

    def with_colors(
        self,
        foreground: Union[RGB, str],
        background: Union[RGB, str, None] = None
    ) -> "GenerationConfig":
        """Set colors from RGB triples or hex tokens."""
        if isinstance(foreground, str):
            foreground = resolve_color(foreground)
        if background is None:
            background = self.background
        elif isinstance(background, str):
            background = resolve_color(background)
        return replace(
            self, foreground=tuple(foreground), background=tuple(background)
        )

    def with_error_correction(
        self, level: Union[ErrorCorrection, str]
    ) -> "GenerationConfig":
        if isinstance(level, str):
            level = resolve_error_correction(level)
        return replace(self, error_correction=level)

    def with_format(
        self, output_format: Union[OutputFormat, str]
    ) -> "GenerationConfig":
        if isinstance(output_format, str):
            output_format = resolve_output_format(output_format)
        return replace(self, output_format=output_format)

    def with_logo(self, source: str, width_px: int = 50) -> "GenerationConfig":
        return replace(self, logo=LogoSpec(source=source, width_px=width_px))

    def without_logo(self) -> "GenerationConfig":
        return replace(self, logo=None)
