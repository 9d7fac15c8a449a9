"""Single QR generation: payload + config through the codec."""

from pathlib import Path
from typing import Optional

from .errors import EmptyPayloadError
from .generation_config import GenerationConfig, LogoSpec
from .interfaces import CodecOptions, ILogSink, IQRCodec, RenderResult

DEFAULT_CONFIG = GenerationConfig()


class GeneratorPipeline:
    """Drives one render per call; keeps no state between calls."""

    def __init__(self, codec: IQRCodec, logger: ILogSink):
        self.codec = codec
        self.logger = logger

    def _resolve_logo(self, logo: Optional[LogoSpec]) -> Optional[LogoSpec]:
        """Drop the logo when its source is not an existing file."""
        if logo is None:
            return None
        if not Path(logo.source).is_file():
            self.logger.log(
                "warn", f"Logo {logo.source} not found, rendering without it"
            )
            return None
        return logo

    def _options(self, config: GenerationConfig) -> CodecOptions:
        return CodecOptions(
            size_px=config.size_px,
            margin_modules=config.margin_modules,
            foreground=config.foreground,
            background=config.background,
            error_correction=config.error_correction,
            output_format=config.output_format,
            logo=self._resolve_logo(config.logo)
        )

    def render(
        self, payload: str, config: GenerationConfig = DEFAULT_CONFIG
    ) -> RenderResult:
        """Render payload with config; raises EmptyPayloadError first."""
        # Early validation, the codec never sees empty input
        if not payload:
            raise EmptyPayloadError()

        options = self._options(config)
        self.logger.log(
            "debug",
            f"Rendering {len(payload)} chars as "
            f"{config.output_format.value} ({config.size_px}px, "
            f"ec={config.error_correction.value})"
        )
        return self.codec.encode(payload, options)

    def render_config(self, config: GenerationConfig) -> RenderResult:
        """Render the payload carried by config."""
        return self.render(config.payload, config)
