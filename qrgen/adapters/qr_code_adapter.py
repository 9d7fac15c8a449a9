"""QR codec adapter (qrcode + Pillow)."""

import io
from typing import Optional

import qrcode
from PIL import Image
from qrcode.exceptions import DataOverflowError
from qrcode.image.pil import PilImage
from qrcode.image.svg import SvgPathImage

from ..colors import to_hex
from ..errors import CodecCapacityExceededError, SizeTooSmallError
from ..generation_config import ErrorCorrection, LogoSpec, OutputFormat
from ..interfaces import CodecOptions, ILogSink, RenderResult
from .stdout_adapter import StdoutAdapter

ERROR_CORRECTION_LEVELS = {
    ErrorCorrection.LOW: qrcode.constants.ERROR_CORRECT_L,
    ErrorCorrection.MEDIUM: qrcode.constants.ERROR_CORRECT_M,
    ErrorCorrection.QUARTILE: qrcode.constants.ERROR_CORRECT_Q,
    ErrorCorrection.HIGH: qrcode.constants.ERROR_CORRECT_H,
}

MIME_TYPES = {
    OutputFormat.PNG: "image/png",
    OutputFormat.SVG: "image/svg+xml",
}


def _svg_factory(options: CodecOptions) -> type:
    """SvgPathImage subclass carrying the requested colors."""
    style = dict(SvgPathImage.QR_PATH_STYLE, fill=to_hex(options.foreground))
    return type(
        "ColoredSvgPathImage",
        (SvgPathImage,),
        {
            "QR_PATH_STYLE": style,
            "background": to_hex(options.background),
        },
    )


class QRCodeAdapter:
    """Adapter for QR code generation."""

    def __init__(self, logger: Optional[ILogSink] = None):
        self.logger = logger or StdoutAdapter()

    def _build(self, payload: str, options: CodecOptions) -> qrcode.QRCode:
        """Fit the smallest symbol version, then scale modules to size."""
        qr = qrcode.QRCode(
            version=None,
            box_size=1,
            border=options.margin_modules,
            error_correction=ERROR_CORRECTION_LEVELS[options.error_correction]
        )
        qr.add_data(payload)

        # qrcode 8 reports an oversize payload as ValueError from best_fit
        try:
            qr.make(fit=True)
        except (DataOverflowError, ValueError) as e:
            raise CodecCapacityExceededError(
                len(payload), options.error_correction.value
            ) from e

        total_modules = qr.modules_count + 2 * options.margin_modules
        if options.size_px < total_modules:
            raise SizeTooSmallError(options.size_px, total_modules)

        qr.box_size = options.size_px // total_modules
        return qr

    def _composite_logo(
        self, image: Image.Image, logo: LogoSpec
    ) -> Image.Image:
        """Paste logo centered, resized to logo.width_px."""
        try:
            with Image.open(logo.source) as src:
                mark = src.convert("RGBA")
        except OSError as e:
            self.logger.log("warn", f"Logo {logo.source} unreadable: {e}")
            return image

        width = min(logo.width_px, image.width)
        height = max(1, round(mark.height * width / mark.width))
        mark = mark.resize((width, height), Image.Resampling.LANCZOS)

        result = image.convert("RGBA")
        position = (
            (result.width - width) // 2,
            (result.height - height) // 2,
        )
        result.paste(mark, position, mark)
        return result.convert("RGB")

    def _render_png(self, qr: qrcode.QRCode, options: CodecOptions) -> bytes:
        img = qr.make_image(
            image_factory=PilImage,
            fill_color=options.foreground,
            back_color=options.background
        ).get_image().convert("RGB")

        if img.size != (options.size_px, options.size_px):
            img = img.resize(
                (options.size_px, options.size_px), Image.Resampling.NEAREST
            )

        if options.logo:
            img = self._composite_logo(img, options.logo)

        buf = io.BytesIO()
        img.save(buf, format='PNG')
        return buf.getvalue()

    def _render_svg(self, qr: qrcode.QRCode, options: CodecOptions) -> bytes:
        if options.logo:
            self.logger.log("warn", "Logo compositing skipped for SVG output")

        img = qr.make_image(image_factory=_svg_factory(options))

        # viewBox keeps the module grid; only the rendered size changes
        root = img.get_image()
        root.set("width", f"{options.size_px}px")
        root.set("height", f"{options.size_px}px")

        buf = io.BytesIO()
        img.save(buf)
        return buf.getvalue()

    def encode(self, payload: str, options: CodecOptions) -> RenderResult:
        """Render payload as PNG or SVG."""
        qr = self._build(payload, options)

        if options.output_format is OutputFormat.SVG:
            data = self._render_svg(qr, options)
        else:
            data = self._render_png(qr, options)

        return RenderResult(
            data=data, mime_type=MIME_TYPES[options.output_format]
        )
