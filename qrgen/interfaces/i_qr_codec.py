"""QR codec interface (adapter pattern)."""

import base64
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Union

from ..colors import RGB
from ..errors import IoFailureError
from ..generation_config import ErrorCorrection, LogoSpec, OutputFormat


@dataclass(frozen=True)
class CodecOptions:
    """Encode options handed to the codec for one render."""
    size_px: int
    margin_modules: int
    foreground: RGB
    background: RGB
    error_correction: ErrorCorrection
    output_format: OutputFormat = OutputFormat.PNG
    logo: Optional[LogoSpec] = None


@dataclass(frozen=True)
class RenderResult:
    """Encoded image bytes plus their mime type."""
    data: bytes
    mime_type: str

    def to_file(self, path: Union[str, Path]) -> Path:
        """Write bytes to path, return the path."""
        path = Path(path)
        try:
            path.write_bytes(self.data)
        except OSError as e:
            raise IoFailureError(f"cannot write {path}: {e}") from e
        return path

    def to_inline_bytes(self) -> tuple[str, bytes]:
        """Mime type and bytes for direct transmission."""
        return self.mime_type, self.data

    def to_data_uri(self) -> str:
        """Embeddable data: URI."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


class IQRCodec(Protocol):
    """Interface for QR encoding and rendering."""

    def encode(self, payload: str, options: CodecOptions) -> RenderResult:
        """Render payload as an image."""
        ...
