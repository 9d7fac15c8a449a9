"""Error types raised by the generation core."""


class QRGenError(Exception):
    """Base class for generation failures."""


class EmptyPayloadError(QRGenError):
    """Raised when there is no data to encode."""

    def __init__(self, message: str = "payload is empty"):
        super().__init__(message)


class CodecCapacityExceededError(QRGenError):
    """Payload does not fit a QR symbol at the requested level."""

    def __init__(self, payload_length: int, error_correction: str):
        self.payload_length = payload_length
        self.error_correction = error_correction
        super().__init__(
            f"payload of {payload_length} chars exceeds QR capacity "
            f"at error correction '{error_correction}'"
        )


class InvalidColorTokenError(QRGenError, ValueError):
    """Malformed hex color token."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid color token: {token!r}")


class IoFailureError(QRGenError):
    """Directory creation or file write failed."""


class SizeTooSmallError(QRGenError, ValueError):
    """Requested image side cannot hold one pixel per module."""

    def __init__(self, size_px: int, modules: int):
        self.size_px = size_px
        self.modules = modules
        super().__init__(
            f"size {size_px}px is too small for {modules} modules, "
            f"use at least {modules}px"
        )
