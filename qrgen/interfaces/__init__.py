"""Interface definitions for QR generation adapters."""

from .i_qr_codec import IQRCodec, CodecOptions, RenderResult
from .i_tabular_source import ITabularSource
from .i_messaging_provider import IMessagingProvider
from .i_log_sink import ILogSink

__all__ = [
    'IQRCodec',
    'CodecOptions',
    'RenderResult',
    'ITabularSource',
    'IMessagingProvider',
    'ILogSink',
]
