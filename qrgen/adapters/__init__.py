"""Adapter implementations for the QR generator."""

from .qr_code_adapter import QRCodeAdapter
from .csv_source_adapter import CsvFileSource, CsvTextSource
from .telegram_bot_adapter import TelegramBotAdapter
from .stdout_adapter import StdoutAdapter

__all__ = [
    'QRCodeAdapter',
    'CsvFileSource',
    'CsvTextSource',
    'TelegramBotAdapter',
    'StdoutAdapter',
]
