"""Telegram handlers for the QR bot."""

from .start_handler import StartHandler
from .generate_handler import GenerateHandler
from .batch_handler import BatchHandler

# Table-driven dispatch (suckless pattern)
COMMAND_HANDLERS = {
    'start': StartHandler,
    'help': StartHandler,
    'qr': GenerateHandler,
}

__all__ = [
    'COMMAND_HANDLERS',
    'StartHandler',
    'GenerateHandler',
    'BatchHandler',
]
