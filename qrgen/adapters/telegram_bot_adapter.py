"""Telegram Bot API adapter."""

import io
from telegram import Bot


class TelegramBotAdapter:
    """Adapter for Telegram Bot API, used as the QR bot front end."""

    def __init__(self, bot_token: str):
        self.bot = Bot(token=bot_token)

    async def send_message(self, chat_id: int, text: str) -> None:
        """Send text message."""
        await self.bot.send_message(chat_id=chat_id, text=text)

    async def send_photo(self, chat_id: int, photo: bytes) -> None:
        """Send rendered PNG."""
        await self.bot.send_photo(chat_id=chat_id, photo=io.BytesIO(photo))

    async def send_document(
        self, chat_id: int, file_data: bytes, filename: str
    ) -> None:
        """Send SVG output or batch archive as a file."""
        document = io.BytesIO(file_data)
        document.name = filename
        await self.bot.send_document(
            chat_id=chat_id,
            document=document,
            filename=filename
        )

    async def download_document(self, file_id: str) -> bytes:
        """Download an uploaded CSV."""
        tg_file = await self.bot.get_file(file_id)
        data = await tg_file.download_as_bytearray()
        return bytes(data)
