"""Handler for /start command."""

from telegram import Update
from telegram.ext import ContextTypes
from ..interfaces import IMessagingProvider, ILogSink


class StartHandler:
    """Handler for /start command."""

    def __init__(self, messaging: IMessagingProvider, logger: ILogSink):
        self.messaging = messaging
        self.logger = logger

    async def handle(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /start command."""
        chat_id = update.effective_chat.id
        user_id = update.effective_user.id

        self.logger.log("info", f"User {user_id} started bot")

        welcome_msg = (
            "QR Code Bot\n\n"
            "/qr <kind> [options] field1 | field2 | ...\n\n"
            "Kinds:\n"
            "  text <text>\n"
            "  url <url>\n"
            "  phone <number>\n"
            "  sms <number> | <message>\n"
            "  whatsapp <number> | <message>\n"
            "  email <address> | <subject> | <body>\n"
            "  wifi <ssid> | <password> | <WPA|WEP|>\n"
            "  contact <name> | <phone> | <email> | <company>\n\n"
            "Options: --size=300 --color=#000 --bg=#fff "
            "--ec=low|medium|quartile|high --format=png|svg\n\n"
            "Send a CSV file (label,data per row) for batch generation. "
            "Caption it --header to skip the first row."
        )

        await self.messaging.send_message(chat_id, welcome_msg)
