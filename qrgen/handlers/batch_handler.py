"""Handler for CSV uploads (batch generation)."""

import time
from pathlib import Path
from telegram import Update
from telegram.ext import ContextTypes
from ..adapters.csv_source_adapter import CsvTextSource
from ..batch import BatchProcessor, BatchReport, archive_report
from ..interfaces import IMessagingProvider, ILogSink
from .whitelist import is_authorized


def format_report(report: BatchReport) -> str:
    """Summary text listing each item's outcome."""
    lines = [
        f"✅ {report.total_success} of {len(report.entries)} QR codes generated"
    ]
    for entry in report.failures:
        lines.append(f"❌ {entry.label or '(empty)'}: {entry.outcome.reason}")
    return "\n".join(lines)


class BatchHandler:
    """Handler for CSV documents - one QR code per row."""

    def __init__(
        self,
        processor: BatchProcessor,
        messaging: IMessagingProvider,
        logger: ILogSink,
        output_root: str,
        max_rows: int = 500
    ):
        self.processor = processor
        self.messaging = messaging
        self.logger = logger
        self.output_root = Path(output_root)
        self.max_rows = max_rows

    async def handle(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle uploaded CSV."""
        chat_id = update.effective_chat.id
        user_id = update.effective_user.id
        message = update.effective_message

        # Early validation
        if not is_authorized(user_id):
            self.logger.log("warn", f"Unauthorized user {user_id}")
            await self.messaging.send_message(chat_id, "❌ Access denied.")
            return

        skip_header = (message.caption or "").strip() == "--header"
        self.logger.log("info", f"User {user_id} uploaded batch CSV")

        try:
            raw = await self.messaging.download_document(
                message.document.file_id
            )
            source = CsvTextSource(raw.decode("utf-8-sig"), skip_header)
            rows = list(source.rows())

            if len(rows) > self.max_rows:
                await self.messaging.send_message(
                    chat_id,
                    f"❌ Too many rows ({len(rows)}), limit is {self.max_rows}."
                )
                return

            output_dir = self.output_root / f"{user_id}_{int(time.time())}"
            report = self.processor.run_rows(rows, output_dir)

            await self.messaging.send_message(chat_id, format_report(report))
            if report.total_success:
                await self.messaging.send_document(
                    chat_id, archive_report(report), "qrcodes.zip"
                )

        except UnicodeDecodeError:
            await self.messaging.send_message(
                chat_id, "❌ CSV must be UTF-8 encoded."
            )
        except Exception as e:
            self.logger.log("error", f"Batch failed: {e}")
            await self.messaging.send_message(chat_id, f"❌ Batch failed: {e}")
