"""QR Code Telegram Bot - Main Entry Point."""

import sys
from telegram.ext import Application, CommandHandler, MessageHandler, filters
from . import config
from .adapters import QRCodeAdapter, StdoutAdapter, TelegramBotAdapter
from .batch import BatchProcessor
from .generation_config import GenerationConfig, resolve_error_correction
from .handlers import BatchHandler, COMMAND_HANDLERS, StartHandler
from .pipeline import GeneratorPipeline


def build_base_config() -> GenerationConfig:
    """Render defaults from environment."""
    base = GenerationConfig(
        size_px=config.QR_DEFAULT_SIZE,
        margin_modules=config.QR_DEFAULT_MARGIN,
        error_correction=resolve_error_correction(
            config.QR_DEFAULT_ERROR_CORRECTION
        )
    )
    if config.QR_LOGO_PATH:
        base = base.with_logo(config.QR_LOGO_PATH, config.QR_LOGO_WIDTH)
    return base


def main() -> None:
    """Main bot initialization."""
    # Validate config (early return)
    if not config.BOT_TOKEN:
        print("ERROR: BOT_TOKEN not set", file=sys.stderr)
        sys.exit(1)

    # Mount adapters
    logger = StdoutAdapter(min_level=config.LOG_LEVEL)
    messaging = TelegramBotAdapter(bot_token=config.BOT_TOKEN)
    pipeline = GeneratorPipeline(QRCodeAdapter(logger), logger)
    base_config = build_base_config()

    logger.log("info", "Starting QR bot")
    logger.log("info", f"Output dir: {config.QR_OUTPUT_DIR}")

    app = Application.builder().token(config.BOT_TOKEN).build()

    # Register command handlers (table-driven)
    for command, handler_class in COMMAND_HANDLERS.items():
        if handler_class is StartHandler:
            handler = handler_class(messaging, logger)
        else:
            handler = handler_class(
                pipeline,
                messaging,
                logger,
                base_config=base_config,
                output_dir=config.QR_OUTPUT_DIR
            )

        app.add_handler(CommandHandler(command, handler.handle))
        logger.log("info", f"Registered handler: /{command}")

    # Batch runs use plain defaults, only the payload varies per row
    batch = BatchHandler(
        BatchProcessor(pipeline, logger),
        messaging,
        logger,
        output_root=config.BATCH_OUTPUT_DIR,
        max_rows=config.BATCH_MAX_ROWS
    )
    app.add_handler(
        MessageHandler(filters.Document.FileExtension("csv"), batch.handle)
    )
    logger.log("info", "Registered handler: CSV upload")

    logger.log("info", "Bot started - polling for updates")
    app.run_polling(allowed_updates=['message'])


if __name__ == "__main__":
    main()
