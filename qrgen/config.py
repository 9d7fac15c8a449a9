"""Configuration management."""

import os


# Bot Configuration
BOT_TOKEN = os.getenv("BOT_TOKEN", "")
BOT_WHITELIST = os.getenv("BOT_WHITELIST", "")

# Output locations
QR_OUTPUT_DIR = os.getenv("QR_OUTPUT_DIR", "qrcodes")
BATCH_OUTPUT_DIR = os.getenv("BATCH_OUTPUT_DIR", "batch_qrcodes")

# Render defaults
QR_DEFAULT_SIZE = int(os.getenv("QR_DEFAULT_SIZE", "300"))
QR_DEFAULT_MARGIN = int(os.getenv("QR_DEFAULT_MARGIN", "10"))
QR_DEFAULT_ERROR_CORRECTION = os.getenv("QR_DEFAULT_ERROR_CORRECTION", "high")
QR_LOGO_PATH = os.getenv("QR_LOGO_PATH", "")
QR_LOGO_WIDTH = int(os.getenv("QR_LOGO_WIDTH", "50"))

# Batch limits
BATCH_MAX_ROWS = int(os.getenv("BATCH_MAX_ROWS", "500"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
