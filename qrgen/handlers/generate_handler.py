"""Handler for /qr command."""

import time
from pathlib import Path
from typing import Optional
from telegram import Update
from telegram.ext import ContextTypes
from ..errors import CodecCapacityExceededError, EmptyPayloadError
from ..generation_config import ErrorCorrection, GenerationConfig
from ..interfaces import IMessagingProvider, ILogSink, RenderResult
from ..payloads import (
    Email,
    Phone,
    PlainText,
    Sms,
    Url,
    VCard,
    WhatsApp,
    Wifi,
)
from ..pipeline import GeneratorPipeline
from ..presets import preset_config
from .whitelist import is_authorized


def _field(fields: list, idx: int, default: str = "") -> str:
    return fields[idx].strip() if idx < len(fields) else default


# Table-driven intent parsing: (raw text, '|'-split fields) -> Intent
INTENT_PARSERS = {
    'text': lambda raw, f: PlainText(raw),
    'url': lambda raw, f: Url(raw),
    'phone': lambda raw, f: Phone(raw),
    'sms': lambda raw, f: Sms(_field(f, 0), _field(f, 1)),
    'whatsapp': lambda raw, f: WhatsApp(_field(f, 0), _field(f, 1)),
    'email': lambda raw, f: Email(_field(f, 0), _field(f, 1), _field(f, 2)),
    'wifi': lambda raw, f: Wifi(
        _field(f, 0), _field(f, 1), _field(f, 2, "WPA")
    ),
    'contact': lambda raw, f: VCard(
        _field(f, 0), _field(f, 1), _field(f, 2), _field(f, 3)
    ),
}


def split_args(args: list[str]) -> tuple[dict, str]:
    """Separate --key=value options from the free-form remainder."""
    options = {}
    rest = []
    for arg in args:
        if arg.startswith("--") and "=" in arg:
            key, value = arg[2:].split("=", 1)
            options[key.lower()] = value
        else:
            rest.append(arg)
    return options, " ".join(rest).strip()


class GenerateHandler:
    """Handler for /qr command - renders one QR code."""

    def __init__(
        self,
        pipeline: GeneratorPipeline,
        messaging: IMessagingProvider,
        logger: ILogSink,
        base_config: GenerationConfig = GenerationConfig(),
        output_dir: Optional[str] = None
    ):
        self.pipeline = pipeline
        self.messaging = messaging
        self.logger = logger
        self.base_config = base_config
        self.output_dir = output_dir

    def _apply_options(
        self, config: GenerationConfig, options: dict
    ) -> GenerationConfig:
        """Apply user overrides; bad values raise ValueError."""
        if "size" in options:
            config = config.with_size(int(options["size"]))
        if "color" in options:
            config = config.with_colors(options["color"])
        if "bg" in options:
            config = config.with_colors(config.foreground, options["bg"])
        if "ec" in options:
            token = options["ec"]
            if token.lower() not in {level.value for level in ErrorCorrection}:
                self.logger.log(
                    "warn", f"Unknown error correction '{token}', using high"
                )
            config = config.with_error_correction(token)
        if "format" in options:
            config = config.with_format(options["format"])
        return config

    def _save_copy(
        self, user_id: int, config: GenerationConfig, result: RenderResult
    ) -> None:
        """Keep a timestamped copy under output_dir."""
        out = Path(self.output_dir)
        out.mkdir(parents=True, exist_ok=True)
        ext = config.output_format.value
        name = f"qrcode_{user_id}_{int(time.time())}.{ext}"
        path = result.to_file(out / name)
        self.logger.log("info", f"Saved {path}")

    async def _reply_error(self, chat_id: int, text: str) -> None:
        await self.messaging.send_message(chat_id, f"❌ {text}")

    async def handle(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /qr command."""
        chat_id = update.effective_chat.id
        user_id = update.effective_user.id

        # Early validation
        if not is_authorized(user_id):
            self.logger.log("warn", f"Unauthorized user {user_id}")
            await self._reply_error(chat_id, "Access denied.")
            return

        args = list(context.args or [])
        if not args:
            await self._reply_error(
                chat_id, "Usage: /qr <kind> field1 | field2 ... (see /start)"
            )
            return

        kind = args[0].lower()
        parser = INTENT_PARSERS.get(kind)
        if parser is None:
            await self._reply_error(
                chat_id,
                f"Unknown kind '{kind}'. "
                f"Use one of: {', '.join(INTENT_PARSERS)}"
            )
            return

        options, raw = split_args(args[1:])
        fields = raw.split("|")

        try:
            intent = parser(raw, fields)
            config = self._apply_options(
                preset_config(intent, base=self.base_config), options
            )
            result = self.pipeline.render_config(config)

            if self.output_dir:
                self._save_copy(user_id, config, result)

            mime_type, data = result.to_inline_bytes()
            if mime_type == "image/png":
                await self.messaging.send_photo(chat_id, data)
            else:
                await self.messaging.send_document(chat_id, data, "qrcode.svg")
            self.logger.log("info", f"User {user_id} generated {kind} QR")

        except EmptyPayloadError:
            await self._reply_error(chat_id, "Nothing to encode, add data.")
        except CodecCapacityExceededError as e:
            await self._reply_error(
                chat_id,
                f"Data too long ({e.payload_length} chars). "
                "Try --ec=low or shorter data."
            )
        except ValueError as e:
            await self._reply_error(chat_id, f"Invalid option: {e}")
        except Exception as e:
            self.logger.log("error", f"QR generation failed: {e}")
            await self._reply_error(chat_id, f"Generation failed: {e}")
