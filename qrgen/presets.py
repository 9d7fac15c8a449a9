"""Per-intent color presets and quick config helpers."""

from typing import Optional

from .generation_config import GenerationConfig
from .payloads import (
    Email,
    Intent,
    Phone,
    PlainText,
    Sms,
    Url,
    VCard,
    WhatsApp,
    Wifi,
    encode_intent,
)

WHITE = (255, 255, 255)

# Foreground, background per intent kind
INTENT_COLORS = {
    PlainText: ((0, 0, 0), (240, 240, 240)),
    Url: ((0, 0, 255), WHITE),
    Phone: ((0, 100, 200), WHITE),
    Sms: ((255, 193, 7), WHITE),
    WhatsApp: ((37, 211, 102), WHITE),
    Email: ((234, 67, 53), WHITE),
    Wifi: ((0, 150, 0), WHITE),
    VCard: ((128, 0, 128), WHITE),
}


def preset_config(
    intent: Intent,
    size_px: Optional[int] = None,
    base: Optional[GenerationConfig] = None
) -> GenerationConfig:
    """Config with the intent's payload and its kind's colors."""
    foreground, background = INTENT_COLORS[type(intent)]
    config = (base or GenerationConfig()).with_payload(encode_intent(intent))
    if size_px is not None:
        config = config.with_size(size_px)
    return config.with_colors(foreground, background)


def quick_config(
    payload: str, size_px: int = 300, logo: Optional[str] = None
) -> GenerationConfig:
    config = GenerationConfig(payload=payload, size_px=size_px)
    if logo:
        config = config.with_logo(logo, 50)
    return config
