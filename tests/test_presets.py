"""Unit tests for per-kind presets."""

from qrgen.generation_config import GenerationConfig, LogoSpec
from qrgen.payloads import PlainText, WhatsApp, Wifi
from qrgen.presets import INTENT_COLORS, preset_config, quick_config


def test_every_intent_kind_has_colors():
    """All encodable kinds carry a preset."""
    from qrgen.payloads import PAYLOAD_ENCODERS
    assert set(INTENT_COLORS) == set(PAYLOAD_ENCODERS)


def test_preset_sets_payload_and_colors():
    """Preset fills the payload and the kind's colors."""
    config = preset_config(Wifi("MyNet", "pass123", "WPA"))
    assert config.payload == "WIFI:S:MyNet;T:WPA;P:pass123;;"
    assert config.foreground == (0, 150, 0)
    assert config.background == (255, 255, 255)


def test_preset_keeps_base_settings():
    """Base config geometry survives unless a size is given."""
    base = GenerationConfig(size_px=420, margin_modules=2)

    config = preset_config(PlainText("hi"), base=base)
    assert config.size_px == 420
    assert config.margin_modules == 2
    assert config.background == (240, 240, 240)

    assert preset_config(WhatsApp("+1"), size_px=200, base=base).size_px == 200


def test_quick_config_logo():
    """Quick config adds a 50px logo only when given."""
    assert quick_config("Hello World!", 200).logo is None
    config = quick_config("https://github.com", logo="logo.png")
    assert config.logo == LogoSpec("logo.png", 50)
    assert config.size_px == 300
