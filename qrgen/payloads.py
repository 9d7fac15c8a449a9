"""Intent types and their payload encoders."""

import re
from dataclasses import dataclass
from typing import Callable, Union
from urllib.parse import quote, quote_plus


@dataclass(frozen=True)
class PlainText:
    """Free text."""
    text: str


@dataclass(frozen=True)
class Url:
    """Web link, encoded as-is."""
    url: str


@dataclass(frozen=True)
class Phone:
    """Phone number to dial."""
    number: str


@dataclass(frozen=True)
class Sms:
    """SMS to a number with optional prefilled body."""
    number: str
    message: str = ""


@dataclass(frozen=True)
class WhatsApp:
    """WhatsApp chat link with optional prefilled text."""
    number: str
    message: str = ""


@dataclass(frozen=True)
class Email:
    """mailto link with optional subject and body."""
    address: str
    subject: str = ""
    body: str = ""


@dataclass(frozen=True)
class Wifi:
    """WiFi network credentials. Empty encryption means open network."""
    ssid: str
    password: str = ""
    encryption: str = "WPA"


@dataclass(frozen=True)
class VCard:
    """Contact card."""
    name: str
    phone: str = ""
    email: str = ""
    company: str = ""


Intent = Union[PlainText, Url, Phone, Sms, WhatsApp, Email, Wifi, VCard]

_WIFI_RESERVED = re.compile(r'([\\;,:"])')
_VCARD_RESERVED = re.compile(r"([\\;,])")


def _escape_wifi(value: str) -> str:
    return _WIFI_RESERVED.sub(r"\\\1", value)


def _escape_vcard(value: str) -> str:
    return _VCARD_RESERVED.sub(r"\\\1", value).replace("\n", "\\n")


def encode_text(intent: PlainText, escape_reserved: bool = False) -> str:
    return intent.text


def encode_url(intent: Url, escape_reserved: bool = False) -> str:
    return intent.url


def encode_phone(intent: Phone, escape_reserved: bool = False) -> str:
    return f"tel:{intent.number}"


def encode_sms(intent: Sms, escape_reserved: bool = False) -> str:
    data = f"sms:{intent.number}"
    if intent.message:
        data += "?body=" + quote_plus(intent.message)
    return data


def encode_whatsapp(intent: WhatsApp, escape_reserved: bool = False) -> str:
    """Build a wa.me link; only digits and a leading '+' survive."""
    number = intent.number.strip()
    digits = re.sub(r"\D", "", number)
    if number.startswith("+"):
        digits = "+" + digits

    data = f"https://wa.me/{digits}"
    if intent.message:
        data += "?text=" + quote_plus(intent.message)
    return data


def encode_email(intent: Email, escape_reserved: bool = False) -> str:
    """Build a mailto URI (RFC 6068 escaping, space as %20)."""
    params = []
    if intent.subject:
        params.append("subject=" + quote(intent.subject, safe=""))
    if intent.body:
        params.append("body=" + quote(intent.body, safe=""))

    data = f"mailto:{intent.address}"
    if params:
        data += "?" + "&".join(params)
    return data


def encode_wifi(intent: Wifi, escape_reserved: bool = False) -> str:
    """Build a WIFI: config string.

    Field values are copied verbatim unless escape_reserved is set, in
    which case backslash, semicolon, comma, colon and double quote are
    backslash-escaped as scanners expect.
    """
    ssid, password = intent.ssid, intent.password
    if escape_reserved:
        ssid, password = _escape_wifi(ssid), _escape_wifi(password)
    return f"WIFI:S:{ssid};T:{intent.encryption};P:{password};;"


def encode_vcard(intent: VCard, escape_reserved: bool = False) -> str:
    """Build a vCard 3.0 block without a trailing newline."""
    fields = [intent.name, intent.phone, intent.email, intent.company]
    if escape_reserved:
        fields = [_escape_vcard(value) for value in fields]
    name, phone, email, company = fields

    lines = [
        "BEGIN:VCARD",
        "VERSION:3.0",
        f"FN:{name}",
        f"TEL:{phone}",
        f"EMAIL:{email}",
    ]
    if company:
        lines.append(f"ORG:{company}")
    lines.append("END:VCARD")
    return "\n".join(lines)


# Table-driven dispatch, one encoder per intent type
PAYLOAD_ENCODERS: dict[type, Callable[..., str]] = {
    PlainText: encode_text,
    Url: encode_url,
    Phone: encode_phone,
    Sms: encode_sms,
    WhatsApp: encode_whatsapp,
    Email: encode_email,
    Wifi: encode_wifi,
    VCard: encode_vcard,
}


def encode_intent(intent: Intent, escape_reserved: bool = False) -> str:
    """Map an intent to its canonical payload string."""
    encoder = PAYLOAD_ENCODERS.get(type(intent))
    if encoder is None:
        raise TypeError(f"unsupported intent: {type(intent).__name__}")
    return encoder(intent, escape_reserved)
