"""Unit tests for bot handlers."""

import io
import zipfile
import pytest
from unittest.mock import Mock, AsyncMock
from qrgen.adapters import QRCodeAdapter
from qrgen.batch import BatchProcessor
from qrgen.handlers import BatchHandler, GenerateHandler, StartHandler
from qrgen.handlers.generate_handler import split_args
from qrgen.interfaces import RenderResult
from qrgen.pipeline import GeneratorPipeline


def _messaging():
    messaging = Mock()
    messaging.send_message = AsyncMock()
    messaging.send_photo = AsyncMock()
    messaging.send_document = AsyncMock()
    messaging.download_document = AsyncMock()
    return messaging


def _codec(result=None):
    codec = Mock()
    codec.encode.return_value = result or RenderResult(b"fake_png", "image/png")
    return codec


def _update(user_id=67890):
    update = Mock()
    update.effective_chat.id = 12345
    update.effective_user.id = user_id
    return update


def _context(*args):
    context = Mock()
    context.args = list(args)
    return context


@pytest.fixture(autouse=True)
def open_whitelist(monkeypatch):
    monkeypatch.delenv("BOT_WHITELIST", raising=False)


def test_split_args():
    """Options are separated from free text."""
    options, rest = split_args(["--size=200", "Net", "|", "--ec=low", "pw"])
    assert options == {"size": "200", "ec": "low"}
    assert rest == "Net | pw"


@pytest.mark.asyncio
async def test_start_handler_sends_usage():
    """Start handler lists the intent kinds."""
    messaging = _messaging()
    handler = StartHandler(messaging, Mock())

    await handler.handle(_update(), None)

    messaging.send_message.assert_called_once()
    call_args = messaging.send_message.call_args
    assert call_args[0][0] == 12345
    assert "wifi" in call_args[0][1]


@pytest.mark.asyncio
async def test_generate_handler_wifi_photo():
    """WiFi intent is encoded, colored and sent as a photo."""
    codec = _codec()
    messaging = _messaging()
    handler = GenerateHandler(GeneratorPipeline(codec, Mock()), messaging, Mock())

    await handler.handle(
        _update(), _context("wifi", "MyNet", "|", "pass123", "|", "WPA")
    )

    payload, options = codec.encode.call_args[0]
    assert payload == "WIFI:S:MyNet;T:WPA;P:pass123;;"
    assert options.foreground == (0, 150, 0)
    messaging.send_photo.assert_called_once_with(12345, b"fake_png")


@pytest.mark.asyncio
async def test_generate_handler_applies_options():
    """Command options override the preset."""
    codec = _codec(RenderResult(b"<svg/>", "image/svg+xml"))
    messaging = _messaging()
    handler = GenerateHandler(GeneratorPipeline(codec, Mock()), messaging, Mock())

    await handler.handle(
        _update(),
        _context("url", "--size=200", "--color=#f00", "--ec=bogus",
                 "--format=svg", "https://example.com")
    )

    payload, options = codec.encode.call_args[0]
    assert payload == "https://example.com"
    assert options.size_px == 200
    assert options.foreground == (255, 0, 0)
    assert options.error_correction.value == "high"
    messaging.send_document.assert_called_once_with(
        12345, b"<svg/>", "qrcode.svg"
    )


@pytest.mark.asyncio
async def test_generate_handler_saves_copy(tmp_path):
    """With an output dir a timestamped copy is written."""
    messaging = _messaging()
    handler = GenerateHandler(
        GeneratorPipeline(_codec(), Mock()), messaging, Mock(),
        output_dir=str(tmp_path / "qrcodes")
    )

    await handler.handle(_update(), _context("text", "Hello"))

    saved = list((tmp_path / "qrcodes").glob("qrcode_67890_*.png"))
    assert len(saved) == 1
    assert saved[0].read_bytes() == b"fake_png"


@pytest.mark.asyncio
async def test_generate_handler_empty_payload():
    """Missing data is reported without calling the codec."""
    codec = _codec()
    messaging = _messaging()
    handler = GenerateHandler(GeneratorPipeline(codec, Mock()), messaging, Mock())

    await handler.handle(_update(), _context("url"))

    codec.encode.assert_not_called()
    assert "Nothing to encode" in messaging.send_message.call_args[0][1]


@pytest.mark.asyncio
async def test_generate_handler_bad_color():
    """Malformed color is reported as an invalid option."""
    codec = _codec()
    messaging = _messaging()
    handler = GenerateHandler(GeneratorPipeline(codec, Mock()), messaging, Mock())

    await handler.handle(_update(), _context("text", "--color=zz", "hi"))

    codec.encode.assert_not_called()
    assert "Invalid option" in messaging.send_message.call_args[0][1]


@pytest.mark.asyncio
async def test_generate_handler_unknown_kind():
    """Unknown kinds list the valid ones."""
    messaging = _messaging()
    handler = GenerateHandler(GeneratorPipeline(_codec(), Mock()), messaging, Mock())

    await handler.handle(_update(), _context("fax", "123"))

    assert "contact" in messaging.send_message.call_args[0][1]


@pytest.mark.asyncio
async def test_generate_handler_unauthorized_user(monkeypatch):
    """Users outside the whitelist are rejected."""
    monkeypatch.setenv("BOT_WHITELIST", "11111,22222")
    codec = _codec()
    messaging = _messaging()
    handler = GenerateHandler(GeneratorPipeline(codec, Mock()), messaging, Mock())

    await handler.handle(_update(99999), _context("text", "hi"))

    codec.encode.assert_not_called()
    assert "access denied" in messaging.send_message.call_args[0][1].lower()


def _csv_update(caption=None):
    update = _update()
    update.effective_message.caption = caption
    update.effective_message.document.file_id = "file-1"
    return update


@pytest.mark.asyncio
async def test_batch_handler_runs_csv(tmp_path):
    """Uploaded CSV yields a summary and a zip of outputs."""
    messaging = _messaging()
    messaging.download_document.return_value = b"Name,Data\nA,x\nB,\nshort\n"
    logger = Mock()
    processor = BatchProcessor(GeneratorPipeline(_codec(), logger), logger)
    handler = BatchHandler(processor, messaging, logger, str(tmp_path))

    await handler.handle(_csv_update("--header"), None)

    messaging.download_document.assert_called_once_with("file-1")
    summary = messaging.send_message.call_args[0][1]
    assert "1 of 2" in summary
    assert "B:" in summary

    chat_id, data, filename = messaging.send_document.call_args[0]
    assert filename == "qrcodes.zip"
    assert zipfile.ZipFile(io.BytesIO(data)).namelist() == ["A.png"]


@pytest.mark.asyncio
async def test_batch_handler_row_limit(tmp_path):
    """Oversized uploads are refused before rendering."""
    codec = _codec()
    messaging = _messaging()
    messaging.download_document.return_value = b"a,1\nb,2\nc,3\n"
    processor = BatchProcessor(GeneratorPipeline(codec, Mock()), Mock())
    handler = BatchHandler(processor, messaging, Mock(), str(tmp_path), max_rows=2)

    await handler.handle(_csv_update(), None)

    codec.encode.assert_not_called()
    assert "Too many rows" in messaging.send_message.call_args[0][1]


@pytest.mark.asyncio
async def test_generate_handler_data_too_long():
    """Oversize data gets the capacity hint."""
    messaging = _messaging()
    pipeline = GeneratorPipeline(QRCodeAdapter(Mock()), Mock())
    handler = GenerateHandler(pipeline, messaging, Mock())

    await handler.handle(_update(), _context("text", "x" * 3000))

    reply = messaging.send_message.call_args[0][1]
    assert "Data too long (3000 chars)" in reply
    messaging.send_photo.assert_not_called()


@pytest.mark.asyncio
async def test_generate_handler_size_too_small():
    """A size below the module count is reported as an invalid option."""
    messaging = _messaging()
    pipeline = GeneratorPipeline(QRCodeAdapter(Mock()), Mock())
    handler = GenerateHandler(pipeline, messaging, Mock())

    await handler.handle(_update(), _context("text", "--size=40", "hello"))

    reply = messaging.send_message.call_args[0][1]
    assert "Invalid option" in reply
    assert "too small" in reply
    messaging.send_photo.assert_not_called()
