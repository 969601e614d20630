import io
import os
import signal
from unittest.mock import patch

import pytest

from minitalk.protocol import encode_message
from minitalk.server import Server, main


def _signals(message):
    for bits in encode_message(message):
        for bit in bits:
            yield signal.SIGUSR2 if bit else signal.SIGUSR1


@pytest.fixture
def restore_handlers():
    saved = {s: signal.getsignal(s) for s in (signal.SIGUSR1, signal.SIGUSR2)}
    yield
    for sig, handler in saved.items():
        signal.signal(sig, handler)


def test_handle_writes_decoded_text():
    out = io.StringIO()
    server = Server(stream=out)
    for sig in _signals("hello"):
        server.handle(sig, None)
    assert out.getvalue() == "hello"


def test_handle_returns_text_only_on_completed_character():
    server = Server(stream=io.StringIO())
    results = [server.handle(sig) for sig in _signals("a")]
    assert results[:7] == [""] * 7
    assert results[7] == "a"


def test_multibyte_character_is_written_once_complete():
    out = io.StringIO()
    server = Server(stream=out)
    results = [server.handle(sig) for sig in _signals("\u00e9")]
    assert results[7] == ""
    assert results[15] == "\u00e9"
    assert out.getvalue() == "\u00e9"


def test_invalid_byte_is_replaced():
    out = io.StringIO()
    server = Server(stream=out)
    for sig in _signals(b"\xff"):
        server.handle(sig)
    assert out.getvalue() == "\ufffd"


def test_handle_rejects_other_signals():
    with pytest.raises(ValueError):
        Server(stream=io.StringIO()).handle(signal.SIGINT)


def test_install_receives_real_signals(restore_handlers):
    out = io.StringIO()
    server = Server(stream=out)
    server.install()
    assert signal.getsignal(signal.SIGUSR1) == server.handle
    for sig in _signals("ok"):
        os.kill(os.getpid(), sig)
    assert out.getvalue() == "ok"


def test_main_prints_banner_and_stops_on_interrupt(capsys, restore_handlers):
    with patch("minitalk.server.signal.pause", side_effect=KeyboardInterrupt):
        assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("GREAT! You have activated the Server\n")
    assert f"Server PID: {os.getpid()}\n" in out