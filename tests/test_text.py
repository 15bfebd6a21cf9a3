from __future__ import annotations

from pathlib import Path

import pytest

from printable_shell_command.errors import DecodingError
from printable_shell_command.text import to_text, to_text_lossy


def test_valid_tokens_convert_unchanged() -> None:
    assert to_text("héllo") == "héllo"
    assert to_text("héllo".encode("utf-8")) == "héllo"
    assert to_text(Path("a b")) == "a b"
    assert to_text_lossy(b"plain") == "plain"


def test_invalid_bytes_fail_strictly() -> None:
    with pytest.raises(DecodingError) as exc:
        to_text(b"a\xffb")
    assert exc.value.token == b"a\xffb"
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_surrogateescaped_str_fails_strictly() -> None:
    with pytest.raises(DecodingError):
        to_text("a\udcffb")


def test_lossy_replaces_invalid_sequences() -> None:
    assert to_text_lossy(b"a\xffb") == "a�b"
    assert to_text_lossy("a\udcffb") == "a�b"


def test_lossy_never_fails_on_lone_surrogates() -> None:
    text = to_text_lossy("x\ud800y")
    assert text.startswith("x") and text.endswith("y")
    assert "�" in text
    text.encode("utf-8")


def test_lossy_replaces_each_invalid_code_point_once() -> None:
    assert to_text_lossy("a\udcffb\ud800c") == "a�b�c"
    assert to_text_lossy("x\ud800y") == "x�y"
