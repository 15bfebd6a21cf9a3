from __future__ import annotations

import re

import pytest

from printable_shell_command.escape import (
    ARG_UNSAFE_CHARS,
    PROGRAM_NAME_UNSAFE_CHARS,
    Role,
    escape,
    needs_quoting,
    quote,
)
from printable_shell_command.options import Quoting


def _unquote(quoted: str) -> str:
    assert quoted.startswith("'") and quoted.endswith("'")
    return re.sub(r"\\(.)", r"\1", quoted[1:-1], flags=re.DOTALL)


@pytest.mark.parametrize(
    "token", ["-avz", "atempo=0.5", "./dist/web/", "host:~/path", "ünïcödé", "a,b"]
)
def test_safe_tokens_are_unchanged(token: str) -> None:
    assert escape(token) == token


@pytest.mark.parametrize("char", sorted(ARG_UNSAFE_CHARS))
def test_each_unsafe_char_triggers_quoting(char: str) -> None:
    token = f"a{char}b"
    escaped = escape(token)
    assert escaped.startswith("'") and escaped.endswith("'")
    assert _unquote(escaped) == token


def test_backslashes_are_escaped_before_quotes() -> None:
    assert quote("it's") == "'it\\'s'"
    assert quote("a\\b") == "'a\\\\b'"
    assert quote("\\'") == "'\\\\\\''"
    assert _unquote(quote("\\'")) == "\\'"


def test_equals_only_unsafe_for_program_names() -> None:
    assert PROGRAM_NAME_UNSAFE_CHARS == ARG_UNSAFE_CHARS | {"="}
    assert not needs_quoting("FOO=bar", Role.ARGUMENT)
    assert needs_quoting("FOO=bar", Role.PROGRAM_NAME)
    assert escape("THIS_LOOKS_LIKE_AN=env-var", Role.PROGRAM_NAME) == (
        "'THIS_LOOKS_LIKE_AN=env-var'"
    )
    assert escape("THIS_LOOKS_LIKE_AN=env-var") == "THIS_LOOKS_LIKE_AN=env-var"


def test_extra_safe_quotes_everything() -> None:
    assert escape("-avz", quoting=Quoting.EXTRA_SAFE) == "'-avz'"
    assert escape("rsync", Role.PROGRAM_NAME, Quoting.EXTRA_SAFE) == "'rsync'"
    assert escape("a'b", quoting=Quoting.EXTRA_SAFE) == "'a\\'b'"


def test_empty_token_is_left_bare() -> None:
    assert escape("") == ""
    assert escape("", quoting=Quoting.EXTRA_SAFE) == "''"


def test_newline_is_not_in_unsafe_set() -> None:
    assert escape("a\nb") == "a\nb"
