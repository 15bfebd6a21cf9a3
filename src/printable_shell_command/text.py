"""Strict and lossy conversion of raw tokens (str/bytes/PathLike) to text."""

import os
import re
from typing import Union

from printable_shell_command.errors import DecodingError

Token = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]

# Surrogates that surrogateescape cannot map back to a byte.
_LONE_SURROGATE_RE = re.compile("[\ud800-\udc7f\udd00-\udfff]")


def raw_token(token: Token) -> Union[str, bytes]:
    return os.fspath(token)


def to_text(token: Token) -> str:
    token = raw_token(token)
    if isinstance(token, bytes):
        try:
            return token.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodingError(token) from e

    # str from os.fsdecode()/sys.argv may hold surrogateescape'd bytes
    try:
        token.encode("utf-8")
    except UnicodeEncodeError as e:
        raise DecodingError(token) from e
    return token


def to_text_lossy(token: Token) -> str:
    token = raw_token(token)
    if isinstance(token, str):
        token = _LONE_SURROGATE_RE.sub("\ufffd", token)
        token = token.encode("utf-8", "surrogateescape")
    return token.decode("utf-8", "replace")
