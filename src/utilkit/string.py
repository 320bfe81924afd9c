"""String helpers: case conversion, UTF-8/base64 codec and blank checks.

All case conversions share one tokenizer. A "word" is an acronym run
(uppercase letters not followed by lowercase), an optionally capitalized
lowercase run, or a run of digits:

    >>> _split_words("parseHTTPResponse2xx")
    ['parse', 'HTTP', 'Response', '2', 'xx']
"""

from __future__ import annotations

import base64
import binascii
import codecs
import logging
import re

from utilkit.errors import InvalidArgumentError, UnsupportedEnvironmentError
from utilkit.std import is_defined

logger = logging.getLogger(__name__)

WORD_PATTERN: re.Pattern[str] = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+", re.ASCII)

UTF8 = "utf-8"


def capitalize(value: str) -> str:
    """Uppercase the first character only; the rest is left untouched."""
    return value[:1].upper() + value[1:]


def _split_words(value: str) -> list[str]:
    stripped = value.strip()
    if not stripped:
        return []
    return WORD_PATTERN.findall(stripped)


def _slugify(value: str, separator: str) -> str:
    return separator.join(word.lower() for word in _split_words(value))


def snake_case(value: str) -> str:
    """``"HelloWorld" -> "hello_world"``."""
    return _slugify(value, "_")


def kebab_case(value: str) -> str:
    """``"fooBar2" -> "foo-bar-2"``."""
    return _slugify(value, "-")


def camel_case(value: str) -> str:
    """``"hello world" -> "helloWorld"``; no words gives ``""``."""
    words = _split_words(value)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(capitalize(word.lower()) for word in rest)


# --- UTF-8 / base64 codec ---


def _utf8_codec() -> codecs.CodecInfo:
    try:
        return codecs.lookup(UTF8)
    except LookupError as exc:
        msg = "UTF-8 encoding is not supported in this environment"
        logger.debug("codec lookup failed for %s", UTF8)
        raise UnsupportedEnvironmentError(msg) from exc


def _base64_to_bytes(value: str) -> bytes:
    compact = "".join(value.split())
    padded = compact + "=" * (-len(compact) % 4)
    try:
        return base64.b64decode(padded, validate=False)
    except (binascii.Error, ValueError) as exc:
        msg = f"Invalid base64 input: {value!r}"
        raise InvalidArgumentError(msg) from exc


def base64_encode(value: str) -> str:
    """Encode the UTF-8 bytes of *value* as base64 text."""
    raw, _ = _utf8_codec().encode(value)
    return base64.b64encode(raw).decode("ascii")


def base64_decode(value: str) -> str:
    """Decode base64 text back to a string; invalid UTF-8 becomes U+FFFD.

    Raises:
        InvalidArgumentError: If *value* is not decodable base64.
    """
    text, _ = _utf8_codec().decode(_base64_to_bytes(value), "replace")
    return text


# --- Blank checks ---


def trim(value: str | None) -> str:
    """Strip surrounding whitespace; ``None`` becomes ``""``."""
    return value.strip() if is_defined(value) else ""


def is_blank(value: str | None) -> bool:
    return not is_defined(value) or len(value.strip()) == 0


def is_not_blank(value: str | None) -> bool:
    return is_defined(value) and len(value.strip()) > 0
