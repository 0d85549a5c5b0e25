"""Character-set conversion between named encodings."""

from __future__ import annotations

import codecs
import locale

from confsplit.errors import ValidationError

REPLACEMENT = "?"
ERRORS = "confsplit.question"


def _question_mark(exc: UnicodeError) -> tuple[str, int]:
    # one mark per undecodable sequence, one per unencodable character
    if isinstance(exc, UnicodeDecodeError):
        return REPLACEMENT, exc.end
    if isinstance(exc, UnicodeEncodeError):
        return REPLACEMENT * (exc.end - exc.start), exc.end
    raise exc


codecs.register_error(ERRORS, _question_mark)


def _lookup(name: str) -> codecs.CodecInfo:
    try:
        return codecs.lookup(name)
    except LookupError as exc:
        raise ValidationError(f"Unknown encoding: {name!r}") from exc


def convert_text(data: bytes, tocode: str, fromcode: str) -> bytes:
    """Re-encode *data* from *fromcode* to *tocode*.

    Byte sequences that are invalid in *fromcode*, and characters that
    *tocode* cannot represent, become ``?``. When both names refer to the
    same codec the input is returned untouched.

    Raises
    ------
    ValidationError
        If either encoding name is unknown.
    """
    if tocode.lower() == fromcode.lower():
        return data
    target = _lookup(tocode)
    source = _lookup(fromcode)
    if target.name == source.name:
        return data
    text = data.decode(source.name, errors=ERRORS)
    return text.encode(target.name, errors=ERRORS)


def utf8_to_locale(text: str) -> bytes:
    """Encode *text* for the terminal's preferred encoding."""
    if not text:
        return b""
    return convert_text(text.encode("utf-8"), locale.getpreferredencoding(False), "utf-8")
