"""Percent codec for tag terms.

Encoded form: token characters pass through, every other character
(including '%' itself) is written as UTF-8 bytes in '%XX' escapes with
uppercase hex digits.

    encode("22:00 live") -> "22%3A00%20live"
    decode("22%3a00%20live") -> "22:00 live"

encode() is total and deterministic. Encoding an already encoded string
escapes its '%' again ("%3A" -> "%253A"); canonical forms always come
from decoded terms.
"""

from __future__ import annotations

from gigtags.components.grammar.grammar_rules_comp import ESCAPE, is_token_char
from gigtags.helpers.exceptions import InvalidEncodingError, InvalidEscapeError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def encode(term: str) -> str:
    """
    Percent-encode every character outside the token charset.

    Lone surrogates are encoded byte-wise so encode() never fails; such
    terms do not decode back since they are not valid text.

    Args:
        term: Decoded term text

    Returns:
        Encoded term using uppercase hex escapes
    """
    parts: list[str] = []
    for ch in term:
        if ch != ESCAPE and is_token_char(ch):
            parts.append(ch)
            continue
        parts.extend(f"%{byte:02X}" for byte in ch.encode("utf-8", "surrogatepass"))
    return "".join(parts)


def decode(encoded: str) -> str:
    """
    Reverse encode().

    Hex digits are accepted in either case. Characters that are not part
    of an escape are taken literally.

    Args:
        encoded: Percent-encoded term

    Returns:
        Decoded term

    Raises:
        InvalidEscapeError: If '%' is not followed by two hex digits
        InvalidEncodingError: If the decoded bytes are not valid UTF-8
    """
    if ESCAPE not in encoded:
        return encoded

    buffer = bytearray()
    i = 0
    length = len(encoded)
    while i < length:
        ch = encoded[i]
        if ch != ESCAPE:
            buffer.extend(ch.encode("utf-8", "surrogatepass"))
            i += 1
            continue
        escape = encoded[i + 1 : i + 3]
        if len(escape) != 2 or not all(digit in _HEX_DIGITS for digit in escape):
            msg = f"Invalid escape sequence at offset {i}: {encoded[i : i + 3]!r}"
            raise InvalidEscapeError(msg)
        buffer.append(int(escape, 16))
        i += 3

    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"Decoded term is not valid UTF-8: {e.reason}"
        raise InvalidEncodingError(msg) from e

