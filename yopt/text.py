from typing import AnyStr, Callable, Optional

# Narrow text is `bytes`, wide text is `str`.
Narrower = Callable[[str], Optional[bytes]]


def isWide(s: str | bytes) -> bool:
    return isinstance(s, str)


def char(s: str | bytes, off: int) -> str:
    """Returns the character at `off` as a one-character `str`, whatever the width of `s`."""
    if isinstance(s, bytes):
        return chr(s[off])
    return s[off]


def like(literal: str, ref: AnyStr) -> AnyStr:
    """Converts an ASCII literal to the width of `ref`."""
    if isinstance(ref, bytes):
        return literal.encode("utf-8")
    return literal  # type: ignore


def toUtf8(s: str) -> Optional[bytes]:
    """
    Converts wide text to its UTF-8 narrow form.

    Returns None when the text can't be encoded (e.g. lone surrogates).
    """
    try:
        return s.encode("utf-8")
    except UnicodeEncodeError:
        return None
