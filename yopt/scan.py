from typing import Generic, AnyStr

from . import const, text


class Scan(Generic[AnyStr]):
    """
    A bounded scanner over narrow (`bytes`) or wide (`str`) text.

    Characters are always reported as one-character `str`, so callers can
    classify them without caring about the width of the source. The scanner
    never reads past `maxLength` characters and reports '\\0' once the end of
    the buffer or the bound is reached.
    """

    _src: AnyStr
    _off: int
    _end: int

    def __init__(self, src: AnyStr, off: int = 0, maxLength: int = const.MAX_LENGTH):
        """
        Initializes a new `Scan` object.

        Args:
            src: The text to scan.
            off: The starting offset within the text.
            maxLength: The maximum number of characters to scan.
        """
        self._src = src
        self._off = off
        self._end = min(len(src), off + max(maxLength, 0))

    def curr(self) -> str:
        """
        Returns the current character being scanned.

        Returns:
            The current character, or '\\0' if at the end of the text or at the bound.
        """
        if self.eof():
            return "\0"
        return text.char(self._src, self._off)

    def next(self) -> str:
        """
        Advances the scanner to the next character.

        Returns:
            The new current character, or '\\0' if at the end of the text.
        """
        if self.eof():
            return "\0"

        self._off += 1
        return self.curr()

    def eof(self) -> bool:
        """
        Checks if the scanner is at the end of the text or at the bound.

        Returns:
            True if no character remains to be scanned, False otherwise.
        """
        return self._off >= self._end

    def off(self) -> int:
        """Returns the current offset within the text."""
        return self._off

    def slice(self, start: int, end: int) -> AnyStr:
        """Returns a copy of the text between `start` and `end`."""
        return self._src[start:end]

    def truncated(self) -> bool:
        """
        Checks if the scanner stopped at the bound while the text goes on.

        Returns:
            True if characters past the bound were never scanned, False otherwise.
        """
        return self.eof() and self._end < len(self._src)
