from enum import Enum
import dataclasses as dt
import logging

from typing import Generic, AnyStr, Iterable, Optional

from . import const, text
from .scan import Scan

_logger = logging.getLogger(__name__)

# --- Tokens ------------------------------------------------------------ #


class ParseState(Enum):
    """
    States of the tokenizer.
    """

    NONE = 0
    KEY_PREFIX = 1
    LONG_KEY_PREFIX = 2
    KEY = 3
    VALUE = 4
    QUOTED_VALUE = 5


@dt.dataclass(frozen=True)
class Span:
    """
    A half-open range `[start, end)` over the scanned text.

    Attributes:
        start: Offset of the first character of the token.
        end: Offset one past the last character of the token.
    """

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dt.dataclass
class ParseResult(Generic[AnyStr]):
    """
    The positional arguments and options produced by the tokenizer.

    Attributes:
        args: Positional arguments, in encounter order.
        opts: Option values by key. Flags map to an empty value.
    """

    args: list[AnyStr] = dt.field(default_factory=list)
    opts: dict[AnyStr, AnyStr] = dt.field(default_factory=dict)

    def _flag(self, s: Scan[AnyStr], key: Span):
        # An existing value is kept, a bare flag only marks the key as present.
        self.opts.setdefault(s.slice(key.start, key.end), s.slice(key.start, key.start))

    def _store(self, s: Scan[AnyStr], key: Optional[Span], value: Span):
        if key is not None and len(key) > 0:
            self.opts[s.slice(key.start, key.end)] = s.slice(value.start, value.end)
        else:
            self.args.append(s.slice(value.start, value.end))


# --- Tokenizer --------------------------------------------------------- #


def _isEol(c: str) -> bool:
    return c == "\0"


def _isWhitespace(c: str) -> bool:
    return c in " \t\r\n"


def _isDash(c: str) -> bool:
    return c == "-"


def _isQuote(c: str) -> bool:
    return c == '"'


def _isEqualSign(c: str) -> bool:
    return c == "="


def parseInto(
    res: ParseResult[AnyStr],
    src: AnyStr,
    singleValue: bool = False,
    maxLength: int = const.MAX_LENGTH,
) -> ParseResult[AnyStr]:
    """
    Tokenizes `src` in a single forward pass and adds what it finds to `res`.

    Args:
        res: The result to add arguments and options to.
        src: The text to tokenize.
        singleValue: If True, whitespace does not end an unquoted value. Used
            for argv elements, which the shell already split.
        maxLength: The maximum number of characters to scan.

    Returns:
        `res`, for chaining.
    """
    s = Scan(src, maxLength=maxLength)
    ps = ParseState.NONE
    start = 0
    key: Optional[Span] = None

    while True:
        c = s.curr()
        off = s.off()

        if ps == ParseState.NONE:
            if _isWhitespace(c):
                pass
            elif _isDash(c):
                ps = ParseState.KEY_PREFIX
                if key is not None:
                    res._flag(s, key)
            elif _isQuote(c):
                ps = ParseState.QUOTED_VALUE
                start = off
            else:
                ps = ParseState.VALUE
                start = off

        elif ps == ParseState.KEY_PREFIX:
            if _isDash(c):
                ps = ParseState.LONG_KEY_PREFIX
            elif _isWhitespace(c):
                ps = ParseState.NONE
            else:
                ps = ParseState.KEY
                start = off

        elif ps == ParseState.LONG_KEY_PREFIX:
            if _isWhitespace(c):
                ps = ParseState.NONE
            else:
                ps = ParseState.KEY
                start = off

        elif ps == ParseState.KEY:
            if _isWhitespace(c):
                ps = ParseState.NONE
                if off > start:
                    res._flag(s, Span(start, off))
            elif _isEqualSign(c):
                ps = ParseState.VALUE
                key = Span(start, off)
                start = off + 1

        elif ps == ParseState.VALUE:
            if _isQuote(c) and start == off:
                ps = ParseState.QUOTED_VALUE
            elif _isWhitespace(c) and not singleValue:
                ps = ParseState.NONE
                res._store(s, key, Span(start, off))
                key = None

        elif ps == ParseState.QUOTED_VALUE:
            if _isQuote(c):
                ps = ParseState.NONE
                res._store(s, key, Span(start + 1, off))
                key = None

        if _isEol(c):
            # flush whatever token is still open
            if ps == ParseState.KEY and start < off:
                res._flag(s, Span(start, off))
            elif ps == ParseState.VALUE:
                if key is not None or off > start:
                    res._store(s, key, Span(start, off))
            elif ps == ParseState.QUOTED_VALUE:
                res._store(s, key, Span(start + 1, off))
            break

        s.next()

    if s.truncated():
        _logger.info(f"Input truncated at {maxLength} characters")

    return res


def parse(
    src: AnyStr, singleValue: bool = False, maxLength: int = const.MAX_LENGTH
) -> ParseResult[AnyStr]:
    """Tokenizes a combined command line into a new `ParseResult`."""
    res: ParseResult[AnyStr] = ParseResult()
    parseInto(res, src, singleValue, maxLength)
    _logger.debug(
        f"Parsed {len(res.args)} argument(s) and {len(res.opts)} option(s) from {src!r}"
    )
    return res


def parseArgv(
    argv: Iterable[AnyStr], maxLength: int = const.MAX_LENGTH
) -> ParseResult[AnyStr]:
    """Tokenizes each element of an argument vector, the program name excepted."""
    res: ParseResult[AnyStr] = ParseResult()
    for i, arg in enumerate(argv):
        if i == 0:
            continue
        parseInto(res, arg, singleValue=True, maxLength=maxLength)
    _logger.debug(
        f"Parsed {len(res.args)} argument(s) and {len(res.opts)} option(s) from argv"
    )
    return res


def stripQuotes(token: AnyStr) -> AnyStr:
    """
    Removes one leading and one trailing double quote, independently.

    Args:
        token: The token to clean up.

    Returns:
        The token without its surrounding quotes.
    """
    quote = text.like('"', token)
    if token[:1] == quote:
        token = token[1:]
    if token[-1:] == quote:
        token = token[:-1]
    return token
