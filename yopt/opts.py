import re
import logging

from typing import Generic, AnyStr, Optional, Sequence

from . import const, parser, text

_logger = logging.getLogger(__name__)

# --- Errors ------------------------------------------------------------ #


class OptionsError(Exception):
    pass


class MissingRequiredOption(OptionsError, LookupError):
    pass


class IndexOutOfRange(OptionsError, IndexError):
    pass


class UnrecognizedBooleanLiteral(OptionsError, ValueError):
    pass


# --- Literals ---------------------------------------------------------- #

TRUE_VALUES = frozenset(("TRUE", "true", "T", "YES", "yes", "Y", "y", "1"))
FALSE_VALUES = frozenset(("FALSE", "false", "F", "NO", "no", "N", "n", "0"))

_TRUE_BYTES = frozenset(v.encode("utf-8") for v in TRUE_VALUES)
_FALSE_BYTES = frozenset(v.encode("utf-8") for v in FALSE_VALUES)

_INT_RE = re.compile(rb"-?[0-9]+")

# Range of a 32-bit signed integer.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _tryParseInt(value: bytes) -> Optional[int]:
    """
    Parses a base-10 integer, returning None unless the whole value is one
    and it fits in 32 bits. Only a leading '-' is accepted as a sign.
    """
    if _INT_RE.fullmatch(value) is None:
        return None
    result = int(value)
    if result < INT_MIN or result > INT_MAX:
        return None
    return result


# --- Options ----------------------------------------------------------- #


class Options(Generic[AnyStr]):
    """
    Positional arguments and options parsed from a command line.

    Either an argument vector (a list or tuple, whose first element is the
    program name) or a single command-line string can be given. Each argv
    element is tokenized on its own, with whitespace kept inside values; a
    command-line string is tokenized as a whole, with whitespace separating
    tokens. Text can be wide (`str`) or narrow (`bytes`); keys are always
    looked up with a `str`.

    Parsing happens once, here; every accessor is a pure read.
    """

    _args: list[AnyStr]
    _opts: dict[AnyStr, AnyStr]
    _narrowText: bool
    _narrow: text.Narrower

    def __init__(
        self,
        src: AnyStr | Sequence[AnyStr],
        maxLength: int = const.MAX_LENGTH,
        narrow: text.Narrower = text.toUtf8,
    ):
        """
        Initializes a new `Options` object.

        Args:
            src: An argument vector or a command-line string.
            maxLength: The maximum number of characters scanned per argv element or string.
            narrow: Converts wide values to UTF-8 before integer parsing.
        """
        if isinstance(src, (str, bytes)):
            res = parser.parse(src, maxLength=maxLength)
            self._narrowText = not text.isWide(src)
        else:
            res = parser.parseArgv(src, maxLength=maxLength)
            # the program name is skipped by the parser, so it doesn't decide the width
            self._narrowText = any(not text.isWide(a) for a in src[1:])

        self._args = res.args
        self._opts = res.opts
        self._narrow = narrow

    def __repr__(self) -> str:
        return f"Options(args={self._args!r}, opts={self._opts!r})"

    def _key(self, key: str) -> AnyStr:
        if self._narrowText:
            return key.encode("utf-8")  # type: ignore
        return key  # type: ignore

    def hasOpt(self, key: str) -> bool:
        """Checks if the option was given, with or without a value."""
        return self._key(key) in self._opts

    def getString(self, key: str, default: Optional[AnyStr] = None) -> Optional[AnyStr]:
        """
        Returns the value of an option.

        Args:
            key: The option key, without dashes.
            default: The value to return when the option is absent.

        Returns:
            The option value (empty for a bare flag), or `default`.
        """
        return self._opts.get(self._key(key), default)

    def getRequiredString(self, key: str) -> AnyStr:
        value = self.getString(key)
        if value is None:
            raise MissingRequiredOption(f"Option '{key}' not provided")
        return value

    def getBool(self, key: str, default: bool = False) -> bool:
        """
        Returns the value of an option as a boolean.

        A bare flag is true. Otherwise the value must be one of the literals
        in `TRUE_VALUES` or `FALSE_VALUES`, compared case-sensitively.

        Raises:
            UnrecognizedBooleanLiteral: If the value is neither a true nor a false literal.
        """
        value = self.getString(key)
        if value is None:
            return default
        if len(value) == 0:
            return True

        if isinstance(value, bytes):
            trueValues, falseValues = _TRUE_BYTES, _FALSE_BYTES
        else:
            trueValues, falseValues = TRUE_VALUES, FALSE_VALUES

        if value in trueValues:
            return True
        elif value in falseValues:
            return False

        raise UnrecognizedBooleanLiteral(
            f"Option '{key}' has unrecognized boolean value {value!r}"
        )

    def getInt(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """
        Returns the value of an option as a base-10 integer.

        Args:
            key: The option key, without dashes.
            default: The value to return when the option is absent or not an integer.

        Returns:
            The parsed integer, or `default`.
        """
        value = self.getString(key)
        if value is None:
            return default

        if text.isWide(value):
            narrowed = self._narrow(value)
            if narrowed is None:
                _logger.debug(f"Option '{key}' could not be converted to UTF-8")
                return default
            value = narrowed

        result = _tryParseInt(value)
        if result is None:
            return default
        return result

    def arg(self, index: int) -> AnyStr:
        """Returns the positional argument at `index`."""
        if index < 0 or index >= len(self._args):
            raise IndexOutOfRange(
                f"Argument index {index} out of range ({len(self._args)} argument(s))"
            )
        return self._args[index]

    def argCount(self) -> int:
        return len(self._args)

    def args(self) -> list[AnyStr]:
        return list(self._args)

    def opts(self) -> dict[AnyStr, AnyStr]:
        return dict(self._opts)
