import os
import sys
import logging

from typing import Optional

from . import cmds, const, vt100
from .opts import (
    Options,
    OptionsError,
    MissingRequiredOption,
    IndexOutOfRange,
    UnrecognizedBooleanLiteral,
    TRUE_VALUES,
    FALSE_VALUES,
)
from .parser import ParseResult, ParseState, parse, parseArgv, stripQuotes

__all__ = [
    "Options",
    "OptionsError",
    "MissingRequiredOption",
    "IndexOutOfRange",
    "UnrecognizedBooleanLiteral",
    "TRUE_VALUES",
    "FALSE_VALUES",
    "ParseResult",
    "ParseState",
    "parse",
    "parseArgv",
    "stripQuotes",
    "main",
]


class logger:
    @staticmethod
    def setup(args: Options):
        if args.getBool("verbose"):
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            return

        logFile = os.environ.get(const.LOG_FILE_ENV, None)
        if logFile:
            logDir = os.path.dirname(logFile)
            if logDir:
                os.makedirs(logDir, exist_ok=True)

            logging.basicConfig(
                level=logging.INFO,
                filename=logFile,
                filemode="w",
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv

    try:
        extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
        argv = argv[:1] + (extra.split(" ") if extra else []) + argv[1:]

        args = Options(argv)
        logger.setup(args)
        cmds.exec(args)
        return 0

    except (RuntimeError, OptionsError) as e:
        logging.exception(e)
        vt100.error(str(e))
        cmds.usage()
        return 1

    except KeyboardInterrupt:
        print()
        return 1
