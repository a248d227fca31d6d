import logging

from dataclasses import dataclass
from typing import Callable

from yopt import const, graph, vt100
from yopt.opts import Options

Callback = Callable[[Options], None]

_logger = logging.getLogger(__name__)


@dataclass
class Cmd:
    shortName: str
    longName: str
    helpText: str
    callback: Callback


cmds: list[Cmd] = []


def cmd(shortName: str, longName: str, helpText: str):
    def wrap(fn: Callback):
        cmds.append(Cmd(shortName, longName, helpText, fn))
        return fn

    return wrap


def dump(opts: Options):
    vt100.title("Arguments")
    if opts.argCount() == 0:
        print("    (No arguments)")
    for i, arg in enumerate(opts.args()):
        print(vt100.indent(f"{i}: {vt100.token(arg)}"))
    print()

    vt100.title("Options")
    if len(opts.opts()) == 0:
        print("    (No options)")
    for key, value in sorted(opts.opts().items()):
        print(vt100.indent(f"{key} = {vt100.token(value)}"))
    print()


@cmd("d", "dump", "Tokenize a command line and show the result")
def dumpCmd(args: Options):
    maxLength = args.getInt("max-length", const.MAX_LENGTH)
    assert maxLength is not None

    cmdline = args.getString("cmd")
    if cmdline is None:
        _logger.info("No --cmd given, dumping the tool's own arguments")
        dump(args)
        return

    dump(Options(cmdline, maxLength=maxLength))


@cmd("g", "graph", "Show the tokenizer state graph")
def graphCmd(args: Options):
    output = args.getString("output", const.DEFAULT_GRAPH_FILE)
    assert output is not None

    path = graph.view(output, show=args.getBool("view"))
    print(f"State graph written to {path}")


@cmd("h", "help", "Show this help message")
def helpCmd(args: Options):
    usage()

    print()

    vt100.title("Description")
    print(f"    {const.DESCRIPTION}")

    print()
    vt100.title("Commands")
    for cmd in cmds:
        print(
            f" {vt100.GREEN}{cmd.shortName or ' '}{vt100.RESET}  {cmd.longName} - {cmd.helpText}"
        )

    print()
    vt100.title("Environment")
    print(f"    {const.EXTRA_ARGS_ENV}  extra arguments inserted before the command line")
    print(f"    {const.LOG_FILE_ENV}  file to write logs to")


@cmd("v", "version", "Show current version")
def versionCmd(args: Options):
    print(f"yopt v{const.VERSION_STR}")


def usage():
    print(f"Usage: {const.ARGV0} <command> [args...]")


def exec(args: Options):
    if args.argCount() == 0:
        raise RuntimeError("No command specified")

    name = args.arg(0)

    for c in cmds:
        if c.shortName == name or c.longName == name:
            _logger.debug(f"Running command '{c.longName}'")
            c.callback(args)
            return

    raise RuntimeError(f"Unknown command {name}")
