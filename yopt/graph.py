import logging

from . import const
from .parser import ParseState

_logger = logging.getLogger(__name__)

# Transitions of the tokenizer, as (from, to, condition).
TRANSITIONS: list[tuple[ParseState, ParseState, str]] = [
    (ParseState.NONE, ParseState.NONE, "whitespace"),
    (ParseState.NONE, ParseState.KEY_PREFIX, "-"),
    (ParseState.NONE, ParseState.QUOTED_VALUE, '"'),
    (ParseState.NONE, ParseState.VALUE, "other"),
    (ParseState.KEY_PREFIX, ParseState.LONG_KEY_PREFIX, "-"),
    (ParseState.KEY_PREFIX, ParseState.NONE, "whitespace"),
    (ParseState.KEY_PREFIX, ParseState.KEY, "other"),
    (ParseState.LONG_KEY_PREFIX, ParseState.NONE, "whitespace"),
    (ParseState.LONG_KEY_PREFIX, ParseState.KEY, "other"),
    (ParseState.KEY, ParseState.NONE, "whitespace / flag"),
    (ParseState.KEY, ParseState.VALUE, "="),
    (ParseState.VALUE, ParseState.QUOTED_VALUE, '" at value start'),
    (ParseState.VALUE, ParseState.NONE, "whitespace (multi-token) / store"),
    (ParseState.QUOTED_VALUE, ParseState.NONE, '" / store'),
]

# States that store a token when the input ends inside them.
FLUSHED: list[ParseState] = [
    ParseState.KEY,
    ParseState.VALUE,
    ParseState.QUOTED_VALUE,
]


def build():
    """Builds a graphviz digraph of the tokenizer states."""
    from graphviz import Digraph  # type: ignore

    g = Digraph("yopt", filename=const.DEFAULT_GRAPH_FILE)

    g.attr("graph", rankdir="LR", labelloc="t")
    g.attr("graph", label="<<B>yopt tokenizer</B>>")
    g.attr("node", shape="ellipse")

    g.node("start", "", shape="point")
    g.edge("start", ParseState.NONE.name)

    for state in ParseState:
        shape = "doublecircle" if state in FLUSHED else "ellipse"
        fillcolor = "lightblue" if state == ParseState.NONE else "lightgrey"
        g.node(state.name, state.name.lower(), shape=shape, style="filled", fillcolor=fillcolor)

    for src, dst, label in TRANSITIONS:
        g.edge(src.name, dst.name, label=label)

    return g


def view(filename: str = const.DEFAULT_GRAPH_FILE, show: bool = False) -> str:
    """
    Writes the tokenizer state graph and optionally opens it.

    Args:
        filename: Where to write the graphviz source.
        show: If True, render the graph and open it in the default viewer.

    Returns:
        The path of the written file.
    """
    g = build()
    if show:
        _logger.info(f"Rendering state graph to {filename}")
        return g.view(filename=filename)

    _logger.info(f"Saving state graph source to {filename}")
    return g.save(filename=filename)
