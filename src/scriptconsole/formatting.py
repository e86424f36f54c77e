"""Message rendering: printf-style substitution and value inspection."""

from __future__ import annotations

import datetime
import numbers
import re
import sys
from collections.abc import Sequence
from typing import Any

from rich.pretty import pretty_repr

# Synthetic format used when the first argument is not a string.
POSITIONAL_FORMAT = "%s"

PRETTY_INDENT = 2


# Conversion directives understood by sprintf: flags, width, precision, type.
DIRECTIVE = re.compile(r"%([-#0 +]*\d*(?:\.\d+)?)([a-zA-Z%])")

CONVERSIONS = frozenset("diouxXeEfFgGcrsa")


def inspect(value: Any, pretty_print: bool = True) -> str:
    """Render any value as text.

    With ``pretty_print`` containers are expanded one item per line;
    without it the rendering always stays on a single line, even for
    objects whose own ``repr`` spans several lines.

    Args:
        value: Object to render
        pretty_print: Expand nested containers over several lines

    Returns:
        Textual representation; never raises
    """
    try:
        if pretty_print:
            return pretty_repr(value, indent_size=PRETTY_INDENT, expand_all=True)
        text = pretty_repr(value, max_width=sys.maxsize)
    except Exception:
        try:
            text = repr(value)
        except Exception:
            text = object.__repr__(value)
        if pretty_print:
            return text
    return " ".join(part.strip() for part in text.splitlines())


def sprintf(fmt: str, *values: Any) -> str:
    """Substitute ``values`` into the ``%`` directives of ``fmt``.

    A format without values is returned as is, so literal percent signs
    survive in plain messages. Directives left without a value stay in
    the text; values left without a directive are appended, separated by
    spaces. An unknown conversion raises ``ValueError`` and a value that
    does not fit its conversion raises ``TypeError``.
    """
    if not values:
        return fmt
    remaining = list(values)

    def substitute(match: re.Match[str]) -> str:
        spec, conversion = match.groups()
        if conversion == "%":
            return "%"
        if conversion not in CONVERSIONS:
            raise ValueError(f"unsupported format character {conversion!r}")
        if not remaining:
            return match.group(0)
        return f"%{spec}{conversion}" % (remaining.pop(0),)

    text = DIRECTIVE.sub(substitute, fmt)
    return " ".join([text, *(str(value) for value in remaining)])


def _prepare_arg(arg: Any) -> Any:
    if arg is None:
        return "null"
    if isinstance(arg, bool):
        return "true" if arg else "false"
    if isinstance(arg, (str, numbers.Number)):
        return arg
    if isinstance(arg, (datetime.date, datetime.time)):
        return str(arg)
    if isinstance(arg, re.Pattern):
        return arg.pattern
    return inspect(arg, pretty_print=False)


def prepare_args(args: Sequence[Any]) -> list[Any]:
    """Turn raw call arguments into a format string followed by its values."""
    result: list[Any] = []
    if args and not isinstance(args[0], str):
        result.append(POSITIONAL_FORMAT)
    result.extend(_prepare_arg(arg) for arg in args)
    return result


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return inspect(value, pretty_print=False)


def render_fallback(exc: BaseException, args: Sequence[Any]) -> str:
    """Describe a failed substitution together with the raw arguments."""
    raw = ",".join(_safe_str(arg) for arg in args)
    return f"{type(exc).__name__}: {exc}: {raw}"


def format_message(args: Sequence[Any]) -> str:
    """Format console arguments into a single message.

    Substitution errors never escape; they are reported inside the
    returned message instead.
    """
    try:
        prepared = prepare_args(args)
        if not prepared:
            return ""
        return sprintf(prepared[0], *prepared[1:])
    except Exception as exc:
        return render_fallback(exc, args)


__all__ = [
    "format_message",
    "inspect",
    "prepare_args",
    "render_fallback",
    "sprintf",
]
