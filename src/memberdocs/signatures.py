"""Call signature parsing.

Signatures are read with Python's expression grammar after rewriting the
Elixir spellings it lacks: ``?``/``!`` name suffixes and ``\\\\`` default
arguments. Arguments come back as their original source text, in order.
"""

from __future__ import annotations

import ast
import re
from dataclasses import dataclass

_QUESTION = "__md_q__"
_BANG = "__md_b__"
_DEFAULT = ":="

# ? or ! ending an identifier, but not the start of !=
_SUFFIX_RE = re.compile(r"(?<=[A-Za-z0-9_])([?!])(?!=)")


@dataclass(frozen=True)
class CallSignature:
    """Parsed call expression."""

    name: str
    args: tuple[str, ...]


def _to_python(text: str) -> str | None:
    if _QUESTION in text or _BANG in text or _DEFAULT in text:
        return None
    text = _SUFFIX_RE.sub(lambda m: _QUESTION if m.group(1) == "?" else _BANG, text)
    return text.replace("\\\\", _DEFAULT)


def _from_python(text: str) -> str:
    return text.replace(_DEFAULT, "\\\\").replace(_QUESTION, "?").replace(_BANG, "!")


def _parse(source: str) -> CallSignature | None:
    node = ast.parse(source, mode="eval").body
    if isinstance(node, ast.Name):
        return CallSignature(name=_from_python(node.id), args=())
    if not isinstance(node, ast.Call) or not isinstance(node.func, ast.Name):
        return None

    args = sorted(
        [*node.args, *node.keywords], key=lambda n: (n.lineno, n.col_offset)
    )
    segments = [ast.get_source_segment(source, arg) for arg in args]
    if any(segment is None for segment in segments):
        return None
    return CallSignature(
        name=_from_python(node.func.id),
        args=tuple(_from_python(segment) for segment in segments),
    )


def parse_call_signature(text: str) -> CallSignature | None:
    """Parse signature text such as ``fetch(map, key, default \\\\ nil)``.

    Returns None if the text is not a single call on a plain name, never
    raises. A bare name is read as a call with no arguments.
    """
    source = _to_python(text.strip())
    if source is None:
        return None
    try:
        return _parse(source)
    except (SyntaxError, ValueError, RecursionError, MemoryError):
        return None
