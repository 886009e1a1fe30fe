"""Markdown rendering for markup-tree documentation.

A tree is a list of nodes. A node is either a plain string or an element
``[tag, attrs, children]`` (the JSON form of the markup-tree doc format).
"""

from __future__ import annotations

from typing import Any

from memberdocs.base import MarkupRenderer

_HEADINGS = {f"h{n}": "#" * n for n in range(1, 7)}
_EMPHASIS = {"em": "*", "i": "*", "strong": "**", "b": "**"}
_BLOCK_TAGS = frozenset({"p", "div", "pre", "ul", "ol", "li", "dl", "dt", "dd", *_HEADINGS})


def is_element(node: Any) -> bool:
    return (
        isinstance(node, (list, tuple))
        and len(node) == 3
        and isinstance(node[0], str)
        and isinstance(node[1], (dict, type(None)))
        and isinstance(node[2], (list, tuple))
    )


def _is_block(node: Any) -> bool:
    return is_element(node) and node[0] in _BLOCK_TAGS


class TreeMarkdownRenderer(MarkupRenderer):
    """Renders markup trees to markdown."""

    def render(self, tree: Any) -> str:
        if isinstance(tree, str) or is_element(tree):
            tree = [tree]
        return "\n\n".join(self._blocks(tree))

    def _blocks(self, nodes: list) -> list[str]:
        """Render a mixed node list, grouping inline runs into paragraphs."""
        blocks: list[str] = []
        run: list[Any] = []
        for node in [*nodes, None]:
            if node is not None and not _is_block(node):
                run.append(node)
                continue
            if run:
                blocks.append(self._inline(run).strip())
                run = []
            if node is not None:
                blocks.append(self._block(node))
        return [b for b in blocks if b]

    def _block(self, node: Any) -> str:
        tag, _, children = node
        if tag in _HEADINGS:
            return f"{_HEADINGS[tag]} {self._inline(children).strip()}"
        if tag == "pre":
            return f"```\n{self._text(children).strip()}\n```"
        if tag in ("ul", "ol"):
            items = [c for c in children if is_element(c)]
            lines = []
            for n, item in enumerate(items, start=1):
                marker = f"{n}." if tag == "ol" else "*"
                body = "\n\n".join(self._blocks(item[2]))
                lines.append(f"{marker} " + body.replace("\n", "\n  "))
            return "\n".join(lines)
        if tag == "dt":
            return f"**{self._inline(children).strip()}**"
        if tag == "dd":
            return "\n\n".join("  " + b for b in self._blocks(children))
        return "\n\n".join(self._blocks(children))

    def _inline(self, nodes: list) -> str:
        parts = []
        for node in nodes:
            if not is_element(node):
                parts.append(str(node))
                continue
            tag, attrs, children = node
            if tag == "br":
                parts.append("  \n")
            elif tag == "code":
                parts.append(f"`{self._text(children)}`")
            elif tag in _EMPHASIS:
                mark = _EMPHASIS[tag]
                parts.append(f"{mark}{self._inline(children)}{mark}")
            elif tag == "a" and attrs and "href" in attrs:
                parts.append(f"[{self._inline(children)}]({attrs['href']})")
            else:
                parts.append(self._inline(children))
        return "".join(parts)

    def _text(self, nodes: list) -> str:
        """Text content with all markup dropped."""
        return "".join(self._text(n[2]) if is_element(n) else str(n) for n in nodes)
