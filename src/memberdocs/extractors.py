"""Documentation extractors: format gate, canonical text, entry normalization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from memberdocs.base import MarkupRenderer, StoreContractError
from memberdocs.models import (
    CALLBACK_KINDS,
    DOC_LOCALE,
    FUNCTION_KINDS,
    MARKDOWN,
    MARKUP_TREE,
    SUPPORTED_FORMATS,
    Doc,
    DocEntry,
    DocPayload,
    DocText,
    FunctionDocEntry,
    Kind,
    ModuleDocEntry,
    ModuleDocs,
    RawDocRecord,
)
from memberdocs.signatures import parse_call_signature

log = logging.getLogger(__name__)


def check_format(docs: ModuleDocs | None, module: str = "") -> ModuleDocs | None:
    """Pass docs through unchanged if their format is supported, else None.

    An unsupported format drops the whole module rather than showing text
    rendered the wrong way.
    """
    if docs is None:
        log.debug("No documentation available for %s", module)
        return None
    if docs.format not in SUPPORTED_FORMATS:
        log.debug("Rejecting %s: unsupported format %r", module, docs.format)
        return None
    return docs


def has_docs(doc: DocPayload) -> bool:
    """True if the payload carries text in the documentation locale.

    Raises:
        StoreContractError: If the payload is neither a locale mapping nor
            a Doc sentinel.
    """
    if isinstance(doc, Mapping):
        return DOC_LOCALE in doc
    if isinstance(doc, Doc):
        return False
    raise StoreContractError(f"Unrecognized documentation payload: {doc!r}")


def extract_docs(doc: DocPayload, format: str, renderer: MarkupRenderer) -> DocText:
    """Convert a documentation payload to its canonical text state.

    Returns:
        The markdown text, False if the docs are explicitly hidden, or None
        if there is nothing in the documentation locale.

    Raises:
        StoreContractError: If the payload is neither a locale mapping nor
            a Doc sentinel.
    """
    if isinstance(doc, Mapping):
        if DOC_LOCALE not in doc:
            return None
        if format == MARKDOWN:
            return doc[DOC_LOCALE]
        if format == MARKUP_TREE:
            return renderer.render(doc[DOC_LOCALE])
        return None
    if doc is Doc.HIDDEN:
        return False
    if doc is Doc.NONE:
        return None
    raise StoreContractError(f"Unrecognized documentation payload: {doc!r}")


def anno_line(anno: Any) -> int | None:
    """Extract a positive line number from a store source position."""
    if isinstance(anno, bool):
        return None
    if isinstance(anno, int):
        line = anno
    elif isinstance(anno, (tuple, list)) and anno:
        line = anno[0]
    elif isinstance(anno, Mapping):
        line = anno.get("line", anno.get("location"))
        if isinstance(line, (tuple, list)) and line:
            line = line[0]
    else:
        return None
    if isinstance(line, int) and not isinstance(line, bool) and line > 0:
        return line
    return None


def signature_args(record: RawDocRecord) -> tuple[str, ...]:
    """Argument list from the record's own signature, or () if unusable."""
    if not record.signatures:
        return ()
    parsed = parse_call_signature(" ".join(record.signatures))
    if parsed is None or parsed.name != record.identity.name:
        return ()
    return parsed.args


def map_doc_entry(
    record: RawDocRecord, format: str, renderer: MarkupRenderer
) -> FunctionDocEntry | DocEntry:
    """Normalize one member record."""
    doc = extract_docs(record.doc, format, renderer)
    line = anno_line(record.anno)

    if record.kind in FUNCTION_KINDS:
        return FunctionDocEntry(
            identity=record.identity,
            line=line,
            kind=record.kind,
            args=signature_args(record),
            doc=doc,
            metadata=dict(record.metadata),
        )
    if record.kind in CALLBACK_KINDS or record.kind is Kind.TYPE:
        return DocEntry(
            identity=record.identity,
            line=line,
            kind=record.kind,
            doc=doc,
            metadata=dict(record.metadata),
        )
    raise StoreContractError(
        f"Unexpected {record.kind!r} record for {record.identity}"
    )


def map_moduledoc(docs: ModuleDocs, renderer: MarkupRenderer) -> ModuleDocEntry:
    """Normalize the module overview."""
    return ModuleDocEntry(
        line=anno_line(docs.anno),
        doc=extract_docs(docs.moduledoc, docs.format, renderer),
        metadata=dict(docs.metadata),
    )


def filter_kinds(docs: ModuleDocs, kinds: frozenset[Kind]) -> list[RawDocRecord]:
    """Records of the given kinds, in store order."""
    return [r for r in docs.records if r.kind in kinds]
