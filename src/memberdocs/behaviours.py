"""Documentation fallback through behavioural contracts.

A function that implements a contract callback often carries no docs of its
own (``@impl true`` style). For those functions the contract's callback docs
are shown instead, tagged with ``implementing`` in the metadata. The
function's own signature is always kept: contracts frequently omit or
generalize argument names.

When several contracts document the same (name, arity), the first contract
in the order the resolver returns them wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from memberdocs.base import BehaviourResolver, DocumentationStore, MarkupRenderer
from memberdocs.extractors import check_format, filter_kinds, has_docs, map_doc_entry
from memberdocs.models import (
    CALLBACK_KINDS,
    FUNCTION_KINDS,
    CallbackCandidate,
    FunctionDocEntry,
    MemberIdentity,
    ModuleDocs,
    RawDocRecord,
)

log = logging.getLogger(__name__)


def callback_documentation(
    store: DocumentationStore, contract: str
) -> dict[MemberIdentity, CallbackCandidate]:
    """Callback docs a contract module offers to its implementations.

    Returns:
        Candidates keyed by (name, arity), empty if the contract has no
        usable documentation.
    """
    docs = check_format(store.fetch(contract), contract)
    if docs is None:
        return {}

    candidates: dict[MemberIdentity, CallbackCandidate] = {}
    for record in filter_kinds(docs, CALLBACK_KINDS):
        if record.identity in candidates:
            continue
        candidates[record.identity] = CallbackCandidate(
            identity=record.identity,
            contract=contract,
            format=docs.format,
            signatures=record.signatures,
            doc=record.doc,
            metadata={**record.metadata, "implementing": contract},
        )
    return candidates


def undocumented(records: Iterable[RawDocRecord]) -> set[MemberIdentity]:
    """Identities whose own docs are hidden, missing, or lack the doc locale."""
    return {r.identity for r in records if not has_docs(r.doc)}


def docs_from_behaviours(
    module: str,
    wanted: set[MemberIdentity],
    store: DocumentationStore,
    resolver: BehaviourResolver,
) -> dict[MemberIdentity, CallbackCandidate]:
    """Find contract docs for the wanted identities.

    The resolver is not consulted at all when nothing is wanted.
    """
    if not wanted:
        return {}

    found: dict[MemberIdentity, CallbackCandidate] = {}
    for contract in resolver.contracts_of(module):
        for identity, candidate in callback_documentation(store, contract).items():
            if identity in wanted and identity not in found:
                found[identity] = candidate

    log.debug(
        "%s: %d of %d undocumented functions resolved through behaviours",
        module,
        len(found),
        len(wanted),
    )
    return found


def get_fun_docs(
    module: str,
    docs: ModuleDocs,
    store: DocumentationStore,
    resolver: BehaviourResolver,
    renderer: MarkupRenderer,
) -> list[FunctionDocEntry]:
    """Normalize a module's functions and macros, filling gaps from behaviours."""
    records = filter_kinds(docs, FUNCTION_KINDS)
    fallbacks = docs_from_behaviours(module, undocumented(records), store, resolver)

    entries: list[FunctionDocEntry] = []
    for record in records:
        candidate = fallbacks.get(record.identity)
        if candidate is None:
            entries.append(map_doc_entry(record, docs.format, renderer))
            continue

        log.debug("%s: %s documented by %s", module, record.identity, candidate.contract)
        # Keep the record's own signatures; take docs and metadata from the contract
        substituted = replace(record, doc=candidate.doc, metadata=candidate.metadata)
        entries.append(map_doc_entry(substituted, candidate.format, renderer))
    return entries
