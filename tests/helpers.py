"""In-memory collaborators for memberdocs tests."""

from memberdocs.base import BehaviourResolver, DocumentationStore, MarkupRenderer
from memberdocs.models import (
    MARKDOWN,
    Doc,
    Kind,
    MemberIdentity,
    ModuleDocs,
    RawDocRecord,
)


class FakeStore(DocumentationStore):
    """Dict-backed store that records every module it was asked for."""

    def __init__(self, modules=None):
        self.modules = dict(modules or {})
        self.fetched = []

    def add(self, module, docs):
        self.modules[module] = docs

    def fetch(self, module):
        self.fetched.append(module)
        return self.modules.get(module)


class FakeRenderer(MarkupRenderer):
    """Marks rendered text so tests can tell it went through the renderer."""

    def render(self, tree):
        return f"rendered:{tree}"


class FakeResolver(BehaviourResolver):
    def __init__(self, contracts=None):
        self.contracts = dict(contracts or {})
        self.calls = []

    def contracts_of(self, module):
        self.calls.append(module)
        return list(self.contracts.get(module, []))


class ExplodingResolver(BehaviourResolver):
    """Fails the test if behaviours are ever looked up."""

    def contracts_of(self, module):
        raise AssertionError(f"contracts_of({module!r}) should not be called")


def record(kind, name, arity, doc=Doc.NONE, signatures=(), anno=1, metadata=None):
    return RawDocRecord(
        kind=Kind(kind),
        identity=MemberIdentity(name, arity),
        anno=anno,
        signatures=tuple(signatures),
        doc=doc,
        metadata=dict(metadata or {}),
    )


def fun(name, arity, doc=Doc.NONE, signatures=None, **kwargs):
    """Function record; signature defaults to name(a0, a1, ...)."""
    if signatures is None:
        args = ", ".join(f"a{i}" for i in range(arity))
        signatures = [f"{name}({args})"]
    return record("function", name, arity, doc=doc, signatures=signatures, **kwargs)


def callback(name, arity, doc=Doc.NONE, **kwargs):
    return record("callback", name, arity, doc=doc, **kwargs)


def module_docs(*records, format=MARKDOWN, moduledoc=Doc.NONE, anno=1, metadata=None):
    return ModuleDocs(
        format=format,
        anno=anno,
        moduledoc=moduledoc,
        metadata=dict(metadata or {}),
        records=tuple(records),
    )
