"""Data models for member documentation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Union

MARKDOWN = "text/markdown"
MARKUP_TREE = "application/erlang+html"

# Formats a renderer exists for; anything else is rejected as a whole
SUPPORTED_FORMATS = frozenset({MARKDOWN, MARKUP_TREE})

DOC_LOCALE = "en"


class Kind(str, Enum):
    """Kind tag of a documented member."""

    FUNCTION = "function"
    MACRO = "macro"
    CALLBACK = "callback"
    MACROCALLBACK = "macrocallback"
    TYPE = "type"
    MODULE = "module"


FUNCTION_KINDS = frozenset({Kind.FUNCTION, Kind.MACRO})
CALLBACK_KINDS = frozenset({Kind.CALLBACK, Kind.MACROCALLBACK})


class Doc(Enum):
    """Documentation payload sentinels."""

    HIDDEN = "hidden"  # author suppressed the docs
    NONE = "none"  # nothing was written


class Category(str, Enum):
    """What a caller can ask for about one module."""

    MODULEDOC = "moduledoc"
    DOCS = "docs"  # functions and macros
    TYPE_DOCS = "type_docs"
    CALLBACK_DOCS = "callback_docs"


# A locale mapping ({"en": ...}) or one of the sentinels
DocPayload = Union[dict[str, Any], Doc]

# Present text, False for hidden, None for absent
DocText = Union[str, Literal[False], None]


@dataclass(frozen=True)
class MemberIdentity:
    """(name, arity) key of a member within a module."""

    name: str
    arity: int

    def __str__(self) -> str:
        return f"{self.name}/{self.arity}"


@dataclass(frozen=True)
class RawDocRecord:
    """One member's documentation as read from the store."""

    kind: Kind
    identity: MemberIdentity
    anno: Any  # store-specific source position
    signatures: tuple[str, ...] = ()
    doc: DocPayload = Doc.NONE
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ModuleDocs:
    """Everything the store knows about one module."""

    format: str
    anno: Any
    moduledoc: DocPayload
    metadata: dict[str, Any] = field(default_factory=dict)
    records: tuple[RawDocRecord, ...] = ()


@dataclass(frozen=True)
class FunctionDocEntry:
    """Normalized function or macro documentation."""

    identity: MemberIdentity
    line: int | None
    kind: Kind
    args: tuple[str, ...]  # parsed from the member's own signature
    doc: DocText
    metadata: dict[str, Any]


@dataclass(frozen=True)
class DocEntry:
    """Normalized callback, macrocallback or type documentation."""

    identity: MemberIdentity
    line: int | None
    kind: Kind
    doc: DocText
    metadata: dict[str, Any]


@dataclass(frozen=True)
class ModuleDocEntry:
    """Normalized module overview."""

    line: int | None
    doc: DocText
    metadata: dict[str, Any]


@dataclass(frozen=True)
class CallbackCandidate:
    """Contract-level documentation offered to an undocumented implementation.

    ``metadata`` already carries ``implementing`` naming the contract module.
    """

    identity: MemberIdentity
    contract: str
    format: str
    signatures: tuple[str, ...]
    doc: DocPayload
    metadata: dict[str, Any]
