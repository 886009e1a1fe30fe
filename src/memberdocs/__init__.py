"""memberdocs - Normalized documentation metadata for module members."""

from memberdocs.base import (
    BehaviourResolver,
    DocumentationStore,
    MarkupRenderer,
    MemberDocsError,
    StoreContractError,
    UnknownCategoryError,
)
from memberdocs.client import DocsClient
from memberdocs.models import (
    MARKDOWN,
    MARKUP_TREE,
    SUPPORTED_FORMATS,
    CallbackCandidate,
    Category,
    Doc,
    DocEntry,
    FunctionDocEntry,
    Kind,
    MemberIdentity,
    ModuleDocEntry,
    ModuleDocs,
    RawDocRecord,
)

__all__ = [
    "DocsClient",
    "MemberDocsError",
    "StoreContractError",
    "UnknownCategoryError",
    "DocumentationStore",
    "MarkupRenderer",
    "BehaviourResolver",
    "MARKDOWN",
    "MARKUP_TREE",
    "SUPPORTED_FORMATS",
    "Category",
    "Kind",
    "Doc",
    "MemberIdentity",
    "RawDocRecord",
    "ModuleDocs",
    "FunctionDocEntry",
    "DocEntry",
    "ModuleDocEntry",
    "CallbackCandidate",
]
