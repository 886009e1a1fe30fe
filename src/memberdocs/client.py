"""Memberdocs client - normalized documentation for one module at a time."""

from __future__ import annotations

from typing import Union

from memberdocs.base import (
    BehaviourResolver,
    DocumentationStore,
    MarkupRenderer,
    UnknownCategoryError,
)
from memberdocs.behaviours import callback_documentation, get_fun_docs
from memberdocs.extractors import check_format, filter_kinds, map_doc_entry, map_moduledoc
from memberdocs.models import (
    CALLBACK_KINDS,
    CallbackCandidate,
    Category,
    DocEntry,
    FunctionDocEntry,
    Kind,
    MemberIdentity,
    ModuleDocEntry,
)

Documentation = Union[ModuleDocEntry, list[FunctionDocEntry], list[DocEntry]]


class DocsClient:
    """Client for normalized module documentation.

    Every call fetches fresh data from the store; nothing is cached between
    calls. Unavailable documentation (unknown module, built without docs,
    unsupported format) comes back as None rather than an exception.

    Example:
        docs = DocsClient(store, renderer, resolver)

        overview = docs.get_documentation("MyApp.Worker", "moduledoc")
        functions = docs.get_documentation("MyApp.Worker", Category.DOCS)

        for entry in functions or []:
            print(entry.identity, entry.args, entry.doc)
    """

    def __init__(
        self,
        store: DocumentationStore,
        renderer: MarkupRenderer,
        resolver: BehaviourResolver,
    ) -> None:
        """Initialize the client.

        Args:
            store: Source of raw documentation chunks
            renderer: Converts markup-tree docs to markdown
            resolver: Lists the behaviours a module implements
        """
        self.store = store
        self.renderer = renderer
        self.resolver = resolver

    def get_documentation(
        self, module: str, category: Category | str
    ) -> Documentation | None:
        """Get one category of normalized documentation for a module.

        Args:
            module: Module identifier
            category: One of Category, or its string value
                ("moduledoc", "docs", "type_docs", "callback_docs")

        Returns:
            ModuleDocEntry for "moduledoc", otherwise a list of entries in
            store order. None if the module's documentation is unavailable.

        Raises:
            UnknownCategoryError: If category is not a known category.
        """
        try:
            category = Category(category)
        except ValueError:
            raise UnknownCategoryError(
                f"Unknown documentation category: {category!r}", module
            ) from None

        docs = check_format(self.store.fetch(module), module)
        if docs is None:
            return None

        if category is Category.MODULEDOC:
            return map_moduledoc(docs, self.renderer)
        if category is Category.DOCS:
            return get_fun_docs(module, docs, self.store, self.resolver, self.renderer)
        if category is Category.CALLBACK_DOCS:
            kinds = CALLBACK_KINDS
        else:
            kinds = frozenset({Kind.TYPE})
        return [
            map_doc_entry(record, docs.format, self.renderer)
            for record in filter_kinds(docs, kinds)
        ]

    def get_moduledoc(self, module: str) -> ModuleDocEntry | None:
        """Get the module overview."""
        return self.get_documentation(module, Category.MODULEDOC)

    def get_function_docs(self, module: str) -> list[FunctionDocEntry] | None:
        """Get function and macro docs, with behaviour fallback applied."""
        return self.get_documentation(module, Category.DOCS)

    def get_type_docs(self, module: str) -> list[DocEntry] | None:
        """Get type docs."""
        return self.get_documentation(module, Category.TYPE_DOCS)

    def get_callback_docs(self, module: str) -> list[DocEntry] | None:
        """Get callback and macrocallback docs as declared by the module itself."""
        return self.get_documentation(module, Category.CALLBACK_DOCS)

    def contract_callback_docs(
        self, module: str
    ) -> dict[MemberIdentity, CallbackCandidate]:
        """Callback docs a behaviour module offers its implementations.

        Each candidate's metadata carries ``implementing`` set to ``module``.
        Empty if the module has no usable documentation.
        """
        return callback_documentation(self.store, module)
