"""Base interfaces for memberdocs.

Provides the exception hierarchy and the three collaborators normalization
depends on: the documentation store, the markup renderer, and the behaviour
resolver. Normalization never parses source or compiles anything itself;
everything it knows comes through these interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from memberdocs.models import ModuleDocs


class MemberDocsError(Exception):
    """Base exception for memberdocs operations."""

    def __init__(self, message: str, module: str | None = None):
        super().__init__(message)
        self.module = module


class StoreContractError(MemberDocsError):
    """Raised when a store hands back data outside its documented shapes.

    This is a bug in the store, not an expected runtime condition.
    """

    pass


class UnknownCategoryError(MemberDocsError, ValueError):
    """Raised when a caller asks for a documentation category that doesn't exist."""

    pass


class DocumentationStore(ABC):
    """Source of raw, already-extracted module documentation."""

    @abstractmethod
    def fetch(self, module: str) -> ModuleDocs | None:
        """Return the module's documentation, or None if it has none.

        Args:
            module: Module identifier (e.g. "MyApp.Worker")

        Returns:
            ModuleDocs with the declared format and all member records,
            or None when the module is unknown or was built without docs.
        """
        ...


class MarkupRenderer(ABC):
    """Converts a markup tree into markdown text."""

    @abstractmethod
    def render(self, tree: Any) -> str:
        """Render a well-formed markup tree. Must be pure."""
        ...


class BehaviourResolver(ABC):
    """Lists the behavioural contracts a module declares it implements."""

    @abstractmethod
    def contracts_of(self, module: str) -> list[str]:
        """Return contract module identifiers in declaration order."""
        ...
