"""File-backed documentation store.

Reads one ``<module>.json`` chunk per module from a directory:

    {
      "format": "text/markdown",
      "anno": 1,
      "moduledoc": {"en": "A worker."},
      "metadata": {},
      "behaviours": ["GenServer"],
      "docs": [
        {"kind": "function", "name": "start_link", "arity": 1, "anno": 12,
         "signatures": ["start_link(opts)"], "doc": "none", "metadata": {}}
      ]
    }

A doc payload is a locale mapping or one of the strings "hidden" / "none".
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal, Union

from pydantic import BaseModel, Field, ValidationError

from memberdocs.base import BehaviourResolver, DocumentationStore, StoreContractError
from memberdocs.models import Doc, Kind, MemberIdentity, ModuleDocs, RawDocRecord

log = logging.getLogger(__name__)

PayloadField = Union[dict[str, Any], Literal["hidden", "none"]]


class DocRecordFile(BaseModel):
    kind: Literal["function", "macro", "callback", "macrocallback", "type"]
    name: str
    arity: int = Field(ge=0)
    anno: Any = None
    signatures: list[str] = Field(default_factory=list)
    doc: PayloadField = "none"
    metadata: dict[str, Any] = Field(default_factory=dict)


class ModuleDocsFile(BaseModel):
    format: str
    anno: Any = None
    moduledoc: PayloadField = "none"
    metadata: dict[str, Any] = Field(default_factory=dict)
    behaviours: list[str] = Field(default_factory=list)
    docs: list[DocRecordFile] = Field(default_factory=list)


def _payload(value: PayloadField) -> dict[str, Any] | Doc:
    if isinstance(value, str):
        return Doc(value)
    return value


def _to_record(entry: DocRecordFile) -> RawDocRecord:
    return RawDocRecord(
        kind=Kind(entry.kind),
        identity=MemberIdentity(entry.name, entry.arity),
        anno=entry.anno,
        signatures=tuple(entry.signatures),
        doc=_payload(entry.doc),
        metadata=entry.metadata,
    )


class JsonDocsStore(DocumentationStore, BehaviourResolver):
    """Documentation store and behaviour resolver over a chunk directory."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def _path(self, module: str) -> Path:
        return self.root / f"{module}.json"

    def _load(self, module: str) -> ModuleDocsFile | None:
        path = self._path(module)
        if not path.is_file():
            log.debug("No chunk for %s in %s", module, self.root)
            return None
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            return ModuleDocsFile.model_validate(raw)
        except (ValidationError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StoreContractError(f"Invalid chunk {path}: {e}", module) from e

    def fetch(self, module: str) -> ModuleDocs | None:
        chunk = self._load(module)
        if chunk is None:
            return None
        return ModuleDocs(
            format=chunk.format,
            anno=chunk.anno,
            moduledoc=_payload(chunk.moduledoc),
            metadata=chunk.metadata,
            records=tuple(_to_record(e) for e in chunk.docs),
        )

    def contracts_of(self, module: str) -> list[str]:
        chunk = self._load(module)
        return list(chunk.behaviours) if chunk else []
