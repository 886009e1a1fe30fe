"""Pytest fixtures for memberdocs tests."""

import json

import pytest
from memberdocs import DocsClient

from tests.helpers import FakeRenderer, FakeResolver, FakeStore


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def docs(store, renderer, resolver):
    """
    DocsClient wired to empty fakes.

    Example:
        def test_overview(docs, store):
            store.add("Mod", module_docs(moduledoc={"en": "desc"}))
            assert docs.get_moduledoc("Mod").doc == "desc"
    """
    return DocsClient(store, renderer, resolver)


@pytest.fixture
def write_chunk(tmp_path):
    """
    Writes <module>.json chunks into tmp_path.

    Example:
        def test_fetch(write_chunk, tmp_path):
            write_chunk("Mod", {"format": "text/markdown"})
            JsonDocsStore(tmp_path).fetch("Mod")
    """

    def _write(module: str, data: dict) -> None:
        (tmp_path / f"{module}.json").write_text(json.dumps(data))

    return _write
