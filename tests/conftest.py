"""Shared fixtures for the punctmerge test suite."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from punctmerge import TaggedWord
from punctmerge.dictionary import DICTIONARY_ENV_VAR, PunctuationDictionary, unload_dictionary


@pytest.fixture(autouse=True)
def fresh_shared_dictionary(monkeypatch):
    monkeypatch.delenv(DICTIONARY_ENV_VAR, raising=False)
    unload_dictionary()
    yield
    unload_dictionary()


@pytest.fixture
def ellipsis_dictionary():
    """Recognizes the ellipsis "……" and the full stop "。"."""
    return PunctuationDictionary(["……", "。"])


@pytest.fixture
def make_sentence():
    def _factory(texts, tags=None):
        tags = tags if tags is not None else ["x"] * len(texts)
        return [TaggedWord(text, tag) for text, tag in zip(texts, tags)]

    return _factory
