"""Fixtures for whole-run tests."""

import pytest

from .dwarf_fixtures import FakeReader


@pytest.fixture
def fake_reader(monkeypatch):
    """Replace DwarfReader with FakeReader for the duration of a test."""
    FakeReader.files = {}
    FakeReader.opened = []
    monkeypatch.setattr("offset_extractor.application.offset_extractor.DwarfReader", FakeReader)
    return FakeReader
