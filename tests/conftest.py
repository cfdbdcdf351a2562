"""Shared fixtures for translate-gherkin tests."""

from pathlib import Path

import pytest

FEATURES_DIR = Path(__file__).parent / "features"


@pytest.fixture
def features_dir() -> Path:
    return FEATURES_DIR


@pytest.fixture
def german_source() -> str:
    return (FEATURES_DIR / "german.feature").read_text(encoding="utf-8")


@pytest.fixture
def english_source() -> str:
    return (FEATURES_DIR / "english.feature").read_text(encoding="utf-8")
