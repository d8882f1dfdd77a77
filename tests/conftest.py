"""Shared pytest fixtures for the localeyaml test suite."""

from __future__ import annotations

from pathlib import Path
import shutil

import pytest

from tests.fixture_paths import (
    cleaned_fixture_path,
    normalized_fixture_path,
    sample_fixture_path,
    sample_mapping as resolve_sample_mapping,
)


@pytest.fixture
def sample_yaml_path(tmp_path: Path) -> Path:
    """Copy the hand-edited sample into `tmp_path` so tests may rewrite it."""

    target = tmp_path / "en.yml"
    shutil.copyfile(sample_fixture_path(), target)
    return target


@pytest.fixture
def sample_text() -> str:
    """Provide the raw text of the hand-edited sample."""

    return sample_fixture_path().read_text(encoding="utf-8")


@pytest.fixture
def normalized_sample_text() -> str:
    """Provide the expected normalizer output for the sample."""

    return normalized_fixture_path().read_text(encoding="utf-8")


@pytest.fixture
def cleaned_sample_text() -> str:
    """Provide the expected sorted `clean` output for the sample."""

    return cleaned_fixture_path().read_text(encoding="utf-8")


@pytest.fixture
def sample_mapping() -> dict[str, object]:
    """Provide the mapping the sample parses to, in source order."""

    return resolve_sample_mapping()
