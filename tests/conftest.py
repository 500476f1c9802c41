"""Shared fixtures for StaticSearch tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

import pytest


@pytest.fixture
def sample_dataset() -> List[Dict[str, str]]:
    return [
        {"title": "Eleventy is simple", "body": "static site"},
        {"title": "Other", "body": "nothing"},
    ]


@pytest.fixture
def dataset_file(tmp_path: Path, sample_dataset: List[Dict[str, str]]) -> Path:
    path = tmp_path / "search.json"
    path.write_text(json.dumps(sample_dataset), encoding="utf-8")
    return path
