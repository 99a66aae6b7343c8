"""Test fixtures."""

import json
import pathlib
from typing import Any

import pytest

TESTDATA_PATH = pathlib.Path(__file__).parent / "testdata"


@pytest.fixture
def testdata_path() -> pathlib.Path:
    """Fixture that returns the directory of golden jCard files."""
    return TESTDATA_PATH


@pytest.fixture
def rfc7095_example(testdata_path: pathlib.Path) -> Any:
    """Fixture that loads the example jCard from rfc7095 appendix B."""
    return json.loads((testdata_path / "rfc7095_appendix_b.json").read_text())
