"""
Session‑wide fixtures shared by all generator test suites.
"""

from __future__ import annotations

import pathlib

import pandas as pd
import pytest

from src.generation.main import GenerationRequest, generate_file, load_records

SAMPLE_SEED = 42
SAMPLE_COUNT = 2000

# ---------------------------------------------------------------------
# Session‑scoped fixtures
# ---------------------------------------------------------------------

@pytest.fixture(scope="session")
def sample_file(tmp_path_factory) -> pathlib.Path:
    """Generate one sample file for the whole test run."""
    path = tmp_path_factory.mktemp("output") / "people.txt"
    generate_file(GenerationRequest(filename=str(path), count=SAMPLE_COUNT, seed=SAMPLE_SEED, quiet=True))
    return path


@pytest.fixture(scope="session")
def sample_bytes(sample_file: pathlib.Path) -> bytes:
    return sample_file.read_bytes()


@pytest.fixture(scope="session")
def records_df(sample_file: pathlib.Path) -> pd.DataFrame:
    """The sample file loaded through load_records."""
    return load_records(sample_file)


__all__ = [
    "SAMPLE_SEED",
    "SAMPLE_COUNT",
    "sample_file",
    "sample_bytes",
    "records_df",
]
