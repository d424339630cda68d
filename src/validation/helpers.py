"""
Shared pytest helper utilities.
These helpers centralise the record-layout checks that recur across the
test suites, so the individual test files can stay short and focus on
what they exercise.
"""

from __future__ import annotations

import re

import pandas as pd

from src.generation.records import (
    MAX_FIRST_NAME_LENGTH,
    MIN_FIRST_NAME_LENGTH,
    MIN_LAST_NAME_LENGTH,
    NAME_LENGTH,
    NUMBER_LENGTH,
)

# Only position 0 is upper-case; the last name starts lowercase.
_NAME_PATTERN = re.compile(r"^([A-Z][a-z]+) ([a-z]+) *$")
_NUMBER_PATTERN = re.compile(rf"^[0-9]{{{NUMBER_LENGTH}}}$")


# ------------------------------------------------------------------
# Field helpers
# ------------------------------------------------------------------

def name_lengths(name: str) -> tuple[int, int]:
    """Return (F, L) of a name field, failing if the layout is wrong."""
    assert len(name) == NAME_LENGTH, f"name field {name!r} is {len(name)} chars"
    match = _NAME_PATTERN.match(name)
    assert match, f"name field {name!r} does not match the layout"
    return len(match.group(1)), len(match.group(2))


def assert_name_field(name: str) -> None:
    """Assert a name field holds two letter runs with valid lengths."""
    first_len, last_len = name_lengths(name)
    assert MIN_FIRST_NAME_LENGTH <= first_len <= MAX_FIRST_NAME_LENGTH, f"F={first_len} in {name!r}"
    assert MIN_LAST_NAME_LENGTH <= last_len <= NAME_LENGTH - first_len - 1, f"L={last_len} in {name!r}"


def assert_number_field(number: str) -> None:
    assert _NUMBER_PATTERN.match(number), f"number field {number!r} is not {NUMBER_LENGTH} digits"


# ------------------------------------------------------------------
# Frame helpers
# ------------------------------------------------------------------

def assert_records(df: pd.DataFrame) -> None:
    """Check every row of a frame returned by load_records."""
    assert list(df.columns) == ["Name", "Number"]
    assert (df["Name"].str.len() == NAME_LENGTH).all(), "name fields of wrong width"
    assert (df["Number"].str.len() == NUMBER_LENGTH).all(), "number fields of wrong width"
    for name in df["Name"]:
        assert_name_field(name)
    for number in df["Number"]:
        assert_number_field(number)


__all__ = [
    "name_lengths",
    "assert_name_field",
    "assert_number_field",
    "assert_records",
]
