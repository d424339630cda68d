from __future__ import annotations

from enum import Enum
from functools import lru_cache
from itertools import groupby
from typing import BinaryIO, Callable

NAME_LENGTH = 20
NUMBER_LENGTH = 9

MIN_FIRST_NAME_LENGTH = 2
MIN_LAST_NAME_LENGTH = 2
# Leaves room for the separating space and the shortest last name
MAX_FIRST_NAME_LENGTH = NAME_LENGTH - MIN_LAST_NAME_LENGTH - 1

SEPARATOR = b";"
NEWLINE = b"\n"
RECORD_LENGTH = NAME_LENGTH + len(SEPARATOR) + NUMBER_LENGTH

# Raw byte -> character lookup tables
_UPPER = bytes(ord("A") + b % 26 for b in range(256))
_LOWER = bytes(ord("a") + b % 26 for b in range(256))
_DIGITS = bytes(ord("0") + b % 10 for b in range(256))


class Segment(Enum):
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    FILLER = "filler"


def classify_position(position: int, first_len: int, last_len: int) -> Segment:
    """
    Tell which part of the name field a byte position belongs to.

    Layout: first name [0, F), one space at F, last name [F + 1, F + 1 + L),
    space padding up to NAME_LENGTH.

    :param position: Byte index inside the name field.
    :param first_len: First-name length F.
    :param last_len: Last-name length L.
    :return: The Segment for that position.
    """
    if position < first_len:
        return Segment.FIRST_NAME
    if first_len < position < first_len + 1 + last_len:
        return Segment.LAST_NAME
    return Segment.FILLER


@lru_cache(maxsize=None)
def _filler_runs(first_len: int, last_len: int) -> tuple:
    """(start, end) ranges of the name field that hold spaces for the given lengths."""
    runs = []
    position = 0
    segments = (classify_position(j, first_len, last_len) for j in range(NAME_LENGTH))
    for segment, group in groupby(segments):
        size = len(list(group))
        if segment is Segment.FILLER:
            runs.append((position, position + size))
        position += size
    return tuple(runs)


def build_name(raw: bytes, first_len: int, last_len: int) -> bytes:
    """
    Map 20 raw random bytes to the name field.

    Letters are 'raw % 26' from 'a', except position 0 which starts from 'A'.
    The last name is left lowercase on purpose: only the very first
    character of the field is capitalized.
    """
    name = bytearray(raw.translate(_LOWER))
    name[0] = _UPPER[raw[0]]
    for start, end in _filler_runs(first_len, last_len):
        name[start:end] = b" " * (end - start)
    return bytes(name)


def build_number(raw: bytes) -> bytes:
    """Map raw random bytes to ASCII digits ('raw % 10'); leading zeros allowed."""
    return raw.translate(_DIGITS)


def synthesize_record(rng) -> bytes:
    """
    Draw one record (without the trailing newline) from the random source.

    Draw order is fixed: name bytes, number bytes, first-name length,
    last-name length. The same seed therefore always gives the same record.

    :param rng: Object providing 'randbytes(n)' and 'randint(a, b)' (e.g. random.Random).
    :return: RECORD_LENGTH bytes: name field, ';', number field.
    """
    raw_name = rng.randbytes(NAME_LENGTH)
    raw_number = rng.randbytes(NUMBER_LENGTH)

    first_len = rng.randint(MIN_FIRST_NAME_LENGTH, MAX_FIRST_NAME_LENGTH)
    last_len = rng.randint(MIN_LAST_NAME_LENGTH, NAME_LENGTH - first_len - 1)

    return build_name(raw_name, first_len, last_len) + SEPARATOR + build_number(raw_number)


def generate_records(
        out: BinaryIO,
        rng,
        n: int,
        written: Callable[[int], None] | None = None
) -> None:
    """
    Write n newline-joined records to 'out' and flush it.

    There is no newline after the last record, so n = 0 writes nothing.
    Write errors are not handled here; they abort generation.

    :param out: Binary sink (usually a buffered file).
    :param rng: Random source, see synthesize_record.
    :param n: Number of records.
    :param written: Optional callback receiving the 1-based count after each record.
    """
    for i in range(n):
        out.write(synthesize_record(rng))
        if i != n - 1:
            out.write(NEWLINE)

        if written is not None:
            written(i + 1)

    out.flush()
