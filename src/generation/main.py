import os
import time
from dataclasses import dataclass
from datetime import datetime
import pandas as pd
from .quantity import format_quantity
from .records import SEPARATOR, generate_records
from .utils import default_seed, make_random

DEFAULT_BUFFER_SIZE = 1024 * 1024

# How often (in records) a progress line is printed
PROGRESS_EVERY = 1_000_000

RECORD_COLUMNS = ["Name", "Number"]


# Helper function to print progress with timestamps
def log_progress(step_name):
    print(f"[{datetime.now().strftime('%H:%M:%S')}] {step_name}...")


@dataclass(frozen=True)
class GenerationRequest:
    filename: str
    count: int
    seed: int
    buffer_size: int = DEFAULT_BUFFER_SIZE
    quiet: bool = False
    legacy_random: bool = False

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"count must not be negative, got {self.count}")
        if self.buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")


def generate_file(request: GenerationRequest) -> int:
    """
    Stream the requested number of records into request.filename.

    Logic:
      1) Seed the random source (random.Random, or the java.util.Random
         compatible one when request.legacy_random is set).
      2) Open the file with the requested buffer size and write all records;
         the writer flushes before returning.
      3) Report progress every PROGRESS_EVERY records unless quiet.

    I/O errors propagate; a partially written file is left in place.

    :param request: What to generate and where.
    :return: Size of the generated file in bytes.
    """
    rng = make_random(request.seed, legacy=request.legacy_random)

    def on_written(written_items: int) -> None:
        if not request.quiet and written_items % PROGRESS_EVERY == 0:
            log_progress(f"written {written_items} of {request.count} records")

    with open(request.filename, "wb", buffering=request.buffer_size) as out:
        generate_records(out, rng, request.count, on_written)

    return os.path.getsize(request.filename)


def load_records(path) -> pd.DataFrame:
    """
    Read a generated file back into a DataFrame with 'Name' and 'Number' columns.

    Both columns stay strings: name padding and leading zeros are kept.
    """
    if os.path.getsize(path) == 0:
        return pd.DataFrame(columns=RECORD_COLUMNS, dtype=str)

    return pd.read_csv(
        path,
        sep=SEPARATOR.decode("ascii"),
        header=None,
        names=RECORD_COLUMNS,
        dtype=str,
        na_filter=False,
        encoding="ascii",
    )


def main(filename, count, seed=None, buffer_size=DEFAULT_BUFFER_SIZE, quiet=False, legacy_random=False):
    t0 = time.monotonic()
    if seed is None:
        seed = default_seed()

    request = GenerationRequest(
        filename=filename,
        count=count,
        seed=seed,
        buffer_size=buffer_size,
        quiet=quiet,
        legacy_random=legacy_random,
    )

    if not quiet:
        log_progress(f"Generating {format_quantity(count)} records into {filename}")

    size = generate_file(request)

    if not quiet:
        elapsed_ms = int((time.monotonic() - t0) * 1000)
        print(
            f"Generated file {os.path.abspath(filename)} with {count} records "
            f"({format_quantity(size)}B) [using seed {seed}] in {elapsed_ms} ms."
        )

    return size
