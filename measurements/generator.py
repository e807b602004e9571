"""Generate deterministic "city;temperature" test data.

Every run seeds the generator with SEED, so the same count always yields
the same bytes. The sequence comes from CPython's Mersenne Twister
(random.Random) with four draws per record, in order: city, sign,
magnitude, fractional digit.
"""

import random
from dataclasses import dataclass
from typing import IO, NamedTuple, Optional, Sequence

from measurements.cities import CITIES

SEED = 10
USAGE = "Usage: generate-measurements <count> <output_file>"


class UsageError(Exception):
    """Raised when a positional argument is missing."""


class GenerateError(Exception):
    """Raised when the output file can't be opened for writing."""


@dataclass(frozen=True)
class Config:
    count: int
    output_path: str


class Record(NamedTuple):
    city: str
    negative: bool
    magnitude: int
    fraction: int

    def line(self) -> str:
        sign = "-" if self.negative else ""
        return f"{self.city};{sign}{self.magnitude}.{self.fraction}\n"


def parse_args(argv: Sequence[str]) -> Config:
    """Build a Config from ``<count> <output_file>``.

    A non-numeric count raises ValueError straight from int().
    """
    if len(argv) < 2:
        raise UsageError(USAGE)
    return Config(count=int(argv[0]), output_path=argv[1])


def random_record(rng: random.Random) -> Record:
    city = CITIES[rng.randrange(len(CITIES))]
    negative = rng.randrange(2) == 1
    magnitude = rng.randrange(100)
    fraction = rng.randrange(10)
    return Record(city, negative, magnitude, fraction)


def write_records(f: IO[bytes], count: int, rng: random.Random) -> int:
    """Write count records to f and return how many lines made it.

    f should be unbuffered so each record reaches the OS on its own write.
    A failed write is reported and skipped; the remaining records are
    still attempted.
    """
    written = 0
    for _ in range(count):
        line = random_record(rng).line().encode("utf-8")
        try:
            f.write(line)
        except OSError as e:
            print(f"Error writing to file: {e}")
            continue
        written += 1
    return written


def generate(config: Config, rng: Optional[random.Random] = None) -> int:
    if rng is None:
        rng = random.Random(SEED)

    try:
        f = open(config.output_path, "wb", buffering=0)
    except OSError as e:
        raise GenerateError(f"Error opening file: {e}") from e

    try:
        return write_records(f, config.count, rng)
    finally:
        try:
            f.close()
        except OSError as e:
            print(f"Error closing file: {e}")
