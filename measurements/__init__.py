"""Reproducible "city;temperature" fixture files for 1BRC-style benchmarks."""

from measurements.cities import CITIES
from measurements.generator import (
    SEED,
    Config,
    GenerateError,
    Record,
    UsageError,
    generate,
    parse_args,
    random_record,
    write_records,
)

__all__ = [
    "CITIES",
    "SEED",
    "Config",
    "GenerateError",
    "Record",
    "UsageError",
    "generate",
    "parse_args",
    "random_record",
    "write_records",
]
