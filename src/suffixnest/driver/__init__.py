"""Multi-case input reader and answer writer."""

from suffixnest.driver.errors import (
    InputFormatError,
    MalformedCountError,
    TruncatedPatternListError,
)
from suffixnest.driver.reader import iter_cases, read_cases
from suffixnest.driver.runner import OutputAccumulator, run_cases

__all__ = [
    "InputFormatError",
    "MalformedCountError",
    "OutputAccumulator",
    "TruncatedPatternListError",
    "iter_cases",
    "read_cases",
    "run_cases",
]
