"""Pin the process timezone for tests of the ambient-zone path."""
from __future__ import annotations

import os
import time
from contextlib import contextmanager
from typing import Iterator

import pytest

requires_tzset = pytest.mark.skipif(not hasattr(time, "tzset"), reason="time.tzset is POSIX only")

# Europe/Berlin rules as a POSIX TZ string; needs no system zone database
BERLIN_TZ = "CET-1CEST,M3.5.0,M10.5.0/3"


@contextmanager
def pinned_tz(name: str) -> Iterator[None]:
    """Runs the block with the process-wide TZ set to *name*."""
    previous = os.environ.get("TZ")
    os.environ["TZ"] = name
    time.tzset()
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = previous
        time.tzset()
