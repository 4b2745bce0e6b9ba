"""CSV output writer."""

from __future__ import annotations

import csv
import sys
from typing import IO, List

from .models import InflectionResult

COLUMNS = [
    "word",
    "result",
    "operation",
    "changed",
]


def write_csv(results: List[InflectionResult], dest: IO[str] | None = None):
    """Write results as CSV. If dest is None, write to stdout."""
    out = dest or sys.stdout
    writer = csv.writer(out)
    writer.writerow(COLUMNS)
    for r in results:
        writer.writerow([
            r.word,
            r.result,
            r.operation.value,
            r.changed,
        ])
