"""Orchestrator: read words -> inflect -> dedupe -> output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from .inflection import camelize, dasherize, pascalize, pluralize, singularize, underscore
from .models import InflectionResult, Operation
from .naming import class_name_to_collection_name
from .output import write_csv

logger = logging.getLogger(__name__)

DEFAULT_OPERATION = Operation.PLURALIZE
STDIN_MARKER = "-"


def _transform_for(
    operation: Operation, known_number: bool, partition_key: Optional[str]
) -> Callable[[str], str]:
    """Map an operation to a single-word transform."""
    if operation is Operation.PLURALIZE:
        return lambda w: pluralize(w, known_number)
    if operation is Operation.SINGULARIZE:
        return lambda w: singularize(w, known_number)
    if operation is Operation.COLLECTION:
        return lambda w: class_name_to_collection_name(w, partition_key)
    simple: Dict[Operation, Callable[[str], str]] = {
        Operation.PASCALIZE: pascalize,
        Operation.CAMELIZE: camelize,
        Operation.UNDERSCORE: underscore,
        Operation.DASHERIZE: dasherize,
    }
    return simple[operation]


def read_words(source: str) -> List[str]:
    """Read one word per line from a file, or from stdin when source is "-"."""
    if source == STDIN_MARKER:
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8", errors="replace")
    return text.splitlines()


def run_batch(
    words: Iterable[str],
    operation: Operation = DEFAULT_OPERATION,
    known_number: bool = True,
    partition_key: Optional[str] = None,
) -> Dict:
    """Inflect every word and return results dict (no file I/O).

    Returns dict with keys: results (List[InflectionResult]), stats (dict).
    Blank words are skipped; repeated words are reported once, in first-seen order.
    """
    transform = _transform_for(operation, known_number, partition_key)

    all_results: List[InflectionResult] = []
    skipped_blank = 0
    for raw in words:
        word = raw.strip()
        if not word:
            skipped_blank += 1
            continue
        all_results.append(InflectionResult(word=word, result=transform(word), operation=operation))

    deduped = _deduplicate(all_results)
    changed = sum(1 for r in deduped if r.changed)
    logger.debug("%s: %d words, %d changed", operation.value, len(deduped), changed)

    return {
        "results": deduped,
        "stats": {
            "total": len(all_results),
            "blank_skipped": skipped_blank,
            "duplicates_skipped": len(all_results) - len(deduped),
            "changed": changed,
            "unchanged": len(deduped) - changed,
        },
    }


def run(
    operation: Operation,
    words: List[str],
    input_path: str | None,
    output: str | None,
    known_number: bool = True,
    partition_key: str | None = None,
):
    if input_path:
        words = list(words) + read_words(input_path)

    batch = run_batch(words, operation, known_number=known_number, partition_key=partition_key)
    results = batch["results"]
    stats = batch["stats"]

    print(
        f"{len(results)} words ({stats['changed']} changed, "
        f"{stats['duplicates_skipped']} duplicates skipped).",
        file=sys.stderr,
    )

    if output:
        with open(output, "w", newline="") as f:
            write_csv(results, f)
        print(f"Results written to {output}", file=sys.stderr)
    else:
        write_csv(results)
    return batch


def _deduplicate(results: List[InflectionResult]) -> List[InflectionResult]:
    seen = {}
    for r in results:
        seen.setdefault(r.dedup_key, r)
    return list(seen.values())
