from __future__ import annotations

import csv
import io

from collection_inflector.models import InflectionResult, Operation
from collection_inflector.output import COLUMNS, write_csv
from collection_inflector.runner import read_words, run, run_batch


def test_run_batch_pluralizes_and_counts() -> None:
    batch = run_batch(["person", "fish", "box"], Operation.PLURALIZE)
    assert [(r.word, r.result) for r in batch["results"]] == [
        ("person", "people"),
        ("fish", "fish"),
        ("box", "boxes"),
    ]
    assert batch["stats"]["changed"] == 2
    assert batch["stats"]["unchanged"] == 1


def test_run_batch_skips_blanks_and_duplicates() -> None:
    batch = run_batch(["cat", "", "  ", "cat", " dog "], Operation.PLURALIZE)
    assert [r.word for r in batch["results"]] == ["cat", "dog"]
    stats = batch["stats"]
    assert stats["total"] == 3
    assert stats["blank_skipped"] == 2
    assert stats["duplicates_skipped"] == 1


def test_run_batch_unknown_number() -> None:
    known = run_batch(["people"], Operation.PLURALIZE)
    unknown = run_batch(["people"], Operation.PLURALIZE, known_number=False)
    assert known["results"][0].result == "peoples"
    assert unknown["results"][0].result == "people"


def test_run_batch_singularize() -> None:
    batch = run_batch(["children", "statuses"], Operation.SINGULARIZE)
    assert [r.result for r in batch["results"]] == ["child", "status"]


def test_run_batch_casing_operations() -> None:
    assert run_batch(["customer_order"], Operation.PASCALIZE)["results"][0].result == "CustomerOrder"
    assert run_batch(["customer_order"], Operation.CAMELIZE)["results"][0].result == "customerOrder"
    assert run_batch(["CustomerOrder"], Operation.UNDERSCORE)["results"][0].result == "customer_order"
    assert run_batch(["customer_order"], Operation.DASHERIZE)["results"][0].result == "customer-order"


def test_run_batch_collection_names() -> None:
    batch = run_batch(["CustomerOrder", "Person"], Operation.COLLECTION, partition_key="t1")
    assert [r.result for r in batch["results"]] == ["t1-customerOrders", "t1-people"]


def test_write_csv() -> None:
    buf = io.StringIO()
    write_csv(
        [
            InflectionResult("person", "people", Operation.PLURALIZE),
            InflectionResult("fish", "fish", Operation.PLURALIZE),
        ],
        buf,
    )
    rows = list(csv.reader(io.StringIO(buf.getvalue())))
    assert rows[0] == COLUMNS
    assert rows[1] == ["person", "people", "pluralize", "True"]
    assert rows[2] == ["fish", "fish", "pluralize", "False"]


def test_read_words_from_file(tmp_path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("person\nchild\n\n", encoding="utf-8")
    assert read_words(str(path)) == ["person", "child", ""]


def test_read_words_from_stdin(monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("mouse\nox\n"))
    assert read_words("-") == ["mouse", "ox"]


def test_run_writes_output_file(tmp_path, capsys) -> None:
    words_file = tmp_path / "in.txt"
    words_file.write_text("child\n", encoding="utf-8")
    out = tmp_path / "out.csv"

    run(Operation.PLURALIZE, ["person"], str(words_file), str(out))

    rows = list(csv.reader(out.read_text(encoding="utf-8").splitlines()))
    assert rows[1:] == [["person", "people", "pluralize", "True"], ["child", "children", "pluralize", "True"]]
    err = capsys.readouterr().err
    assert "2 words" in err
    assert f"Results written to {out}" in err
