# unit/test_batch_aggregator.py

import pytest

from backend.core.vlayout.comparator import FileValidationReport
from backend.core.vlayout.comparator.models import FieldCountDiscrepancy
from backend.core.vlayout.exceptions import PerFileValidationError
from backend.core.vlayout.layout import LayoutLoader
from backend.core.vlayout.reporting import BatchAggregator, outcome_to_dict

pytestmark = pytest.mark.unit


def test_two_files_with_distinct_missing_blocks(tmp_path, simple_schema, sped_writer) -> None:
    first = sped_writer(tmp_path / "a.txt", ["|C100|1|2|3|", "|C200|x|"])
    second = sped_writer(tmp_path / "b.txt", ["|C300|y|"])

    report = BatchAggregator(simple_schema).aggregate([first, second], root=tmp_path)

    assert report.aggregate.to_dict() == {
        "total_files": 2,
        "files_with_missing_blocks": 2,
        "files_with_discrepancies": 0,
        "files_with_errors": 0,
        "unique_missing_blocks": ["C200", "C300"],
    }
    assert list(report.per_file) == ["a.txt", "b.txt"]


def test_fold_sorts_union_by_layout_order() -> None:
    schema = LayoutLoader.load({"C100": ["REG"], "C200": ["REG"], "C300": ["REG"]})
    outcomes = [
        FileValidationReport(block_occurrences={"C300": 1}, missing_blocks=["C300"]),
        FileValidationReport(block_occurrences={"C100": 1}, missing_blocks=["C100"]),
        FileValidationReport(
            block_occurrences={"C200": 2, "C300": 1},
            missing_blocks=["C300", "C200"],
            field_count_discrepancies=[FieldCountDiscrepancy("C200", 0, occurrences=2)],
        ),
    ]

    aggregate = BatchAggregator(schema).fold(outcomes)

    assert aggregate.unique_missing_blocks == ["C100", "C200", "C300"]
    assert aggregate.files_with_missing_blocks == 3
    assert aggregate.files_with_discrepancies == 1


def test_unknown_blocks_keep_first_seen_order_across_files(tmp_path, ordered_schema, sped_writer) -> None:
    first = sped_writer(tmp_path / "1.txt", ["|ZZZ|1|", "|AAA|1|"])
    second = sped_writer(tmp_path / "2.txt", ["|MMM|1|", "|ZZZ|1|"])

    report = BatchAggregator(ordered_schema).aggregate([first, second], root=tmp_path)

    assert report.aggregate.unique_missing_blocks == ["ZZZ", "AAA", "MMM"]


def test_keys_are_relative_posix_paths(tmp_path, simple_schema, sped_writer) -> None:
    nested = sped_writer(tmp_path / "empresa" / "jan" / "sped.txt", ["|C100|1|2|3|"])

    report = BatchAggregator(simple_schema).aggregate([nested], root=tmp_path)

    assert list(report.per_file) == ["empresa/jan/sped.txt"]


def test_unreadable_file_does_not_abort_batch(tmp_path, simple_schema, sped_writer) -> None:
    good = sped_writer(tmp_path / "good.txt", ["|C100|1|"])
    gone = tmp_path / "gone.txt"

    report = BatchAggregator(simple_schema).aggregate([gone, good], root=tmp_path)

    assert isinstance(report.per_file["gone.txt"], PerFileValidationError)
    assert set(outcome_to_dict(report.per_file["gone.txt"])) == {"erro"}
    assert report.per_file["good.txt"].has_discrepancies
    assert report.aggregate.total_files == 2
    assert report.aggregate.files_with_errors == 1
    assert report.aggregate.files_with_discrepancies == 1


def test_parallel_run_matches_sequential(tmp_path, ordered_schema, sped_writer) -> None:
    files = [
        sped_writer(tmp_path / f"{i:02d}.txt", [f"|X{i % 3}|1|", "|C100|x|", "|0000|a|b|"])
        for i in range(12)
    ]

    sequential = BatchAggregator(ordered_schema).aggregate(files, root=tmp_path)
    parallel = BatchAggregator(ordered_schema, max_workers=4).aggregate(files, root=tmp_path)

    assert parallel.to_dict() == sequential.to_dict()
    assert list(parallel.per_file) == [f"{i:02d}.txt" for i in range(12)]
    assert parallel.aggregate.unique_missing_blocks == ["X0", "X1", "X2"]


def test_batch_serialization_uses_erro_key_for_failures(tmp_path, simple_schema) -> None:
    report = BatchAggregator(simple_schema).aggregate([tmp_path / "x.txt"], root=tmp_path)

    assert report.to_dict()["per_file"]["x.txt"].keys() == {"erro"}


def test_error_message_names_relative_key_not_server_path(tmp_path, simple_schema) -> None:
    root = tmp_path / "extract_abc"
    root.mkdir()

    report = BatchAggregator(simple_schema).aggregate([root / "empresa" / "jan.txt"], root=root)
    message = report.to_dict()["per_file"]["empresa/jan.txt"]["erro"]

    assert message == "No such file or directory: empresa/jan.txt"
    assert str(tmp_path) not in message
