# unit/test_orchestrator.py

import io

import pytest

from backend.core.vlayout import LayoutValidationOrchestrator
from backend.core.vlayout.exceptions import ArchiveExtractionFailure, NoDataFilesFound

pytestmark = pytest.mark.unit


@pytest.fixture()
def orchestrator(simple_schema) -> LayoutValidationOrchestrator:
    return LayoutValidationOrchestrator(simple_schema)


def test_validate_file(tmp_path, orchestrator, sped_writer) -> None:
    path = sped_writer(tmp_path / "sped.txt", ["|C100|x|y|"])

    report = orchestrator.validate_file(path)

    assert report.block_occurrences == {"C100": 1}
    assert report.field_count_discrepancies[0].sample_texts == ["|C100|x|y|"]
    assert report.error is None


def test_validate_stream(orchestrator) -> None:
    report = orchestrator.validate_stream(io.StringIO("|C100|a|b|c|\n|C200|z|\n"))

    assert report.missing_blocks == ["C200"]
    assert report.field_count_discrepancies == []


def test_decode_error_is_reported_per_file(tmp_path, simple_schema) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"|C100|a|b|c|\n|C100|\xff\xfe|\n")
    strict = LayoutValidationOrchestrator(simple_schema, encoding="utf-8")

    report = strict.validate_file(path)

    assert report.error["code"] == "ENCODING_ERROR"


def test_archive_work_dir_is_cleaned_after_success(tmp_path, orchestrator, zip_maker) -> None:
    archive = zip_maker(
        tmp_path / "lote.zip",
        {"jan/sped.txt": b"|C100|1|2|3|\n", "fev/sped.txt": b"|C200|x|\n", "leia.md": b"nada"},
    )
    work_dir = tmp_path / "work"

    report = orchestrator.validate_archive(archive, "lote.zip", work_dir)

    assert list(report.per_file) == ["fev/sped.txt", "jan/sped.txt"]
    assert report.aggregate.unique_missing_blocks == ["C200"]
    assert list(work_dir.iterdir()) == []


def test_archive_without_data_files_raises_and_cleans(tmp_path, orchestrator, zip_maker) -> None:
    archive = zip_maker(tmp_path / "vacio.zip", {"leia.md": b"nada"})
    work_dir = tmp_path / "work"

    with pytest.raises(NoDataFilesFound):
        orchestrator.validate_archive(archive, "vacio.zip", work_dir)

    assert list(work_dir.iterdir()) == []


def test_corrupt_archive_raises_and_cleans(tmp_path, orchestrator) -> None:
    archive = tmp_path / "roto.zip"
    archive.write_bytes(b"PK\x03\x04 no zip")
    work_dir = tmp_path / "work"

    with pytest.raises(ArchiveExtractionFailure):
        orchestrator.validate_archive(archive, "roto.zip", work_dir)

    assert list(work_dir.iterdir()) == []


def test_archive_validation_is_idempotent(tmp_path, orchestrator, zip_maker) -> None:
    archive = zip_maker(tmp_path / "lote.zip", {"a.txt": b"|C100|x|\n|QQQ|1|\n"})

    first = orchestrator.validate_archive(archive, "lote.zip", tmp_path / "work")
    second = orchestrator.validate_archive(archive, "lote.zip", tmp_path / "work")

    assert first.to_dict() == second.to_dict()


def test_validate_directory_keys_by_path(tmp_path, orchestrator, sped_writer) -> None:
    top = sped_writer(tmp_path / "top.txt", ["|C100|1|2|3|"])
    sped_writer(tmp_path / "sub" / "deep.txt", ["|C100|1|"])

    flat = orchestrator.validate_directory(tmp_path)
    deep = orchestrator.validate_directory(tmp_path, recursive=True)

    assert list(flat.files) == [str(top)]
    assert len(deep.files) == 2
