# unit/test_record_reader.py

import io

import pytest

from backend.core.vlayout.sped_reader import RecordReader, parse_line

pytestmark = pytest.mark.unit


def test_parse_line_splits_registro_and_fields() -> None:
    record = parse_line("  |C100|x|y|  ", 7)

    assert record.registro == "C100"
    assert record.fields == ("x", "y")
    assert record.field_count == 2
    assert record.line_number == 7
    assert record.raw_text == "|C100|x|y|"


def test_parse_line_keeps_empty_fields() -> None:
    record = parse_line("|C100||||", 1)

    assert record.fields == ("", "", "")


def test_parse_line_without_trailing_delimiter() -> None:
    record = parse_line("|C100|x|y", 1)

    assert record.fields == ("x", "y")


@pytest.mark.parametrize("line", ["", "   ", "C100|x|y|", "# comentario", "\t"])
def test_non_record_lines_are_skipped(line) -> None:
    assert parse_line(line, 1) is None


def test_line_numbers_count_skipped_lines() -> None:
    lines = ["cabecera", "", "|0000|a|", "basura", "|C100|x|y|z|"]

    records = list(RecordReader.iter_records(lines))

    assert [r.line_number for r in records] == [3, 5]
    assert [r.registro for r in records] == ["0000", "C100"]


def test_iter_records_is_lazy() -> None:
    consumed = []

    def source():
        for line in ["|A|1|", "|B|2|"]:
            consumed.append(line)
            yield line

    records = RecordReader.iter_records(source())
    assert consumed == []

    first = next(records)
    assert first.registro == "A"
    assert consumed == ["|A|1|"]


def test_iter_records_accepts_text_stream() -> None:
    stream = io.StringIO("|0000|a|\r\n\r\n|9999|2|\r\n")

    records = list(RecordReader.iter_records(stream))

    assert [(r.registro, r.line_number) for r in records] == [("0000", 1), ("9999", 3)]


def test_read_file_decodes_latin1(tmp_path, sped_writer) -> None:
    path = sped_writer(tmp_path / "sped.txt", ["|0000|AÇÃO|São Paulo|"])

    (record,) = list(RecordReader.read_file(path))

    assert record.fields == ("AÇÃO", "São Paulo")


def test_read_file_handles_crlf(tmp_path) -> None:
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"|0000|a|\r\n|C100|x|\r\n")

    records = list(RecordReader.read_file(path))

    assert [r.raw_text for r in records] == ["|0000|a|", "|C100|x|"]
