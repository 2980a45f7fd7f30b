import io
import logging

import pandas as pd

from core import ErrorKind
from data.expression_loader import (
    LineRecord,
    evaluate_file,
    evaluate_lines,
    format_record,
    evaluate_text,
    read_expression_lines,
    records_to_frame,
    split_expression_text,
)


def test_read_expression_lines_strips_newlines(tmp_path):
    path = tmp_path / "expressions.txt"
    path.write_text("1 2 +\r\n3 4 *\n\n5\n", encoding="utf-8")
    assert list(read_expression_lines(str(path))) == ["1 2 +", "3 4 *", "", "5"]


def test_evaluate_lines_numbers_every_line():
    lines = split_expression_text("1 2 +\n5 0 /\n\n3 a +\n2 3 *")
    records = evaluate_lines(lines)
    assert [r.line_number for r in records] == [1, 2, 3, 4, 5]
    assert [r.result.ok for r in records] == [True, False, False, False, True]
    assert records[1].result.error_kind is ErrorKind.DIVISION_BY_ZERO
    assert records[2].result.error_kind is ErrorKind.INVALID_EXPRESSION
    assert records[3].result.error_kind is ErrorKind.INVALID_TOKEN
    assert records[4].result.value == 6


def test_evaluate_lines_calls_evaluator_once_per_line():
    class CountingEvaluator:
        calls = []

        @classmethod
        def evaluate(cls, expression):
            from core import RPNEvaluator
            cls.calls.append(expression)
            return RPNEvaluator.evaluate(expression)

    evaluate_lines(["1", "1 1", "2 2 +"], evaluator=CountingEvaluator)
    assert CountingEvaluator.calls == ["1", "1 1", "2 2 +"]


def test_format_record():
    ok, bad = evaluate_lines(["5 3 + 2 *", "1 2 + +"])
    assert format_record(ok) == ["Expression 1: 5 3 + 2 *", "Result 1: 16"]
    assert format_record(bad) == [
        "Expression 2: 1 2 + +",
        "Error in expression 2: Invalid: insufficient operands",
    ]


def test_evaluate_file_transcript(tmp_path):
    path = tmp_path / "expressions.txt"
    path.write_text("10 3 -\n5 0 %\n7 2 /\n", encoding="utf-8")
    out = io.StringIO()

    records = evaluate_file(str(path), out=out)

    assert len(records) == 3
    assert out.getvalue().splitlines() == [
        "Expression 1: 10 3 -",
        "Result 1: 7",
        "Expression 2: 5 0 %",
        "Error in expression 2: Modulo by zero",
        "Expression 3: 7 2 /",
        "Result 3: 3",
    ]


def test_evaluate_file_missing(tmp_path, caplog):
    out, err = io.StringIO(), io.StringIO()
    with caplog.at_level(logging.ERROR):
        records = evaluate_file(str(tmp_path / "missing.txt"), out=out, err=err)
    assert records == []
    assert out.getvalue() == ""
    assert err.getvalue().startswith("Error reading file: ")
    assert any("missing.txt" in r.getMessage() for r in caplog.records)


def test_records_to_frame():
    records = evaluate_lines(["2 3 +", "3 a +"])
    frame = records_to_frame(records)
    assert list(frame.columns) == ["line_number", "expression", "ok", "value", "error_kind", "message"]
    assert frame.loc[0, "value"] == 5
    assert bool(frame.loc[0, "ok"]) is True
    assert pd.isna(frame.loc[1, "value"])
    assert frame.loc[1, "error_kind"] == "InvalidToken"
    assert frame.loc[1, "message"] == "Invalid token: a"


def test_records_to_frame_empty():
    frame = records_to_frame([])
    assert frame.empty
    assert "value" in frame.columns


def test_line_record_repr():
    record = LineRecord(1, "1", None)
    assert repr(record) == "LineRecord(1, '1', None)"


def test_evaluate_file_with_undecodable_bytes(tmp_path):
    path = tmp_path / "expressions.txt"
    path.write_bytes(b"1 2 +\n\xff\xfe 3 +\n4 5 *\n")
    out, err = io.StringIO(), io.StringIO()

    records = evaluate_file(str(path), out=out, err=err)

    assert [r.line_number for r in records] == [1, 2, 3]
    assert records[0].result.value == 3
    assert records[1].result.error_kind is ErrorKind.INVALID_TOKEN
    assert records[1].result.message == "Invalid token: \ufffd\ufffd"
    assert records[2].result.value == 20
    assert "Result 3: 20" in out.getvalue()
    assert err.getvalue() == ""


def test_evaluate_file_unknown_encoding(tmp_path):
    path = tmp_path / "expressions.txt"
    path.write_text("1 2 +\n", encoding="utf-8")
    err = io.StringIO()
    assert evaluate_file(str(path), out=io.StringIO(), err=err, encoding="no-such-codec") == []
    assert err.getvalue().startswith("Error reading file: ")


def test_evaluate_file_streams_through_evaluator(tmp_path):
    path = tmp_path / "expressions.txt"
    path.write_text("1 1 +\n\n", encoding="utf-8")

    class RecordingEvaluator:
        calls = []

        @classmethod
        def evaluate(cls, expression):
            from core import RPNEvaluator
            cls.calls.append(expression)
            return RPNEvaluator.evaluate(expression)

    records = evaluate_file(str(path), evaluator=RecordingEvaluator, out=io.StringIO())
    assert RecordingEvaluator.calls == ["1 1 +", ""]
    assert records[1].result.message == "Expression cannot be null or empty"


def test_split_expression_text_newlines():
    assert split_expression_text("1 2 +\r\n3\r4\n") == ["1 2 +", "3", "4"]
    assert split_expression_text("") == []


def test_evaluate_text():
    out = io.StringIO()
    records = evaluate_text("10 3 -\n1 2 3", out=out)
    assert len(records) == 2
    assert out.getvalue().splitlines() == [
        "Expression 1: 10 3 -",
        "Result 1: 7",
        "Expression 2: 1 2 3",
        "Error in expression 2: Invalid: too many operands",
    ]


def test_evaluate_lines_on_record_called_in_order():
    seen = []
    evaluate_lines(["1", "x", "2 2 *"], on_record=lambda r: seen.append(r.line_number))
    assert seen == [1, 2, 3]
