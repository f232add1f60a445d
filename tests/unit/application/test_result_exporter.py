"""Tests for result export."""

import json

from allocation_engine.application.services.result_exporter import CSV_HEADERS, export_result

RESULT = {
    "assignments": [
        {"agent": "Kim", "model": "X", "color": "Blue", "quantity": 1, "priority": 1,
         "receiptTime": "2024-03-05T10:00:00", "reservationNumber": "R-1", "customerName": 'Hong "Jr"'},
        {"agent": "Lee", "model": "X", "color": "Blue", "quantity": 4, "priority": None},
    ],
    "summary": {},
    "timestamp": "t",
}


def test_json_export_is_indented():
    text = export_result(RESULT, "json")
    assert json.loads(text) == RESULT
    assert "\n  " in text


def test_csv_export_quotes_every_field():
    lines = export_result(RESULT, "CSV").split("\n")
    assert lines[0] == ",".join(f'"{h}"' for h in CSV_HEADERS)
    assert lines[1].endswith('"Hong ""Jr"""')
    assert lines[2] == '"Lee","X","Blue","4","","","",""'


def test_unknown_format_or_missing_result():
    assert export_result(RESULT, "xml") is None
    assert export_result(None, "json") is None
    assert export_result({"summary": {}}, "json") is None
