"""Result exporter — JSON or quoted CSV rendering of assignment results."""

from __future__ import annotations

import csv
import io
import json

CSV_HEADERS = [
    "agent",
    "model",
    "color",
    "quantity",
    "priority",
    "receiptTime",
    "reservationNumber",
    "customerName",
]


def export_result(result: dict | None, fmt: str = "json") -> str | None:
    """Render a serialized AssignmentResult.

    Args:
        result: ``AssignmentResult.to_dict()`` output.
        fmt: ``json`` or ``csv``.

    Returns:
        The rendered text, or None for a missing result or unknown format.
    """
    if not result or "assignments" not in result:
        return None

    fmt = fmt.lower()
    if fmt == "json":
        return json.dumps(result, ensure_ascii=False, indent=2)

    if fmt == "csv":
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADERS)
        for row in result["assignments"]:
            writer.writerow(["" if row.get(h) is None else row.get(h) for h in CSV_HEADERS])
        return buffer.getvalue().rstrip("\n")

    return None
