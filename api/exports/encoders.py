"""
CSV/JSON export encoders.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from fastapi.encoders import jsonable_encoder

CSV_FILENAME = "nextbike-filtered.csv"
JSON_FILENAME = "nextbike-filtered.json"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
JSON_MEDIA_TYPE = "application/json; charset=utf-8"


def attachment_headers(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f"attachment; filename={filename}"}


def csv_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    if "," in text or '"' in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def encode_csv(rows: Sequence[Mapping[str, Any]]) -> str:
    """
    Render rows as CSV. The header is the key set of the first row, so an
    empty result is a single blank line.
    """
    headers = list(rows[0].keys()) if rows else []
    lines = [",".join(headers)]
    for row in rows:
        lines.append(",".join(csv_value(row.get(header)) for header in headers))
    return "\n".join(lines) + "\n"


def encode_json(items: Sequence[Mapping[str, Any]]) -> str:
    return json.dumps(jsonable_encoder(list(items)), ensure_ascii=False)
