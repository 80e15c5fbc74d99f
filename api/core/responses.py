"""
Response envelopes.

Two shapes coexist and are selected by route group:
- primary resource endpoints: {"status", "message", "response"}
- legacy search/export endpoints (`/api/data`, `/api/export/*`):
  {"success", "count", "data"} or {"success", "error"}
"""

from __future__ import annotations

from typing import Any

LEGACY_PATHS = ("/api/data",)
LEGACY_PATH_PREFIXES = ("/api/export/",)

STATUS_LABELS = {
    200: "OK",
    201: "Created",
    400: "Bad Request",
    404: "Not Found",
}


def status_label(status_code: int) -> str:
    return STATUS_LABELS.get(status_code, "Error")


def envelope(status: str, message: str, data: Any = None) -> dict[str, Any]:
    return {"status": status, "message": message, "response": data}


def ok(message: str, data: Any = None) -> dict[str, Any]:
    return envelope("OK", message, data)


def created(message: str, data: Any = None) -> dict[str, Any]:
    return envelope("Created", message, data)


def legacy_success(data: list[Any]) -> dict[str, Any]:
    return {"success": True, "count": len(data), "data": data}


def legacy_error(error: str) -> dict[str, Any]:
    return {"success": False, "error": error}


def is_legacy_path(path: str) -> bool:
    return path in LEGACY_PATHS or path.startswith(LEGACY_PATH_PREFIXES)
