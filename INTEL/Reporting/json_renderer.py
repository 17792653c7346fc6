"""
Report JSON Renderer

Serializes a report dictionary to pretty-printed JSON. Every field is kept
under its own name; datetimes become UTC ISO-8601 strings with millisecond
precision ("2026-10-19T08:30:00.000Z").
"""

import json
from datetime import date, datetime, timezone
from typing import Any, Dict

__all__ = ["report_to_json", "iso_utc"]


def iso_utc(value: datetime) -> str:
	"""UTC ISO-8601 text with milliseconds and a trailing Z."""
	if value.tzinfo is None:
		value = value.astimezone()
	utc = value.astimezone(timezone.utc)
	return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def _encode_default(value: Any) -> Any:
	if isinstance(value, datetime):
		return iso_utc(value)
	if isinstance(value, date):
		return value.isoformat()
	raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def report_to_json(report: Dict[str, Any], indent: int = 2) -> str:
	"""
	Render a report as JSON text.

	Args:
		report: Report dictionary from ReportGenerator (or a quick report)
		indent: Spaces per nesting level

	Raises:
		TypeError: If the report holds a value JSON cannot represent
	"""
	return json.dumps(report, indent=indent, ensure_ascii=False, default=_encode_default)
