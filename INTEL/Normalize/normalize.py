'''
Signal Normalization

Purpose: Give every signal a comparable point in time.

Responsibilities:
- Validate the signal collection shape
- Coerce timestamps (datetime, ISO-8601 string, epoch milliseconds) into aware datetimes
- Keep every other signal field untouched

Design notes:
- Naive datetimes and offset-less date-time strings are read as report-timezone wall clock
- Date-only strings ("2026-10-19") are UTC midnight
- Originals are never mutated; normalized signals are shallow copies
'''

import re
from datetime import datetime, timezone, tzinfo
from typing import Any, Dict, List, Optional

__all__ = ["parse_timestamp", "to_report_tz", "normalize_signal", "normalize_signals"]

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_FRACTION = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")


def _pad_fraction(match: "re.Match[str]") -> str:
	"""Fractional seconds as exactly six digits."""
	return f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}"


def _parse_iso(text: str, original: Any) -> datetime:
	try:
		return datetime.fromisoformat(text)
	except ValueError as e:
		raise ValueError(f"timestamp is not ISO-8601: {original!r}") from e


def to_report_tz(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
	"""
	Express a datetime in the report timezone.

	Args:
		value: Naive or aware datetime
		tz: Target zone, or None for host local time

	Returns:
		Aware datetime
	"""
	if value.tzinfo is None:
		if tz is None:
			return value.astimezone()
		return value.replace(tzinfo=tz)
	if tz is None:
		return value.astimezone()
	return value.astimezone(tz)


def parse_timestamp(value: Any, tz: Optional[tzinfo] = None) -> datetime:
	"""
	Convert a raw timestamp into an aware datetime.

	Accepts datetime objects, ISO-8601 strings (trailing "Z" allowed) and
	int/float epoch milliseconds.

	Raises:
		ValueError: If the value cannot be interpreted as a point in time
	"""
	if isinstance(value, datetime):
		return to_report_tz(value, tz)

	if isinstance(value, bool):
		raise ValueError("timestamp must not be a boolean")

	if isinstance(value, (int, float)):
		try:
			parsed = datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
		except (OverflowError, OSError, ValueError) as e:
			raise ValueError(f"timestamp out of range: {value}") from e
		return to_report_tz(parsed, tz)

	if isinstance(value, str) and value.strip():
		text = value.strip()
		if _DATE_ONLY.match(text):
			parsed = _parse_iso(text, value).replace(tzinfo=timezone.utc)
			return to_report_tz(parsed, tz)
		if text.endswith("Z") or text.endswith("z"):
			text = text[:-1] + "+00:00"
		text = _FRACTION.sub(_pad_fraction, text, count=1)
		return to_report_tz(_parse_iso(text, value), tz)

	raise ValueError(f"timestamp must be a datetime, ISO-8601 string or epoch milliseconds, got {type(value).__name__}")


def normalize_signal(signal: Dict[str, Any], tz: Optional[tzinfo] = None, index: int = 0) -> Dict[str, Any]:
	"""Return a copy of the signal with a parsed, aware timestamp."""
	if not isinstance(signal, dict):
		raise ValueError(f"signal[{index}] must be a dictionary")
	if "timestamp" not in signal:
		raise ValueError(f"signal[{index}] missing required field: 'timestamp'")

	try:
		timestamp = parse_timestamp(signal["timestamp"], tz)
	except ValueError as e:
		raise ValueError(f"signal[{index}] has invalid timestamp: {e}") from e

	normalized = dict(signal)
	normalized["timestamp"] = timestamp
	return normalized


def normalize_signals(signals: List[Dict[str, Any]], tz: Optional[tzinfo] = None) -> List[Dict[str, Any]]:
	"""
	Normalize a whole signal collection.

	Args:
		signals: List of signal dictionaries
		tz: Report timezone, or None for host local time

	Returns:
		New list of normalized signals in input order

	Raises:
		ValueError: If the collection or any signal is malformed
	"""
	if not isinstance(signals, (list, tuple)):
		raise ValueError("signals must be a list")
	return [normalize_signal(signal, tz, idx) for idx, signal in enumerate(signals)]
