"""
Intelligence Report Assembler

Purpose: Turn a signal collection into daily, weekly, or quick reports.

Responsibilities:
- Compute the report period and filter signals into it (inclusive bounds)
- Aggregate metrics and synthesize sections
- Package the report dictionary with identity, title, and generation time
- Report which output formats are available

Design notes:
- Synchronous; every call builds a fresh report from its arguments
- Current time comes from an injectable clock
- Settings come from INTEL/Config/config.yml unless a loader is supplied
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from INTEL.Config.config_loader import ReportConfigLoader, build_config_path
from INTEL.Metrics.aggregator import calculate_metrics
from INTEL.Normalize.normalize import normalize_signals, to_report_tz
from INTEL.Reporting.report_exporter import SUPPORTED_FORMATS
from INTEL.Synthesis.generators import generate_summary
from INTEL.Synthesis.sections import generate_sections

__all__ = [
	"ReportGenerator",
	"REPORT_FORMATS",
	"generate_daily_report",
	"generate_weekly_report",
	"generate_quick_report",
	"check_report_generation_health",
]

logger = logging.getLogger(__name__)

# "incident" is reserved; no entry point produces it yet
REPORT_FORMATS = {"daily", "weekly", "incident"}

Clock = Callable[[], datetime]


def _system_clock() -> datetime:
	return datetime.now(timezone.utc)


class ReportGenerator:
	"""Assemble intelligence reports from signal collections."""

	def __init__(self, config_loader: Optional[ReportConfigLoader] = None, clock: Optional[Clock] = None) -> None:
		self._config = config_loader or ReportConfigLoader(build_config_path())
		self._clock = clock or _system_clock
		self._tz = self._config.get_timezone()

	def _now(self) -> datetime:
		"""Current time in the report timezone."""
		return to_report_tz(self._clock(), self._tz)

	def _display_date(self, value: datetime) -> str:
		return to_report_tz(value, self._tz).strftime(self._config.get_display_date_format())

	def _day_bounds(self, reference: datetime) -> Tuple[datetime, datetime]:
		"""First and last millisecond of the reference's calendar day."""
		if self._tz is None:
			local = reference.astimezone().replace(tzinfo=None)
			start = local.replace(hour=0, minute=0, second=0, microsecond=0).astimezone()
			end = local.replace(hour=23, minute=59, second=59, microsecond=999000).astimezone()
			return start, end

		local = reference.astimezone(self._tz)
		start = local.replace(hour=0, minute=0, second=0, microsecond=0)
		end = local.replace(hour=23, minute=59, second=59, microsecond=999000)
		return start, end

	def _days_before(self, value: datetime, days: int) -> datetime:
		"""Same wall-clock time the given number of calendar days earlier."""
		if self._tz is None:
			return (value.astimezone().replace(tzinfo=None) - timedelta(days=days)).astimezone()
		return value - timedelta(days=days)

	def _filter_period(self, signals: List[Dict[str, Any]], start: datetime, end: datetime) -> List[Dict[str, Any]]:
		normalized = normalize_signals(signals, self._tz)
		in_period = [s for s in normalized if start <= s["timestamp"] <= end]
		logger.debug("Period %s..%s kept %d of %d signals", start.isoformat(), end.isoformat(), len(in_period), len(normalized))
		return in_period

	def _sections(self, signals: List[Dict[str, Any]], metrics: Dict[str, Any], is_weekly: bool) -> List[Dict[str, Any]]:
		return generate_sections(
			signals,
			metrics,
			is_weekly=is_weekly,
			tz=self._tz,
			max_regions=self._config.get_summary_max_regions(),
			volume_change_threshold=self._config.get_volume_change_threshold(),
			critical_activity_threshold=self._config.get_critical_activity_threshold(),
			elevated_high_threshold=self._config.get_elevated_high_threshold(),
		)

	def daily(self, signals: List[Dict[str, Any]], date: Optional[datetime] = None) -> Dict[str, Any]:
		"""
		Generate a daily intelligence report.

		Args:
			signals: Signal dictionaries; each needs a timestamp
			date: Any instant within the day to report on (default: now)

		Returns:
			Report dictionary with format "daily"

		Raises:
			ValueError: If the collection or a timestamp is malformed
		"""
		reference = to_report_tz(date, self._tz) if date is not None else self._now()
		start, end = self._day_bounds(reference)

		day_signals = self._filter_period(signals, start, end)
		metrics = calculate_metrics(day_signals, self._config.get_top_n())
		sections = self._sections(day_signals, metrics, is_weekly=False)
		summary = generate_summary(metrics, self._config.get_summary_max_regions())

		report_date = reference.astimezone(timezone.utc).date().isoformat()
		return {
			"id": f"daily-{report_date}",
			"title": f"Daily Intelligence Report - {self._display_date(reference)}",
			"summary": summary,
			"sections": sections,
			"metrics": metrics,
			"generated_at": self._now(),
			"period": {"start": start, "end": end},
			"format": "daily",
		}

	def weekly(self, signals: List[Dict[str, Any]], end_date: Optional[datetime] = None) -> Dict[str, Any]:
		"""
		Generate a weekly intelligence report.

		The window starts at the same wall-clock time lookback_days calendar
		days before end_date and ends at end_date, both inclusive; neither
		bound is snapped to a day boundary.
		"""
		end = to_report_tz(end_date, self._tz) if end_date is not None else self._now()
		start = self._days_before(end, self._config.get_lookback_days())

		week_signals = self._filter_period(signals, start, end)
		metrics = calculate_metrics(week_signals, self._config.get_top_n())
		sections = self._sections(week_signals, metrics, is_weekly=True)
		summary = (
			f"Weekly intelligence summary covering {self._display_date(start)} to {self._display_date(end)}. "
			f"{metrics['total_signals']} signals detected, {metrics['critical_signals']} critical."
		)

		report_date = end.astimezone(timezone.utc).date().isoformat()
		return {
			"id": f"weekly-{report_date}",
			"title": f"Weekly Intelligence Report - Week of {self._display_date(start)}",
			"summary": summary,
			"sections": sections,
			"metrics": metrics,
			"generated_at": self._now(),
			"period": {"start": start, "end": end},
			"format": "weekly",
		}

	def quick(self, signals: List[Dict[str, Any]]) -> Dict[str, Any]:
		"""Summary and metrics over the whole, unfiltered collection."""
		if not isinstance(signals, (list, tuple)):
			raise ValueError("signals must be a list")
		metrics = calculate_metrics(list(signals), self._config.get_top_n())
		return {
			"summary": generate_summary(metrics, self._config.get_summary_max_regions()),
			"metrics": metrics,
		}


_GENERATOR: Optional[ReportGenerator] = None


def _get_generator() -> ReportGenerator:
	"""Lazy-load the default ReportGenerator singleton."""
	global _GENERATOR
	if _GENERATOR is None:
		_GENERATOR = ReportGenerator()
	return _GENERATOR


def generate_daily_report(signals: List[Dict[str, Any]], date: Optional[datetime] = None) -> Dict[str, Any]:
	"""Daily report using the bundled configuration and system clock."""
	return _get_generator().daily(signals, date)


def generate_weekly_report(signals: List[Dict[str, Any]], end_date: Optional[datetime] = None) -> Dict[str, Any]:
	"""Weekly report using the bundled configuration and system clock."""
	return _get_generator().weekly(signals, end_date)


def generate_quick_report(signals: List[Dict[str, Any]]) -> Dict[str, Any]:
	"""Dashboard summary: {summary, metrics} over every signal given."""
	return _get_generator().quick(signals)


def check_report_generation_health() -> Dict[str, Any]:
	"""Static capability descriptor."""
	return {
		"configured": True,
		"formats": list(SUPPORTED_FORMATS),
	}
