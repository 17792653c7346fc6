"""
Report Text Generators

Purpose: Produce the prose pieces of an intelligence report.

Responsibilities:
- Executive summary sentence from metrics
- Trend lines from signal volume per day
- Ordered recommendation list from metrics

Design notes:
- Pure functions; thresholds come in as arguments
- Days are keyed by calendar date so ordering is chronological
"""

from datetime import date, tzinfo
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from INTEL.Normalize.normalize import parse_timestamp

__all__ = ["generate_summary", "analyze_trends", "generate_recommendations", "NO_TRENDS_MESSAGE"]

NO_TRENDS_MESSAGE = "No significant trends detected. Signal volume remained stable."


def generate_summary(metrics: Dict[str, Any], max_regions: int = 3) -> str:
	"""Generate the executive summary sentence."""
	summary = f"Intelligence monitoring detected **{metrics['total_signals']} signals** in the reporting period."

	if metrics["critical_signals"] > 0:
		summary += f" **{metrics['critical_signals']} critical** items require immediate attention."

	top_regions = metrics.get("top_regions", [])
	if top_regions:
		summary += f" Most active regions: {', '.join(top_regions[:max_regions])}."

	return summary


def _percent_change(first: int, last: int) -> int:
	"""Whole-number percent change, halves rounded away from zero."""
	raw = Decimal(last - first) / Decimal(max(1, first)) * 100
	return int(raw.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _count_by_day(signals: List[Dict[str, Any]], tz: Optional[tzinfo]) -> Dict[date, int]:
	by_day: Dict[date, int] = {}
	for signal in signals:
		day = parse_timestamp(signal.get("timestamp"), tz).date()
		by_day[day] = by_day.get(day, 0) + 1
	return by_day


def analyze_trends(
	signals: List[Dict[str, Any]],
	tz: Optional[tzinfo] = None,
	volume_change_threshold: int = 20,
	critical_activity_threshold: int = 3,
) -> str:
	"""
	Describe volume and severity trends across the signals.

	Compares the earliest and the latest day's signal counts; the change is
	reported only when its magnitude exceeds volume_change_threshold percent.

	Args:
		signals: Normalized signals (timestamps required)
		tz: Timezone used to assign signals to calendar days (None = local)
		volume_change_threshold: Minimum absolute percent change to report
		critical_activity_threshold: Critical count above which activity is elevated

	Returns:
		Newline-joined trend lines, or NO_TRENDS_MESSAGE when no volume
		or severity line was produced
	"""
	trends: List[str] = []

	by_day = _count_by_day(signals, tz)
	days = sorted(by_day)
	if len(days) >= 2:
		change = _percent_change(by_day[days[0]], by_day[days[-1]])
		if abs(change) > volume_change_threshold:
			direction = "increased" if change > 0 else "decreased"
			trends.append(f"Signal volume {direction} by {abs(change)}% over the week")

	critical_count = sum(1 for s in signals if s.get("severity") == "critical")
	if critical_count > critical_activity_threshold:
		trends.append(f"Elevated critical activity ({critical_count} critical signals)")

	return "\n".join(trends) if trends else NO_TRENDS_MESSAGE


def generate_recommendations(metrics: Dict[str, Any], elevated_high_threshold: int = 5) -> List[str]:
	"""Generate recommended actions; the last entry is always the status or export line."""
	recommendations: List[str] = []

	if metrics["critical_signals"] > 0:
		recommendations.append(
			f"🔴 **Immediate**: Review {metrics['critical_signals']} critical signals and coordinate response"
		)

	top_regions = metrics.get("top_regions", [])
	if top_regions:
		recommendations.append(f"📍 **Focus**: Monitor {top_regions[0]} closely (highest activity)")

	if metrics["high_signals"] > elevated_high_threshold:
		recommendations.append(f"⚠️ **Elevated**: {metrics['high_signals']} high-priority items require follow-up")

	if metrics["total_signals"] == 0:
		recommendations.append("✅ **Status**: No intelligence signals detected. Continue normal monitoring.")
	else:
		recommendations.append("📊 **Action**: Export detailed data for further analysis")

	return recommendations
