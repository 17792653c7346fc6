"""
Signal Metrics Aggregator

Reduces a list of signals into report metrics:
- Severity bucket counts (critical, high, medium, low)
- Top regions and top categories by frequency
"""

from typing import Any, Dict, List

__all__ = ["calculate_metrics", "top_entries", "category_of", "SEVERITY_LEVELS"]

SEVERITY_LEVELS = ("critical", "high", "medium", "low")


def category_of(signal_type: str) -> str:
	"""Category key of a signal type: the part before the first underscore."""
	return signal_type.split("_", 1)[0]


def top_entries(counts: Dict[str, int], limit: int = 5) -> List[str]:
	"""
	Most frequent keys, highest count first.

	sorted() is stable and dicts keep insertion order, so equal counts stay
	in first-encounter order.
	"""
	ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
	return [key for key, _ in ranked[:limit]]


def calculate_metrics(signals: List[Dict[str, Any]], top_n: int = 5) -> Dict[str, Any]:
	"""
	Calculate report metrics from signals.

	Signals with a severity outside SEVERITY_LEVELS still count toward
	total_signals but toward no bucket, so the buckets may sum to less
	than the total.

	Args:
		signals: Signal dictionaries (timestamps are not inspected)
		top_n: Maximum length of top_regions / top_categories

	Returns:
		{
			"total_signals": int,
			"critical_signals": int,
			"high_signals": int,
			"medium_signals": int,
			"low_signals": int,
			"top_regions": List[str],
			"top_categories": List[str]
		}
	"""
	severity_counts = {level: 0 for level in SEVERITY_LEVELS}
	by_region: Dict[str, int] = {}
	by_category: Dict[str, int] = {}

	for signal in signals:
		if not isinstance(signal, dict):
			continue

		severity = signal.get("severity")
		if severity in severity_counts:
			severity_counts[severity] += 1

		region = signal.get("region")
		if isinstance(region, str) and region:
			by_region[region] = by_region.get(region, 0) + 1

		signal_type = signal.get("type")
		if isinstance(signal_type, str) and signal_type:
			category = category_of(signal_type)
			by_category[category] = by_category.get(category, 0) + 1

	return {
		"total_signals": len(signals),
		"critical_signals": severity_counts["critical"],
		"high_signals": severity_counts["high"],
		"medium_signals": severity_counts["medium"],
		"low_signals": severity_counts["low"],
		"top_regions": top_entries(by_region, top_n),
		"top_categories": top_entries(by_category, top_n),
	}
