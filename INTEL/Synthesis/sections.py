"""
Report Section Synthesizer

Builds the ordered section list of an intelligence report:
Executive Summary, Critical Intelligence, Regional Distribution,
Weekly Trends, Recommended Actions.
"""

from datetime import tzinfo
from typing import Any, Dict, List, Optional

from INTEL.Synthesis.generators import analyze_trends, generate_recommendations, generate_summary

__all__ = ["generate_sections", "SECTION_TYPES", "SECTION_PRIORITIES"]

SECTION_TYPES = {"summary", "analysis", "data", "recommendations"}
SECTION_PRIORITIES = {"high", "medium", "low"}


def _section(title: str, content: Any, section_type: str, priority: str) -> Dict[str, Any]:
	return {"title": title, "content": content, "type": section_type, "priority": priority}


def _critical_content(critical_signals: List[Dict[str, Any]]) -> str:
	blocks = []
	for signal in critical_signals:
		region = signal.get("region") or "N/A"
		blocks.append(f"- **{signal.get('title', '')}** ({region})\n  {signal.get('description', '')}")
	return "\n\n".join(blocks)


def _regional_content(signals: List[Dict[str, Any]], top_regions: List[str]) -> str:
	lines = []
	for region in top_regions:
		count = len([s for s in signals if s.get("region") == region])
		lines.append(f"- **{region}**: {count} signals")
	return "\n".join(lines)


def generate_sections(
	signals: List[Dict[str, Any]],
	metrics: Dict[str, Any],
	is_weekly: bool = False,
	tz: Optional[tzinfo] = None,
	max_regions: int = 3,
	volume_change_threshold: int = 20,
	critical_activity_threshold: int = 3,
	elevated_high_threshold: int = 5,
) -> List[Dict[str, Any]]:
	"""
	Generate report sections in their fixed order.

	Args:
		signals: Signals already filtered to the report period
		metrics: Output of calculate_metrics() for the same signals
		is_weekly: Include the Weekly Trends section
		tz: Timezone for trend day grouping (None = local)

	Returns:
		List of {"title", "content", "type", "priority"} dictionaries.
		Recommended Actions carries a list of strings as content.
	"""
	sections = [
		_section("Executive Summary", generate_summary(metrics, max_regions), "summary", "high"),
	]

	critical_signals = [s for s in signals if s.get("severity") == "critical"]
	if critical_signals:
		sections.append(_section("Critical Intelligence", _critical_content(critical_signals), "analysis", "high"))

	if metrics["top_regions"]:
		sections.append(
			_section("Regional Distribution", _regional_content(signals, metrics["top_regions"]), "data", "medium")
		)

	if is_weekly:
		trends = analyze_trends(
			signals,
			tz=tz,
			volume_change_threshold=volume_change_threshold,
			critical_activity_threshold=critical_activity_threshold,
		)
		sections.append(_section("Weekly Trends", trends, "analysis", "medium"))

	sections.append(
		_section(
			"Recommended Actions",
			generate_recommendations(metrics, elevated_high_threshold),
			"recommendations",
			"medium",
		)
	)

	return sections
