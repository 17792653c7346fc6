"""
Report Configuration

Purpose: Load report generation settings from YAML.

Responsibilities:
- Read config.yml (timezone, display format, thresholds, glyphs)
- Resolve the report timezone
- Fall back to defaults for any missing key
"""

import os
from datetime import tzinfo
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

import yaml

__all__ = ["ReportConfigLoader", "build_config_path", "DEFAULT_PRIORITY_ICONS"]

DEFAULT_PRIORITY_ICONS = {"high": "🔴", "medium": "🟡", "low": "🟢"}


def build_config_path() -> str:
	"""Path to the bundled config.yml."""
	return os.path.join(os.path.dirname(__file__), "config.yml")


class ReportConfigLoader:
	"""Load report configuration (windows, thresholds, rendering)."""

	def __init__(self, config_path: str) -> None:
		self._config_path = config_path
		self._config = self._load()

	def _load(self) -> Dict[str, Any]:
		if not os.path.isfile(self._config_path):
			raise FileNotFoundError(f"Report config not found: {self._config_path}")
		with open(self._config_path, "r", encoding="utf-8") as f:
			return yaml.safe_load(f) or {}

	def _section(self, name: str) -> Dict[str, Any]:
		section = self._config.get(name, {}) or {}
		return section if isinstance(section, dict) else {}

	@property
	def report_config(self) -> Dict[str, Any]:
		return self._section("report")

	@property
	def rendering_config(self) -> Dict[str, Any]:
		return self._section("rendering")

	def get_timezone(self) -> Optional[tzinfo]:
		"""
		Resolve the configured report timezone.

		Returns:
			ZoneInfo for an IANA name, or None meaning host local time
		"""
		name = self.report_config.get("timezone", "local")
		if not name or str(name).lower() == "local":
			return None
		return ZoneInfo(str(name))

	def get_display_date_format(self) -> str:
		return str(self.report_config.get("display_date_format", "%m/%d/%Y"))

	def get_top_n(self) -> int:
		return int(self.report_config.get("top_n", 5))

	def get_lookback_days(self) -> int:
		return int(self._section("weekly").get("lookback_days", 7))

	def get_summary_max_regions(self) -> int:
		return int(self._section("summary").get("max_regions", 3))

	def get_volume_change_threshold(self) -> int:
		return int(self._section("trends").get("volume_change_threshold", 20))

	def get_critical_activity_threshold(self) -> int:
		return int(self._section("trends").get("critical_activity_threshold", 3))

	def get_elevated_high_threshold(self) -> int:
		return int(self._section("recommendations").get("elevated_high_threshold", 5))

	def get_priority_icons(self) -> Dict[str, str]:
		icons = self.rendering_config.get("priority_icons", {}) or {}
		if not isinstance(icons, dict):
			icons = {}
		merged = dict(DEFAULT_PRIORITY_ICONS)
		merged.update({str(k): str(v) for k, v in icons.items()})
		return merged

	def get_json_indent(self) -> int:
		return int(self.rendering_config.get("json_indent", 2))

	def get_output_dir(self) -> str:
		"""Export directory (relative paths resolve against the working directory)."""
		return str(self._section("export").get("output_dir", "out"))
