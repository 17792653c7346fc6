"""
Report Exporter

Purpose: Turn reports into text in a chosen format and write them to disk.

Responsibilities:
- Dispatch to the Markdown or JSON renderer
- Write <output_dir>/reports/<report_id>.<ext>

Design notes:
- Rendering settings come from the report config when a loader is given
- export_report() never raises; failures are logged and reported as False
"""

import logging
import os
from typing import Any, Dict, Optional

from INTEL.Config.config_loader import ReportConfigLoader
from INTEL.Reporting.json_renderer import report_to_json
from INTEL.Reporting.markdown_renderer import report_to_markdown

__all__ = ["SUPPORTED_FORMATS", "FILE_EXTENSIONS", "render_report", "export_report"]

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("markdown", "json")

FILE_EXTENSIONS = {"markdown": "md", "json": "json"}


def render_report(report: Dict[str, Any], fmt: str = "markdown", config_loader: Optional[ReportConfigLoader] = None) -> str:
	"""
	Render a report as text.

	Args:
		report: Report dictionary
		fmt: "markdown" or "json"
		config_loader: Optional source of glyphs, date format and JSON indent

	Raises:
		ValueError: If fmt is not a supported format
	"""
	if fmt not in SUPPORTED_FORMATS:
		raise ValueError(f"fmt must be one of {list(SUPPORTED_FORMATS)}, got {fmt!r}")

	if fmt == "json":
		indent = config_loader.get_json_indent() if config_loader else 2
		return report_to_json(report, indent=indent)

	if config_loader:
		return report_to_markdown(
			report,
			priority_icons=config_loader.get_priority_icons(),
			display_date_format=config_loader.get_display_date_format(),
		)
	return report_to_markdown(report)


def export_report(
	report: Dict[str, Any],
	output_dir: Optional[str] = None,
	fmt: str = "markdown",
	config_loader: Optional[ReportConfigLoader] = None,
) -> bool:
	"""
	Write a rendered report to <output_dir>/reports/<report_id>.<ext>.

	Args:
		report: Report dictionary with an "id"
		output_dir: Base output directory (default: export.output_dir from config, else "out")
		fmt: "markdown" or "json"
		config_loader: Optional report configuration

	Returns:
		True if the file was written, False otherwise
	"""
	try:
		if not isinstance(report, dict):
			raise ValueError("report must be a dictionary")
		report_id = report.get("id")
		if not isinstance(report_id, str) or not report_id.strip():
			raise ValueError("report id must be a non-empty string")

		content = render_report(report, fmt, config_loader)

		if output_dir is None:
			output_dir = config_loader.get_output_dir() if config_loader else "out"
		reports_dir = os.path.join(output_dir, "reports")
		os.makedirs(reports_dir, exist_ok=True)

		file_path = os.path.join(reports_dir, f"{report_id}.{FILE_EXTENSIONS[fmt]}")
		with open(file_path, "w", encoding="utf-8") as f:
			f.write(content)

		logger.info("Exported %s report to %s", fmt, file_path)
		return True

	except (OSError, TypeError, ValueError) as e:
		logger.error("Error exporting report: %s", e)
		return False
