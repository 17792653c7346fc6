"""
Markdown Report Renderer

Purpose: Render intelligence reports as human-readable Markdown.

Responsibilities:
- Transform the report dictionary into template-friendly context
- Load and render the Jinja2 template
- Prefix each section heading with its priority glyph

Design notes:
- Jinja2 template file with an inline fallback
- Autoescape off: output is Markdown, not HTML
"""

import logging
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, Template, TemplateError

from INTEL.Config.config_loader import DEFAULT_PRIORITY_ICONS
from INTEL.Reporting.json_renderer import iso_utc

__all__ = ["ReportDataTransformer", "MarkdownTemplateLoader", "report_to_markdown"]

logger = logging.getLogger(__name__)


class ReportDataTransformer:
	"""Transform a report dictionary into template-ready context."""

	def __init__(
		self,
		report: Dict[str, Any],
		priority_icons: Optional[Dict[str, str]] = None,
		display_date_format: str = "%m/%d/%Y",
	) -> None:
		self._report = report
		self._icons = priority_icons or DEFAULT_PRIORITY_ICONS
		self._date_format = display_date_format

	def _display_date(self, value: Any) -> str:
		if isinstance(value, datetime):
			return value.strftime(self._date_format)
		return str(value) if value is not None else ""

	def transform_generated_at(self) -> str:
		generated_at = self._report.get("generated_at")
		if isinstance(generated_at, datetime):
			return iso_utc(generated_at)
		return str(generated_at) if generated_at is not None else ""

	def transform_period(self) -> Dict[str, str]:
		period = self._report.get("period", {})
		if not isinstance(period, dict):
			period = {}
		return {
			"start": self._display_date(period.get("start")),
			"end": self._display_date(period.get("end")),
		}

	def transform_metrics(self) -> Dict[str, int]:
		"""The five counts shown in the Metrics block."""
		metrics = self._report.get("metrics", {})
		if not isinstance(metrics, dict):
			metrics = {}
		keys = ["total_signals", "critical_signals", "high_signals", "medium_signals", "low_signals"]
		return {key: metrics.get(key, 0) for key in keys}

	def transform_sections(self) -> List[Dict[str, str]]:
		"""
		Flatten sections for the template.

		List content (recommendations) is joined one entry per line.
		Unknown priorities get the low-priority glyph.
		"""
		sections = self._report.get("sections", [])
		if not isinstance(sections, list):
			return []

		result = []
		for section in sections:
			if not isinstance(section, dict):
				continue
			content = section.get("content", "")
			if isinstance(content, (list, tuple)):
				content = "\n".join(str(line) for line in content)
			priority = section.get("priority", "low")
			result.append({
				"icon": self._icons.get(priority, self._icons.get("low", "")),
				"title": section.get("title", ""),
				"content": content,
			})
		return result

	def transform(self) -> Dict[str, Any]:
		return {
			"report": {
				"title": self._report.get("title", ""),
				"summary": self._report.get("summary", ""),
			},
			"generated_at": self.transform_generated_at(),
			"period": self.transform_period(),
			"metrics": self.transform_metrics(),
			"sections": self.transform_sections(),
		}


class MarkdownTemplateLoader:
	"""Load the Jinja2 template for Markdown reports."""

	TEMPLATE_FILE = "intelligence_report.md.j2"

	def __init__(self, template_dir: Optional[str] = None) -> None:
		self._template_dir = template_dir or self._get_template_dir()

	def _get_template_dir(self) -> str:
		"""Absolute path to the bundled templates directory."""
		return os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

	def _create_inline_fallback(self) -> str:
		"""Same layout as the bundled template file."""
		return """# {{ report.title }}

**Generated:** {{ generated_at }}
**Period:** {{ period.start }} - {{ period.end }}

## Summary

{{ report.summary }}

## Metrics

- Total Signals: {{ metrics.total_signals }}
- Critical: {{ metrics.critical_signals }}
- High: {{ metrics.high_signals }}
- Medium: {{ metrics.medium_signals }}
- Low: {{ metrics.low_signals }}

{% for section in sections %}
## {{ section.icon }} {{ section.title }}

{{ section.content }}

{% endfor %}
"""

	def _environment(self, loader: Optional[FileSystemLoader] = None) -> Environment:
		return Environment(
			loader=loader,
			autoescape=False,
			trim_blocks=True,
			lstrip_blocks=True,
		)

	def load_template(self) -> Template:
		"""
		Load the template from file, or the inline fallback.

		Returns:
			Jinja2 Template object
		"""
		template_path = os.path.join(self._template_dir, self.TEMPLATE_FILE)

		if os.path.isfile(template_path):
			try:
				env = self._environment(FileSystemLoader(self._template_dir))
				return env.get_template(self.TEMPLATE_FILE)
			except TemplateError as e:
				logger.warning("Could not load %s, using inline template: %s", template_path, e)

		return self._environment().from_string(self._create_inline_fallback())


def report_to_markdown(
	report: Dict[str, Any],
	priority_icons: Optional[Dict[str, str]] = None,
	display_date_format: str = "%m/%d/%Y",
) -> str:
	"""
	Render a full report (daily or weekly) as Markdown.

	Args:
		report: Report dictionary from ReportGenerator
		priority_icons: Glyph per section priority (high/medium/low)
		display_date_format: strftime format for the period line

	Returns:
		Markdown text
	"""
	context = ReportDataTransformer(report, priority_icons, display_date_format).transform()
	template = MarkdownTemplateLoader().load_template()
	return template.render(**context)
