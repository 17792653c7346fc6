"""
Pytest Configuration and Shared Fixtures

Provides reusable test fixtures for all test modules:
- Signal collections (empty, mixed severities, multi-day)
- A fixed clock and a UTC report configuration
- Temporary directories for file output
"""

import pytest
import os
import sys
from typing import Dict, Any, List
from datetime import datetime, timezone

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from INTEL.Config.config_loader import ReportConfigLoader
from INTEL.Assembly.report_generator import ReportGenerator


FIXED_NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


# ============================================================================
# Signal Fixtures
# ============================================================================

def make_signal(
    title: str = "Signal",
    severity: str = "medium",
    timestamp: Any = "2026-10-19T10:00:00Z",
    region: Any = None,
    signal_type: Any = None,
    description: str = "Details",
) -> Dict[str, Any]:
    """Build a signal dictionary; region/type omitted when None."""
    signal = {
        "title": title,
        "description": description,
        "timestamp": timestamp,
        "severity": severity,
    }
    if region is not None:
        signal["region"] = region
    if signal_type is not None:
        signal["type"] = signal_type
    return signal


@pytest.fixture
def signal_factory():
    """Factory fixture for individual signals."""
    return make_signal


@pytest.fixture
def mixed_signals() -> List[Dict[str, Any]]:
    """10 signals on 2026-10-19: 3 critical (EU x2, US x1), 7 without region."""
    signals = [
        make_signal("Ransomware on EU grid", "critical", "2026-10-19T01:00:00Z", "EU", "malware_ransomware", "Grid operator hit"),
        make_signal("US bank phishing wave", "critical", "2026-10-19T02:00:00Z", "US", "phishing_credential", "Targeted emails"),
        make_signal("EU telecom intrusion", "critical", "2026-10-19T03:00:00Z", "EU", "intrusion", "Lateral movement"),
    ]
    for idx, severity in enumerate(["high", "high", "medium", "medium", "medium", "low", "low"]):
        signals.append(make_signal(f"Background {idx}", severity, f"2026-10-19T{10 + idx:02d}:00:00Z"))
    return signals


@pytest.fixture
def weekly_signals() -> List[Dict[str, Any]]:
    """Signals spread over the week ending 2026-10-19T12:00Z (2 on the first day, 5 on the last)."""
    signals = [
        make_signal("Early A", "high", "2026-10-13T08:00:00Z", "APAC", "malware_loader"),
        make_signal("Early B", "low", "2026-10-13T09:00:00Z", "APAC", "scan"),
        make_signal("Mid", "medium", "2026-10-16T09:00:00Z", "EU", "phishing_sms"),
    ]
    for idx in range(5):
        signals.append(make_signal(f"Late {idx}", "medium", f"2026-10-19T0{idx}:30:00Z", "EU", "malware_wiper"))
    return signals


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def utc_config_path(tmp_path) -> str:
    """Report config pinned to UTC so day boundaries are deterministic."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("""
report:
  timezone: UTC
  display_date_format: "%Y-%m-%d"
  top_n: 5
weekly:
  lookback_days: 7
summary:
  max_regions: 3
trends:
  volume_change_threshold: 20
  critical_activity_threshold: 3
recommendations:
  elevated_high_threshold: 5
rendering:
  priority_icons:
    high: "🔴"
    medium: "🟡"
    low: "🟢"
  json_indent: 2
export:
  output_dir: out
""", encoding="utf-8")
    return str(config_file)


@pytest.fixture
def utc_config(utc_config_path) -> ReportConfigLoader:
    return ReportConfigLoader(utc_config_path)


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def generator(utc_config, fixed_clock) -> ReportGenerator:
    """ReportGenerator with UTC config and a fixed clock."""
    return ReportGenerator(config_loader=utc_config, clock=fixed_clock)


# ============================================================================
# Temporary Directory Fixtures
# ============================================================================

@pytest.fixture
def temp_output_dir(tmp_path):
    """Temporary output directory for exported reports."""
    output_dir = tmp_path / "out"
    output_dir.mkdir()
    yield str(output_dir)
