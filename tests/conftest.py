import json
from collections import defaultdict
from pathlib import Path

import pytest
from rich.console import Console
from rich.table import Table

from talias.loader import parse_options

SAMPLE_OPTIONS = [
    {
        "title": "Work",
        "details": "Work projects",
        "children": [
            {"title": "Proj A", "details": "Project A", "command": "cd ~/work/a"},
            {"title": "Proj B", "command": "cd ~/work/b && git status"},
        ],
    },
    {
        "title": "Docs",
        "children": [
            {
                "title": "Manuals",
                "children": [{"title": "Documents", "command": "cd ~/Documents"}],
            },
            {"title": "Notes", "command": "vim ~/notes.md"},
        ],
    },
    {"title": "Top", "details": "Process viewer", "command": "htop"},
]


@pytest.fixture
def sample_options():
    return parse_options(json.dumps(SAMPLE_OPTIONS))


@pytest.fixture
def options_file(tmp_path: Path) -> Path:
    path = tmp_path / "options.json"
    path.write_text(json.dumps(SAMPLE_OPTIONS), encoding="utf-8")
    return path


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temporary directory and drop config overrides."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("TALIAS_CONFIG", raising=False)
    return home


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Custom hook to print statistics by marker at the end of the test session.
    """
    _ = (exitstatus, config)  # unused in our reporting helper
    # Markers registered in pyproject.toml
    known_markers = {"unit_core", "unit_ui", "unit_cli", "unit_common"}

    marker_stats = defaultdict(lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0})

    for outcome in ["passed", "failed", "skipped"]:
        reports = terminalreporter.stats.get(outcome, [])
        for report in reports:
            # Only count the actual test call, or setup skips
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in known_markers:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    console = Console()
    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")

    for marker in sorted(marker_stats.keys()):
        stats = marker_stats[marker]
        if stats["total"] > 0:
            table.add_row(
                marker,
                str(stats["total"]),
                str(stats["passed"]),
                str(stats["failed"]),
                str(stats["skipped"]),
                f"{stats['duration']:.2f}",
            )

    console.print("\n")
    console.print(table)
