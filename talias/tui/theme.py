from __future__ import annotations

from typing import Mapping

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
}

TREE_GROUP_STYLE = "bold cyan"
TREE_COMMAND_STYLE = "dim"
GROUP_MARKER = "> "


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)


def prompt_toolkit_launcher_style() -> Mapping[str, str]:
    return {
        "selected": "bg:#0000aa fg:white bold",
        "group": "bold",
        "separator": "fg:#0000aa",
        "frame.border": "fg:#0000aa",
        "frame.label": "fg:#0000aa bold",
        "search": "bg:#eeeeee fg:#000000",
        "title": "fg:blue bold underline",
        "empty": "fg:#888888 italic",
    }
