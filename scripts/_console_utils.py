"""
Rich console helpers for the reader CLI.
"""

from __future__ import annotations

from functools import lru_cache

from rich.console import Console
from rich.text import Text

BAR_WIDTH = 30


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Shared stdout console."""
    return Console()


@lru_cache(maxsize=1)
def get_err_console() -> Console:
    """Shared stderr console for error messages."""
    return Console(stderr=True)


def status_label(label: str, style: str) -> Text:
    """Bracketed label such as ``[CURRENT]`` in the given style."""
    return Text(f"[{label}]", style=style)


def progress_bar(percent: float, width: int = BAR_WIDTH) -> Text:
    """Render a fixed-width text progress bar followed by the percentage."""
    percent = min(max(percent, 0.0), 100.0)
    filled = round(width * percent / 100)
    return Text.assemble(
        Text("#" * filled, style="bold green"),
        Text("-" * (width - filled), style="dim"),
        Text(f" {percent:5.1f}%", style="bold white"),
    )
