"""
Console output helpers for the wizard.

Keeps formatting consistent between the prompts, the collaborator
trace lines and the final summary.

Usage:
    from shuttle_init.ux import print_success, print_error, print_step

    print_step("Checking if blog is available")
    print_success("Project created")
"""

from typing import Dict, Optional
import sys

import click


# =============================================================================
# Status Icons
# =============================================================================

ICONS = {
    "success": "✓",
    "error": "✗",
    "info": "ℹ",
    "arrow": "-->",
}

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "red": "\033[31m",
    "green": "\033[32m",
    "blue": "\033[34m",
    "cyan": "\033[36m",
}

_use_colors = sys.stdout.isatty()


def set_colors(enabled: bool) -> None:
    """Enable or disable color output."""
    global _use_colors
    _use_colors = enabled


def _color(text: str, color: str) -> str:
    if _use_colors and color in COLORS:
        return f"{COLORS[color]}{text}{COLORS['reset']}"
    return text


# =============================================================================
# Message Formatting
# =============================================================================

def print_success(message: str) -> None:
    icon = _color(ICONS["success"], "green")
    click.echo(f"{icon} {message}")


def print_error(message: str) -> None:
    """Print an error message on stderr."""
    icon = _color(ICONS["error"], "red")
    click.echo(f"{icon} {message}", err=True)


def print_info(message: str) -> None:
    icon = _color(ICONS["info"], "blue")
    click.echo(f"{icon} {message}")


def print_step(message: str) -> None:
    """Print a trace line for an external step on stderr.

    These lines report what the wizard is doing on the operator's
    behalf (logging in, checking names, creating environments).
    """
    arrow = _color(ICONS["arrow"], "cyan")
    click.echo(f"{arrow} {message}", err=True)


# =============================================================================
# Headers and Summary
# =============================================================================

def print_header(title: str, char: str = "=") -> None:
    """Print a section header."""
    click.echo(_color(title, "bold"))
    click.echo(char * len(title))


def print_summary(
    title: str,
    stats: Dict[str, object],
    status: Optional[str] = None,
) -> None:
    """Print a summary with aligned key/value lines.

    Args:
        title: Summary title
        stats: Dictionary of label -> value
        status: Optional closing status line
    """
    click.echo("")
    print_header(title)

    max_key_len = max(len(k) for k in stats.keys()) if stats else 0
    for key, value in stats.items():
        click.echo(f"  {key.ljust(max_key_len)}: {value}")

    if status:
        click.echo("")
        print_success(status)
