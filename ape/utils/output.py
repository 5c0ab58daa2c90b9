"""Output formatting utilities for consistent CLI reporting."""

import click


def section_header(text: str) -> str:
    """Format a section header with color."""
    return click.style(f"▶ {text}", fg='cyan', bold=True)


def success(text: str, prefix: str = "✓") -> str:
    return f"{click.style(prefix, fg='green')} {text}"


def error(text: str, prefix: str = "✗") -> str:
    return f"{click.style(prefix, fg='red')} {text}"


def warning(text: str, prefix: str = "⚠") -> str:
    return f"{click.style(prefix, fg='yellow')} {text}"


def info(text: str) -> str:
    return f"  {click.style('•', fg='blue')} {text}"


def count_badge(count: int, label: str, color: str = 'cyan') -> str:
    """Format a count badge.

    Args:
        count: Count to display
        label: Label for the count
        color: Color for the count (default: cyan)

    Returns:
        Formatted count badge
    """
    return f"{click.style(str(count), fg=color, bold=True)} {label}"


def divider() -> str:
    return click.style("─" * 60, fg='bright_black')


def diagnostic_lines(diagnostics) -> list[str]:
    """Render a diagnostic log, one warning line per message, in order."""
    return [warning(message) for message in diagnostics]


__all__ = [
    "section_header",
    "success",
    "error",
    "warning",
    "info",
    "count_badge",
    "divider",
    "diagnostic_lines",
]
