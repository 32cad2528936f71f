"""
Template rendering utilities for deterministic output.

This module provides safe template rendering that never executes template
content and never re-interprets substituted values, so any component name
is accepted verbatim.
"""

from __future__ import annotations

from typing import Any


class TemplateError(Exception):
    """Raised when a template cannot be looked up or rendered."""


def render_template(template: str, values: dict[str, Any]) -> str:
    """
    Safely render a template with the given values.

    Uses a safe replacement strategy to avoid KeyErrors: placeholders with no
    matching value are left as-is. Values are converted with ``str`` and
    inserted verbatim.

    Args:
        template: Template string with {key} placeholders and doubled literal braces
        values: Dictionary of values to substitute

    Returns:
        Rendered template string

    Raises:
        TemplateError: If the template itself is malformed
    """

    class SafeDict(dict):
        def __missing__(self, key: str) -> str:  # type: ignore[override]
            return "{" + key + "}"

    prepared = {k: str(v) for k, v in values.items()}

    try:
        return template.format_map(SafeDict(prepared))
    except (ValueError, IndexError, AttributeError) as exc:
        raise TemplateError(f"Failed to render template: {exc}") from exc
