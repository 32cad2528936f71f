"""
Component templates and registry with versioning.

This package provides the fixed component, test and story skeletons and
the safe renderer used to substitute a component name into them.
"""

from __future__ import annotations

from .registry import (
    TemplateRegistry,
    render_component,
    render_story,
    render_test,
)
from .renderer import TemplateError, render_template

__all__ = [
    "TemplateRegistry",
    "TemplateError",
    "render_template",
    "render_component",
    "render_test",
    "render_story",
]
