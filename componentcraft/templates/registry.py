"""
Versioned registry of component templates.

The registry maps each output kind to a raw skeleton for the selected
version and renders it for a component name. Rendering is pure: no file
or console I/O happens here.
"""

from __future__ import annotations

from collections.abc import Callable

from ..domain.models import OutputKind
from .renderer import TemplateError, render_template
from .v1.react import (
    component_template_v1,
    story_template_v1,
    unit_test_template_v1,
)


class TemplateRegistry:
    """Versioned registry for component, test and story templates."""

    SUPPORTED_VERSIONS = {"v1"}

    def __init__(self, version: str = "v1") -> None:
        if version not in self.SUPPORTED_VERSIONS:
            raise TemplateError(f"Unsupported template version: {version}")
        self.version = version

        self._templates: dict[str, dict[OutputKind, Callable[[], str]]] = {
            "v1": {
                OutputKind.COMPONENT: component_template_v1,
                OutputKind.TEST: unit_test_template_v1,
                OutputKind.STORY: story_template_v1,
            }
        }

    def get_template(self, kind: OutputKind) -> str:
        """Return the raw skeleton for ``kind``."""
        try:
            return self._templates[self.version][OutputKind(kind)]()
        except (KeyError, ValueError) as exc:
            raise TemplateError(
                f"No template for kind '{kind}' in version {self.version}"
            ) from exc

    def render(self, kind: OutputKind, name: str) -> str:
        """Render the template for ``kind`` with ``name`` substituted."""
        return render_template(
            self.get_template(kind), {"name": name, "lower_name": name.lower()}
        )

    def render_all(self, name: str) -> dict[OutputKind, str]:
        """Render every kind, in write order."""
        return {kind: self.render(kind, name) for kind in OutputKind}


_default_registry: TemplateRegistry | None = None


def _registry() -> TemplateRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def render_component(name: str) -> str:
    """Render the component definition for ``name``."""
    return _registry().render(OutputKind.COMPONENT, name)


def render_test(name: str) -> str:
    """Render the test suite for ``name``."""
    return _registry().render(OutputKind.TEST, name)


def render_story(name: str) -> str:
    """Render the Storybook stories for ``name``."""
    return _registry().render(OutputKind.STORY, name)
