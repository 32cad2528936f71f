"""
Domain models for the componentcraft system.

This module contains the core domain models using Pydantic for validation
and serialization. A generation request is built once from CLI input,
rendered into three files, written, and then discarded.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ComponentCraftError(Exception):
    """Base exception for componentcraft domain errors."""

    pass


class MissingArgumentError(ComponentCraftError):
    """Raised when no component name was supplied."""

    def __init__(self, message: str = "Please provide a component name") -> None:
        super().__init__(message)


class ComponentExistsError(ComponentCraftError):
    """Raised when the primary output file is already present."""

    def __init__(self, name: str, path: Path) -> None:
        super().__init__(f"Component {name} already exists")
        self.name = name
        self.path = path


class OutputKind(str, Enum):
    """The three kinds of file emitted for a component."""

    COMPONENT = "component"
    TEST = "test"
    STORY = "story"

    @property
    def is_primary(self) -> bool:
        return self is OutputKind.COMPONENT


class GenerationRequest(BaseModel):
    """
    A single request to scaffold a component.

    Output paths are derived from the root directory, the name verbatim,
    and a per-kind suffix. The name is never validated beyond being
    non-empty.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Component name, used verbatim")
    root_dir: Path = Field(..., description="Directory the files are written into")
    component_suffix: str = Field(default=".tsx")
    test_suffix: str = Field(default=".test.tsx")
    story_suffix: str = Field(default=".stories.tsx")

    @property
    def lower_name(self) -> str:
        return self.name.lower()

    @property
    def component_path(self) -> Path:
        return self.root_dir / f"{self.name}{self.component_suffix}"

    @property
    def test_path(self) -> Path:
        return self.root_dir / f"{self.name}{self.test_suffix}"

    @property
    def story_path(self) -> Path:
        return self.root_dir / f"{self.name}{self.story_suffix}"

    def path_for(self, kind: OutputKind) -> Path:
        """Return the output path for the given kind."""
        return {
            OutputKind.COMPONENT: self.component_path,
            OutputKind.TEST: self.test_path,
            OutputKind.STORY: self.story_path,
        }[kind]

    def output_paths(self) -> list[Path]:
        """All output paths in write order."""
        return [self.path_for(kind) for kind in OutputKind]


class RenderedFile(BaseModel):
    """A rendered template waiting to be written."""

    kind: OutputKind
    path: Path
    content: str


class GeneratedFile(BaseModel):
    """A file that has been written to disk."""

    kind: OutputKind
    path: Path
    bytes_written: int = Field(..., ge=0)
    overwritten: bool = Field(
        default=False, description="Whether a previous file at this path was replaced"
    )


class GenerationResult(BaseModel):
    """Outcome of a successful generation run."""

    name: str
    files: list[GeneratedFile] = Field(default_factory=list)

    @property
    def paths(self) -> list[Path]:
        return [f.path for f in self.files]
