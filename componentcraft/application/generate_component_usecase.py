"""
Generate Component Use Case - scaffold a component, its tests and its stories.

This module implements the linear generation flow:

    validate argument -> check existence -> render all -> write all -> report

Validation failures raise before anything is rendered or written. Write
failures from the writer port propagate unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config.models import GenerationConfig
from ..domain.models import (
    ComponentExistsError,
    GeneratedFile,
    GenerationRequest,
    GenerationResult,
    MissingArgumentError,
    OutputKind,
    RenderedFile,
)
from ..ports.ui_port import UIPort
from ..ports.writer_port import WriterPort
from ..templates.registry import TemplateRegistry

logger = logging.getLogger(__name__)


class GenerateComponentUseCase:
    """
    Use case for scaffolding a component from the fixed templates.

    The working directory is passed in explicitly as ``root_dir`` and all
    file access goes through the writer port.
    """

    def __init__(
        self,
        writer_port: WriterPort,
        ui_port: UIPort | None = None,
        template_registry: TemplateRegistry | None = None,
        config: GenerationConfig | None = None,
    ):
        """
        Initialize the use case with required ports.

        Args:
            writer_port: Port used to check for and write output files
            ui_port: Optional port notified after each file is written
            template_registry: Registry of templates (default version if None)
            config: Generation settings (defaults if None)
        """
        self._writer = writer_port
        self._ui = ui_port
        self._config = config or GenerationConfig()
        self._templates = template_registry or TemplateRegistry(
            self._config.template_version
        )

    def build_request(self, name: str | None, root_dir: Path) -> GenerationRequest:
        """
        Validate the name argument and derive output paths.

        Raises:
            MissingArgumentError: If no name (or an empty name) was given
        """
        if not name:
            raise MissingArgumentError()

        return GenerationRequest(
            name=name,
            root_dir=Path(root_dir),
            component_suffix=self._config.component_suffix,
            test_suffix=self._config.test_suffix,
            story_suffix=self._config.story_suffix,
        )

    def check_existence(self, request: GenerationRequest) -> None:
        """
        Refuse to proceed when the component file is already present.

        Only the primary output is checked unless ``check_all_outputs`` is
        enabled; existing test and story files are otherwise overwritten.

        Raises:
            ComponentExistsError: If a guarded output path is occupied
        """
        kinds = list(OutputKind) if self._config.check_all_outputs else [
            OutputKind.COMPONENT
        ]
        for kind in kinds:
            path = request.path_for(kind)
            if self._writer.exists(path):
                logger.debug(f"Refusing to overwrite {path}")
                raise ComponentExistsError(request.name, path)

    def render_all(self, request: GenerationRequest) -> list[RenderedFile]:
        """Render every template for the request, in write order."""
        rendered = self._templates.render_all(request.name)
        return [
            RenderedFile(kind=kind, path=request.path_for(kind), content=content)
            for kind, content in rendered.items()
        ]

    def write_all(self, rendered_files: list[RenderedFile]) -> list[GeneratedFile]:
        """Write each rendered file and confirm it through the UI port."""
        generated: list[GeneratedFile] = []

        for rendered in rendered_files:
            write_result = self._writer.write(rendered.path, rendered.content)
            if write_result.get("file_existed") and not rendered.kind.is_primary:
                logger.debug(f"Overwrote existing {rendered.kind.value} file {rendered.path}")

            generated_file = GeneratedFile(
                kind=rendered.kind,
                path=rendered.path,
                bytes_written=write_result.get(
                    "bytes_written", len(rendered.content.encode("utf-8"))
                ),
                overwritten=bool(write_result.get("file_existed", False)),
            )
            generated.append(generated_file)

            if self._ui is not None:
                self._ui.display_file_written(generated_file.kind, generated_file.path)

        return generated

    def generate(self, name: str | None, root_dir: Path) -> GenerationResult:
        """
        Run the full generation flow for ``name`` under ``root_dir``.

        Args:
            name: Component name exactly as supplied by the caller
            root_dir: Directory the three files are written into

        Returns:
            GenerationResult listing the written files in order

        Raises:
            MissingArgumentError: If ``name`` is missing or empty
            ComponentExistsError: If the component file already exists
            OSError: If a file cannot be written
        """
        request = self.build_request(name, root_dir)
        logger.debug(f"Generating component {request.name} in {request.root_dir}")

        self.check_existence(request)
        rendered_files = self.render_all(request)
        generated = self.write_all(rendered_files)

        logger.debug(f"Generated {len(generated)} files for {request.name}")
        return GenerationResult(name=request.name, files=generated)
