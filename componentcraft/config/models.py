"""Configuration models for componentcraft."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class GenerationConfig(BaseModel):
    """Configuration for file generation."""

    component_suffix: str = Field(
        default=".tsx", description="Suffix appended to the name for the component file"
    )
    test_suffix: str = Field(
        default=".test.tsx", description="Suffix appended to the name for the test file"
    )
    story_suffix: str = Field(
        default=".stories.tsx",
        description="Suffix appended to the name for the Storybook file",
    )
    encoding: str = Field(default="utf-8", description="Encoding of written files")
    template_version: str = Field(default="v1", description="Template set to render")
    check_all_outputs: bool = Field(
        default=False,
        description="Refuse to generate when any output exists, not only the component file",
    )

    @field_validator("component_suffix", "test_suffix", "story_suffix")
    @classmethod
    def validate_suffix(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError("Suffix must be non-empty and must not contain path separators")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        import codecs

        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v


class UIConfig(BaseModel):
    """Configuration for user interface behavior."""

    default_style: Literal["auto", "classic", "minimal"] = Field(
        default="auto",
        description="UI style when neither --ui nor COMPONENTCRAFT_UI is given",
    )


class LoggingConfig(BaseModel):
    """Configuration for logging behavior."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Root log level when neither --verbose nor --quiet is given",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class ComponentCraftConfig(BaseModel):
    """Main configuration model for componentcraft."""

    generation: GenerationConfig = Field(
        default_factory=GenerationConfig,
        description="File generation configuration",
    )

    ui: UIConfig = Field(
        default_factory=UIConfig,
        description="User interface behavior configuration",
    )

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging behavior configuration",
    )
