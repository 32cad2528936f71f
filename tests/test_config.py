"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest

from componentcraft.config.loader import ConfigLoader, ConfigurationError
from componentcraft.config.models import (
    ComponentCraftConfig,
    GenerationConfig,
    LoggingConfig,
)


class TestConfigModels:
    """Test the pydantic configuration models."""

    def test_defaults(self):
        config = ComponentCraftConfig()

        assert config.generation.component_suffix == ".tsx"
        assert config.generation.test_suffix == ".test.tsx"
        assert config.generation.story_suffix == ".stories.tsx"
        assert config.generation.encoding == "utf-8"
        assert config.generation.template_version == "v1"
        assert config.generation.check_all_outputs is False
        assert config.ui.default_style == "auto"
        assert config.logging.level == "WARNING"

    def test_suffix_rejects_path_separators(self):
        with pytest.raises(ValueError, match="path separators"):
            GenerationConfig(component_suffix="/evil.tsx")

    def test_unknown_encoding(self):
        with pytest.raises(ValueError, match="Unknown encoding"):
            GenerationConfig(encoding="not-a-codec")

    def test_level_is_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"


class TestConfigLoader:
    """Test merging of file, environment and CLI sources."""

    def test_no_file_uses_defaults(self, tmp_path: Path):
        config = ConfigLoader(search_dir=tmp_path).load_config(env_overrides={})
        assert config == ComponentCraftConfig()

    def test_load_toml(self, tmp_path: Path):
        (tmp_path / ".componentcraft.toml").write_text(
            """
[generation]
check_all_outputs = true
test_suffix = ".spec.tsx"

[ui]
default_style = "minimal"
""",
            encoding="utf-8",
        )

        config = ConfigLoader(search_dir=tmp_path).load_config(env_overrides={})

        assert config.generation.check_all_outputs is True
        assert config.generation.test_suffix == ".spec.tsx"
        assert config.generation.component_suffix == ".tsx"
        assert config.ui.default_style == "minimal"

    def test_load_yaml(self, tmp_path: Path):
        config_file = tmp_path / "componentcraft.yml"
        config_file.write_text(
            "logging:\n  level: info\ngeneration:\n  story_suffix: .story.tsx\n",
            encoding="utf-8",
        )

        config = ConfigLoader(config_file).load_config(env_overrides={})

        assert config.logging.level == "INFO"
        assert config.generation.story_suffix == ".story.tsx"

    def test_toml_preferred_over_yaml(self, tmp_path: Path):
        (tmp_path / ".componentcraft.toml").write_text(
            '[logging]\nlevel = "ERROR"\n', encoding="utf-8"
        )
        (tmp_path / ".componentcraft.yml").write_text(
            "logging:\n  level: DEBUG\n", encoding="utf-8"
        )

        config = ConfigLoader(search_dir=tmp_path).load_config(env_overrides={})

        assert config.logging.level == "ERROR"

    def test_environment_overrides_file(self, tmp_path: Path, monkeypatch):
        (tmp_path / ".componentcraft.toml").write_text(
            "[generation]\ncheck_all_outputs = false\n", encoding="utf-8"
        )
        monkeypatch.setenv("COMPONENTCRAFT_GENERATION__CHECK_ALL_OUTPUTS", "true")
        monkeypatch.setenv("COMPONENTCRAFT_UI", "minimal")

        config = ConfigLoader(search_dir=tmp_path).load_config()

        assert config.generation.check_all_outputs is True
        assert config.ui.default_style == "auto"

    def test_cli_overrides_win(self, tmp_path: Path):
        config = ConfigLoader(search_dir=tmp_path).load_config(
            env_overrides={"logging": {"level": "INFO"}},
            cli_overrides={"logging": {"level": "ERROR"}},
        )
        assert config.logging.level == "ERROR"

    def test_config_is_cached(self, tmp_path: Path):
        loader = ConfigLoader(search_dir=tmp_path)
        first = loader.load_config(env_overrides={})
        assert loader.load_config(env_overrides={}) is first
        assert loader.load_config(env_overrides={}, reload=True) is not first

    def test_invalid_toml(self, tmp_path: Path):
        config_file = tmp_path / ".componentcraft.toml"
        config_file.write_text("[generation\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            ConfigLoader(config_file).load_config(env_overrides={})

    def test_invalid_yaml(self, tmp_path: Path):
        config_file = tmp_path / ".componentcraft.yaml"
        config_file.write_text("generation: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigLoader(config_file).load_config(env_overrides={})

    def test_invalid_value(self, tmp_path: Path):
        config_file = tmp_path / ".componentcraft.toml"
        config_file.write_text('[ui]\ndefault_style = "fancy"\n', encoding="utf-8")

        with pytest.raises(ConfigurationError, match="validation failed"):
            ConfigLoader(config_file).load_config(env_overrides={})

    def test_unknown_file_type(self, tmp_path: Path):
        config_file = tmp_path / "componentcraft.json"
        config_file.write_text("{}", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Unknown configuration file type"):
            ConfigLoader(config_file).load_config(env_overrides={})

    def test_empty_file_uses_defaults(self, tmp_path: Path):
        (tmp_path / ".componentcraft.toml").write_text("", encoding="utf-8")
        config = ConfigLoader(search_dir=tmp_path).load_config(env_overrides={})
        assert config == ComponentCraftConfig()
