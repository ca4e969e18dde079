"""
Tests for configuration management.

Tests config loading from:
1. Environment variables
2. YAML files
3. Combined (env overrides YAML)
"""

import pytest
import yaml

from coremint.config import Config, LibraryConfig, LLMConfig
from coremint.constants import STORAGE_KEY
from coremint.models import AppMode


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run from an empty directory so no stray .env file is picked up."""
    monkeypatch.chdir(tmp_path)
    for key in (
        "COREMINT_LLM_PROVIDER",
        "COREMINT_LLM_MODEL",
        "COREMINT_LLM_API_KEY",
        "COREMINT_LLM_TEMPERATURE",
        "COREMINT_LIBRARY_BACKEND",
        "COREMINT_LIBRARY_STORAGE_KEY",
        "COREMINT_DEFAULT_MODE",
        "COREMINT_LOG_TO_FILE",
    ):
        monkeypatch.delenv(key, raising=False)


class TestConfigDefaults:
    """Test default configuration values."""

    def test_default_config_creation(self):
        config = Config()

        assert config.llm.provider == "openai"
        assert config.llm.model == "deepseek-chat"
        assert config.llm.base_url == "https://api.deepseek.com"
        assert config.llm.api_key is None
        assert config.llm.temperature == 1.3
        assert config.llm.max_tokens == 2000

        assert config.library.backend == "sqlite"
        assert config.library.storage_key == STORAGE_KEY
        assert config.analysis.default_mode == AppMode.TOXIC
        assert config.logging.level == "INFO"

    def test_section_creation(self):
        llm_config = LLMConfig(provider="ollama", model="qwen2.5:7b", temperature=0.2)
        library_config = LibraryConfig(backend="json", data_dir="/tmp/cm")

        assert llm_config.provider == "ollama"
        assert llm_config.temperature == 0.2
        assert library_config.backend == "json"
        assert library_config.data_dir == "/tmp/cm"


class TestConfigFromEnv:
    """Test loading configuration from environment variables."""

    def test_from_env_basic(self, monkeypatch):
        monkeypatch.setenv("COREMINT_LLM_PROVIDER", "ollama")
        monkeypatch.setenv("COREMINT_LLM_MODEL", "qwen2.5:7b")
        monkeypatch.setenv("COREMINT_LIBRARY_BACKEND", "json")
        monkeypatch.setenv("COREMINT_DEFAULT_MODE", "COACH")

        config = Config.from_env()

        assert config.llm.provider == "ollama"
        assert config.llm.model == "qwen2.5:7b"
        assert config.library.backend == "json"
        assert config.analysis.default_mode == AppMode.COACH

    def test_from_env_type_conversion(self, monkeypatch):
        monkeypatch.setenv("COREMINT_LLM_TEMPERATURE", "0.5")
        monkeypatch.setenv("COREMINT_LOG_TO_FILE", "false")

        config = Config.from_env()

        assert config.llm.temperature == 0.5
        assert config.logging.log_to_file is False

    def test_empty_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("COREMINT_LLM_MODEL", "")

        assert Config.from_env().llm.model == "deepseek-chat"

    def test_from_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env.test"
        env_file.write_text("COREMINT_LIBRARY_STORAGE_KEY=test_library\n")
        # Register the key so monkeypatch removes what load_dotenv sets
        monkeypatch.setenv("COREMINT_LIBRARY_STORAGE_KEY", "placeholder")
        monkeypatch.delenv("COREMINT_LIBRARY_STORAGE_KEY")

        config = Config.from_env(env_file=env_file)

        assert config.library.storage_key == "test_library"


class TestConfigFromYaml:
    """Test loading configuration from YAML."""

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "llm": {"provider": "ollama", "model": "llama3.1:8b"},
                    "library": {"backend": "null"},
                }
            )
        )

        config = Config.from_yaml(path)

        assert config.llm.provider == "ollama"
        assert config.library.backend == "null"
        assert config.library.storage_key == STORAGE_KEY

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(tmp_path / "missing.yaml")

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"library": {"backend": "json"}, "llm": {"model": "a"}}))
        monkeypatch.setenv("COREMINT_LIBRARY_BACKEND", "null")

        config = Config.from_env_or_yaml(yaml_path=path)

        assert config.library.backend == "null"
        assert config.llm.model == "a"
