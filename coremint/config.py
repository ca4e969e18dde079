"""
Configuration for CoreMint.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from coremint.constants import STORAGE_KEY
from coremint.models.analysis import AppMode


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = "openai"  # openai (any OpenAI-compatible endpoint), ollama
    model: str = "deepseek-chat"
    base_url: str = "https://api.deepseek.com"
    api_key: str | None = None
    temperature: float = 1.3
    max_tokens: int = 2000
    timeout: float = 120.0


class LibraryConfig(BaseModel):
    """Knowledge library persistence configuration."""

    backend: str = "sqlite"  # sqlite, json, null
    db_path: str = "data/coremint.db"
    data_dir: str = "data"
    storage_key: str = STORAGE_KEY


class AnalysisConfig(BaseModel):
    """Smelting defaults."""

    default_mode: AppMode = AppMode.TOXIC


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = True
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    library: LibraryConfig = Field(default_factory=LibraryConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            COREMINT_LLM_PROVIDER: LLM provider (openai, ollama)
            COREMINT_LLM_MODEL: LLM model name
            COREMINT_LLM_BASE_URL: LLM base URL
            COREMINT_LLM_API_KEY: LLM API key (for OpenAI-compatible endpoints)
            COREMINT_LIBRARY_BACKEND: Record store backend (sqlite, json, null)
            COREMINT_LIBRARY_DB_PATH: SQLite database path
            COREMINT_LIBRARY_DATA_DIR: Directory for the JSON backend
            COREMINT_LIBRARY_STORAGE_KEY: Storage key of the collection
            COREMINT_DEFAULT_MODE: Default persona mode (COACH, ENCOURAGE, TOXIC)
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            if value == "":
                return default
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        return cls(
            llm=LLMConfig(
                provider=get_env("COREMINT_LLM_PROVIDER", "openai"),
                model=get_env("COREMINT_LLM_MODEL", "deepseek-chat"),
                base_url=get_env("COREMINT_LLM_BASE_URL", "https://api.deepseek.com"),
                api_key=get_env("COREMINT_LLM_API_KEY"),
                temperature=get_env("COREMINT_LLM_TEMPERATURE", 1.3),
                max_tokens=get_env("COREMINT_LLM_MAX_TOKENS", 2000),
                timeout=get_env("COREMINT_LLM_TIMEOUT", 120.0),
            ),
            library=LibraryConfig(
                backend=get_env("COREMINT_LIBRARY_BACKEND", "sqlite"),
                db_path=get_env("COREMINT_LIBRARY_DB_PATH", "data/coremint.db"),
                data_dir=get_env("COREMINT_LIBRARY_DATA_DIR", "data"),
                storage_key=get_env("COREMINT_LIBRARY_STORAGE_KEY", STORAGE_KEY),
            ),
            analysis=AnalysisConfig(
                default_mode=get_env("COREMINT_DEFAULT_MODE", AppMode.TOXIC.value),
            ),
            logging=LoggingConfig(
                level=get_env("COREMINT_LOG_LEVEL", "INFO"),
                log_to_file=get_env("COREMINT_LOG_TO_FILE", True),
                log_dir=get_env("COREMINT_LOG_DIR", "logs"),
                file_rotation=get_env("COREMINT_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("COREMINT_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("COREMINT_LOG_COMPRESSION", "zip"),
                serialize=get_env("COREMINT_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls(**(data or {}))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        final_dict = {**config_dict}

        # Apply env overrides (non-default sections)
        default = cls()
        if env_config.llm != default.llm:
            final_dict["llm"] = env_config.llm.model_dump()
        if env_config.library != default.library:
            final_dict["library"] = env_config.library.model_dump()
        if env_config.analysis != default.analysis:
            final_dict["analysis"] = env_config.analysis.model_dump()
        if env_config.logging != default.logging:
            final_dict["logging"] = env_config.logging.model_dump()

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
