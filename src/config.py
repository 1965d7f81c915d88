"""Centralized configuration for the storyloom grammar expander."""

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ExpansionConfig:
    """Defaults for text expansion."""
    origin: str = "origin"
    default_count: int = 1


@dataclass(frozen=True)
class LoggingConfig:
    """Logging defaults for the command line."""
    level: str = "WARNING"


@dataclass(frozen=True)
class PathConfig:
    """Centralized path configuration for the application."""

    @property
    def root_dir(self) -> Path:
        """Project root directory."""
        return Path(__file__).parent.parent

    @property
    def grammars_dir(self) -> Path:
        """Directory searched for grammars given by name."""
        return self.root_dir / "grammars"


# Singleton path configuration instance
paths = PathConfig()


@dataclass
class Settings:
    """Application settings, can be overridden via environment variables."""
    expansion: ExpansionConfig = field(default_factory=ExpansionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables with STORYLOOM_ prefix."""
        expansion = ExpansionConfig(
            origin=os.environ.get("STORYLOOM_ORIGIN", ExpansionConfig.origin),
            default_count=int(os.environ.get("STORYLOOM_DEFAULT_COUNT", ExpansionConfig.default_count)),
        )
        logging_config = LoggingConfig(
            level=os.environ.get("STORYLOOM_LOG_LEVEL", LoggingConfig.level).upper(),
        )
        return cls(expansion=expansion, logging=logging_config)


# Global settings instance - use from_env() for environment-aware settings
settings = Settings.from_env()
