"""Configuration management for astgen.

This module provides a pydantic-based configuration system that loads settings
from environment variables (prefixed ``ASTGEN_``) or a ``.env`` file.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console
from rich.logging import RichHandler


class Config(BaseSettings):
    """Configuration settings for astgen.

    All settings can be overridden by setting the corresponding environment
    variable; command-line options override both.

    Environment Variables:
        ASTGEN_TARGET: Target language, 'java' or 'python'
        ASTGEN_OUTPUT_DIR: Default directory generated units are written to
        ASTGEN_PACKAGE: Package declaration overriding the schema's own
        ASTGEN_INDENT_WIDTH: Spaces per indentation level
        ASTGEN_STRICT: Reject side-table entries for unknown variants
        ASTGEN_LOG_LEVEL: Logging level name (e.g. 'INFO', 'DEBUG')

    Example:
        >>> config = Config(target="python")
        >>> config.target
        'python'
    """

    model_config = SettingsConfigDict(
        env_prefix="ASTGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    target: Literal["java", "python"] = Field(
        default="java",
        description="Target language of the generated hierarchy",
    )

    output_dir: Optional[Path] = Field(
        default=None,
        description="Directory generated units are written to",
    )

    package: Optional[str] = Field(
        default=None,
        description="Package declaration overriding the one in the schema",
    )

    indent_width: Optional[int] = Field(
        default=None,
        ge=1,
        description="Spaces per indentation level (target default if not set)",
    )

    strict: bool = Field(
        default=False,
        description="Reject capability/extra-member entries for unknown variants",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for astgen loggers",
    )

    def configure_logging(self, console: Optional[Console] = None) -> None:
        """Route astgen log records through rich at the configured level.

        Args:
            console: Console to render to (stderr if not given)
        """
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=False,
            show_path=False,
        )
        logger = logging.getLogger("astgen")
        logger.handlers = [handler]
        logger.setLevel(self.log_level.upper())

    def __repr__(self) -> str:
        """Return a string representation of the configuration."""
        return (
            f"Config("
            f"target={self.target!r}, "
            f"output_dir={self.output_dir!r}, "
            f"package={self.package!r}, "
            f"indent_width={self.indent_width!r}, "
            f"strict={self.strict!r}, "
            f"log_level={self.log_level!r}"
            f")"
        )


def load_config() -> Config:
    """Load configuration from environment variables.

    Returns:
        A Config instance with settings loaded from environment.
    """
    return Config()
