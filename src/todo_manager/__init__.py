"""Application configuration and logging setup."""

from .config import CliConfig, Config, ServerConfig, SessionConfig
from .logger import setup_logger

__all__ = ["Config", "ServerConfig", "SessionConfig", "CliConfig", "setup_logger"]
