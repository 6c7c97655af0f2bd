"""
Configuration management.

Values come from config/app_config.yaml; the session secret can be overridden
through the TODO_LISTS_SESSION_SECRET environment variable.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "app_config.yaml"


@dataclass
class ServerConfig:
    """uvicorn settings"""

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@dataclass
class SessionConfig:
    """Signed session cookie settings"""

    secret_key: str = "secret"
    cookie_name: str = "todo_lists_session"
    max_age: int = 14 * 24 * 60 * 60  # two weeks


@dataclass
class CliConfig:
    """CLI settings"""

    store_file: str = "data/todo_lists.json"


@dataclass
class Config:
    """Application settings"""

    server: ServerConfig = None  # type: ignore
    session: SessionConfig = None  # type: ignore
    cli: CliConfig = None  # type: ignore

    log_level: str = "INFO"
    log_file: str = "logs/todo_lists.log"

    def __post_init__(self):
        if self.server is None:
            self.server = ServerConfig()
        if self.session is None:
            self.session = SessionConfig()
        if self.cli is None:
            self.cli = CliConfig()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """Load settings from YAML.

        Args:
            config_path: settings file (defaults to config/app_config.yaml)

        Returns:
            Config: loaded settings; defaults when the file does not exist
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH
        config_path = Path(config_path)

        yaml_data: Dict[str, Any] = {}
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}

        server_data = yaml_data.get("server", {})
        session_data = yaml_data.get("session", {})
        log_data = yaml_data.get("log", {})
        cli_data = yaml_data.get("cli", {})

        defaults = SessionConfig()
        return cls(
            server=ServerConfig(
                host=server_data.get("host", "0.0.0.0"),
                port=int(server_data.get("port", 8000)),
                reload=bool(server_data.get("reload", False)),
            ),
            session=SessionConfig(
                secret_key=os.getenv(
                    "TODO_LISTS_SESSION_SECRET",
                    session_data.get("secret_key", defaults.secret_key),
                ),
                cookie_name=session_data.get("cookie_name", defaults.cookie_name),
                max_age=int(session_data.get("max_age", defaults.max_age)),
            ),
            cli=CliConfig(
                store_file=cli_data.get("store_file", "data/todo_lists.json"),
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/todo_lists.log"),
        )
