"""
fanlog Config Loader - Load transport configuration and open its transports
"""
import os
from typing import Callable, List, Optional

from fanlog.errors import ConfigError
from fanlog.transports import Transport, create_transport
from models import LoggerConfig, TransportConfig, ValidationEngine

CONFIG_ENV = "FANLOG_CONFIG"
CONFIG_FILENAME = "fanlog.yaml"


# Default config path - overridden by --config CLI arg or FANLOG_CONFIG env
def _resolve_default_config_path() -> str:
    """Resolve default config file, or "" when there is none."""
    # 1. Explicit env var
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return env_path
    # 2. ./fanlog.yaml relative to CWD
    cwd_config = os.path.join(os.getcwd(), CONFIG_FILENAME)
    if os.path.isfile(cwd_config):
        return cwd_config
    # 3. No file: built-in default (stdout only)
    return ""


def default_config() -> LoggerConfig:
    return LoggerConfig(transports=[TransportConfig(type="stdout")])


class ConfigLoader:
    """Loader for fanlog configuration files"""

    def __init__(
        self,
        config_path: str = "",
        logger: Optional[Callable[[str], None]] = None
    ):
        self.config_path = config_path
        self.logger = logger or (lambda x: None)
        self.engine = ValidationEngine()

    def resolve_path(self, path: str = "") -> str:
        return path or self.config_path or _resolve_default_config_path()

    def load(self, path: str = "") -> LoggerConfig:
        """
        Load and validate a configuration file

        Args:
            path: Path to YAML config; falls back to the loader's path,
                  then FANLOG_CONFIG, then ./fanlog.yaml

        Returns:
            Validated LoggerConfig (stdout only when no file is found)

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        config_path = self.resolve_path(path)
        if not config_path:
            self.logger("CONFIG DEFAULT | stdout")
            return default_config()

        result, config = self.engine.validate_file(config_path)
        if not result.is_valid:
            self.logger(f"CONFIG INVALID | {config_path}")
            raise ConfigError(f"{config_path}\n{result.format_report()}")
        for warning in result.warnings:
            self.logger(f"CONFIG WARNING | {warning.field} | {warning.message}")
        self.logger(f"CONFIG LOADED | {config_path} | transports={len(config.transports)}")
        return config

    def open_transport(self, transport_config: TransportConfig) -> Transport:
        """Acquire one configured transport"""
        kwargs = {"interactive": transport_config.interactive}
        if transport_config.type == "file":
            kwargs.update(
                path=transport_config.path,
                mode=transport_config.mode,
                encoding=transport_config.encoding,
            )
            if transport_config.interactive is None:
                kwargs["interactive"] = False
        return create_transport(transport_config.type, **kwargs)

    def open_transports(self, config: LoggerConfig) -> List[Transport]:
        """
        Acquire every transport in config, in order

        The caller owns the returned transports and must close them. If one
        cannot be opened, those already opened are closed before raising.

        Raises:
            ConfigError: If a transport cannot be opened
        """
        opened: List[Transport] = []
        try:
            for transport_config in config.transports:
                transport = self.open_transport(transport_config)
                opened.append(transport)
                self.logger(f"TRANSPORT OPENED | {transport!r}")
        except OSError as e:
            for transport in opened:
                transport.close()
            raise ConfigError(f"cannot open transport: {e}") from e
        return opened
