"""
Shared utilities: INI configuration and logging setup.
"""
import sys
import logging
from pathlib import Path
from configparser import ConfigParser
from typing import Optional

DEFAULT_BOOTINFO_FILE = "/proc/bootinfo"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "m68k-bootinfo" / "config.ini"


class ConfigManager:
    """Manages tool configuration from an optional INI file."""

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.config = ConfigParser()
        self.loaded = False

    def load(self) -> ConfigParser:
        """Load the config file if it exists; a missing file leaves defaults."""
        read = self.config.read(self.config_path)
        self.loaded = bool(read)
        return self.config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> str:
        """Get config value with fallback."""
        try:
            value = self.config.get(section, key)
        except Exception:
            return fallback if fallback else ""
        return value if value else (fallback or "")

    @property
    def bootinfo_file(self) -> str:
        return self.get("bootinfo", "file", DEFAULT_BOOTINFO_FILE)

    @property
    def output_format(self) -> str:
        return self.get("bootinfo", "format", "text")

    @property
    def log_level(self) -> str:
        return self.get("logging", "level", "WARNING")

    @property
    def log_dir(self) -> Optional[Path]:
        value = self.get("logging", "log_dir")
        return Path(value).expanduser() if value else None


class LogManager:
    """Configures the package logger; stdout stays reserved for records."""

    def __init__(self, name: str = "m68k_bootinfo", level: str = "WARNING",
                 log_dir: Optional[Path] = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # Repeated CLI invocations in one process must not stack handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Console handler
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(getattr(logging, level.upper(), logging.WARNING))
        ch.setFormatter(formatter)
        self.logger.addHandler(ch)

        # File handler
        if log_dir is not None:
            self.log_dir = Path(log_dir)
            self.log_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(self.log_dir / f"{name}.log")
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

    def get_logger(self) -> logging.Logger:
        """Get configured logger."""
        return self.logger
