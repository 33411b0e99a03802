"""
Loguru configuration module for the yearweek project.

This module provides the project-wide logging setup:
- Console and file sinks with configurable levels and formats
- Logs placed next to the executing script by default (logs/loguru/YYYYMMDD/)
- Falls back to the current working directory for interactive environments
- Manual log directory override for tests and services
- Optional error-only log file

Usage:
    # Default behavior - logs created in script's directory
    logger_config = setup_logger(cfg)
    logger = get_logger()

    # With manual override
    logger_config = setup_logger(cfg, log_dir_override=Path('/custom/path'))
    logger = get_logger()
"""
# -----------------------------------------------------------------------------
# UPDATED ON: 2026-10-19
# CREATED ON: 2026-10-12
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh.
# -----------------------------------------------------------------------------

import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from loguru import logger
from omegaconf import DictConfig, OmegaConf

DEFAULT_LOGURU_CONFIG = {
    'default_level': 'INFO',
    'console_enabled': True,
    'file_enabled': True,
    'enqueue': True,
    'file': {
        'base_dir': 'logs/loguru',
        'format': '{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}',
        'rotation': '100 MB',
        'retention': '30 days',
        'compression': 'gz'
    },
    'console': {
        'format': '<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>',
        'colorize': True
    }
}

# Places the loguru section may live in a composed config
POSSIBLE_PATHS = [
    'loggers.loguru',
    'loguru',
    'logging.loguru',
    'logger.loguru',
]


def _time_stamp(now: datetime) -> str:
    """am/pm-HH-MM-SS stamp used in log file names."""
    am_pm = "am" if now.hour < 12 else "pm"
    hour_12 = now.hour if now.hour <= 12 else now.hour - 12
    if hour_12 == 0:
        hour_12 = 12
    return f"{am_pm}-{hour_12:02d}-{now.minute:02d}-{now.second:02d}"


class LoggerConfig:
    """Configure and manage Loguru logging for the entire project."""

    def __init__(self, config: Optional[DictConfig], log_dir_override: Optional[Path] = None):
        """
        Initialize logger configuration.

        Args:
            config: Hydra configuration
            log_dir_override: Optional path to override the log directory location.
                            If provided, logs will be created relative to this path.
        """
        self.config = config
        self.logger = logger
        self.log_dir_override = Path(log_dir_override) if log_dir_override else None
        self.current_log_file: Optional[Path] = None

        self.loguru_config = self._find_loguru_config()

        self._setup_logging()

    def _find_loguru_config(self) -> DictConfig:
        """Find the loguru section in the config and merge it over the defaults."""
        defaults = OmegaConf.create(DEFAULT_LOGURU_CONFIG)
        if self.config is None:
            return defaults

        for path in POSSIBLE_PATHS:
            found = OmegaConf.select(self.config, path)
            if found is not None:
                return OmegaConf.merge(defaults, found)

        return defaults

    def _get_log_base_dir(self) -> Path:
        """
        Get the base directory for logs.

        If log_dir_override is provided, use it as the parent directory.
        Otherwise, use the directory of the main script, or the current working
        directory when there is none (Jupyter, REPL).
        """
        base_dir_str = self.loguru_config.file.base_dir

        if self.log_dir_override:
            return self.log_dir_override / base_dir_str

        import __main__

        if hasattr(__main__, '__file__') and __main__.__file__:
            return Path(__main__.__file__).parent.resolve() / base_dir_str
        return Path.cwd() / base_dir_str

    def _setup_logging(self):
        """Set up Loguru logging with file and console handlers."""
        self.logger.remove()

        if self.loguru_config.console_enabled:
            self._setup_console_logging()

        if self.loguru_config.file_enabled:
            self._setup_file_logging()

        if OmegaConf.select(self.loguru_config, 'additional_sinks') is not None:
            self._setup_additional_sinks()

    def _setup_console_logging(self):
        """Setup console logging handler."""
        console_config = self.loguru_config.console

        self.logger.add(
            sys.stdout,
            format=console_config.format,
            level=self.loguru_config.default_level,
            colorize=console_config.colorize,
            enqueue=self.loguru_config.enqueue
        )

    def _setup_file_logging(self):
        """Setup file logging handler with date/time directory structure."""
        file_config = self.loguru_config.file

        now = datetime.now()
        log_dir = self._get_log_base_dir() / now.strftime("%Y%m%d")
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{_time_stamp(now)}.log"

        self.logger.add(
            str(log_file),
            format=file_config.format,
            level=self.loguru_config.default_level,
            rotation=file_config.rotation,
            retention=file_config.retention,
            compression=file_config.compression,
            enqueue=self.loguru_config.enqueue
        )

        self.current_log_file = log_file
        print(f"Log file created at: {log_file}")

    def _setup_additional_sinks(self):
        """Setup additional logging sinks (error-only file)."""
        error_file_config = OmegaConf.select(self.loguru_config, 'additional_sinks.error_file')
        if error_file_config is None or not error_file_config.get('enabled', False):
            return

        now = datetime.now()
        log_dir = self._get_log_base_dir() / now.strftime("%Y%m%d")
        log_dir.mkdir(parents=True, exist_ok=True)

        self.logger.add(
            str(log_dir / f"errors-{_time_stamp(now)}.log"),
            format=error_file_config.get('format', self.loguru_config.file.format),
            level=error_file_config.get('level', 'ERROR'),
            enqueue=self.loguru_config.enqueue
        )

    # ===============================================================
    # CONTEXT LOGGING
    # ===============================================================

    def log_with_context(self, level: str, message: str, **kwargs):
        """Log a message with additional context."""
        if kwargs:
            context_str = " | ".join([f"{k}={v}" for k, v in kwargs.items()])
            message = f"{message} | Context: {context_str}"

        log_func = getattr(self.logger, level.lower())
        log_func(message)

    def log_error_with_context(self, error: Exception, context: Dict[str, Any]):
        """Log errors with additional context."""
        context_str = " | ".join([f"{k}={v}" for k, v in context.items()]) if context else ""
        message = f"Error: {type(error).__name__}: {error}"
        if context_str:
            message += f" | Context: {context_str}"

        self.logger.error(message)

    def log_conversion_summary(self, operation: str, total: int, missing: int, duration: float, **info):
        """Log the outcome of a batch week conversion."""
        converted = total - missing
        rate = converted / duration if duration > 0 else 0
        message = (f"Batch {operation}: {converted}/{total} converted | Missing: {missing} | "
                   f"Duration: {duration:.3f}s | Rate: {rate:.2f} rows/s")
        if info:
            message += " | " + " | ".join([f"{k}={v}" for k, v in info.items()])

        self.logger.success(message)

    # ===============================================================
    # UTILITY METHODS
    # ===============================================================

    def create_child_logger(self, name: str, **extra_context):
        """Create a child logger with additional context."""
        return self.logger.bind(logger_name=name, **extra_context)

    def set_level(self, level: str):
        """Change the logging level and rebuild the sinks."""
        original_level = self.loguru_config.default_level
        self.loguru_config.default_level = level

        self._setup_logging()

        self.logger.info(f"Logging level changed from {original_level} to {level}")

    def add_custom_sink(self, sink: Union[str, Path, Callable], level: str = "INFO",
                        format_str: Optional[str] = None) -> int:
        """Add a logging sink (file path or callable); returns the loguru handler id."""
        if format_str is None:
            format_str = self.loguru_config.file.format

        if isinstance(sink, (str, Path)):
            Path(sink).parent.mkdir(parents=True, exist_ok=True)
            sink = str(sink)

        handler_id = self.logger.add(
            sink,
            format=format_str,
            level=level,
            enqueue=self.loguru_config.enqueue
        )

        self.logger.debug(f"Added custom sink with level {level}")
        return handler_id


# Global logger instance - will be initialized when setup_logger is called
project_logger = None


def setup_logger(config: Optional[DictConfig], log_dir_override: Optional[Path] = None) -> LoggerConfig:
    """
    Setup the global logger for the project.

    Args:
        config (DictConfig): Hydra configuration containing logging settings
        log_dir_override (Optional[Path]): Optional path to override log directory location.
                                          If not provided, logs will be created in the
                                          main script's directory.

    Returns:
        LoggerConfig: Configured logger instance

    Example:
        setup_logger(cfg)
        logger = get_logger()
        logger.info("Hello world!")
    """
    global project_logger
    project_logger = LoggerConfig(config, log_dir_override)
    return project_logger


def get_logger():
    """
    Get the configured logger instance.

    Raises:
        RuntimeError: If setup_logger() hasn't been called yet
    """
    if project_logger is None:
        raise RuntimeError("Logger not initialized. Call setup_logger() first.")
    return project_logger.logger


def get_logger_config() -> LoggerConfig:
    """Get the LoggerConfig created by setup_logger()."""
    if project_logger is None:
        raise RuntimeError("Logger not initialized. Call setup_logger() first.")
    return project_logger


def setup_logger_for_script(config: DictConfig, script_file: Optional[str] = None) -> LoggerConfig:
    """
    Convenience function to setup logger for scripts with local log directory.

    Args:
        config: Hydra configuration
        script_file: The __file__ variable from the calling script.
                    If provided, logs will be created in the script's directory.

    Example:
        logger_config = setup_logger_for_script(cfg, __file__)
        logger = get_logger()
    """
    log_dir_override = Path(script_file).parent if script_file else None
    return setup_logger(config, log_dir_override)
