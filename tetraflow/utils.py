#!/usr/bin/env python3
"""
TetraFlow Utilities Module
"""
import sys
import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


class LoggingConfig:
    """Centralized logging configuration using standard logging"""

    _initialized = False

    @classmethod
    def setup_logging(cls,
                     log_level: str = "INFO",
                     log_file: Optional[str] = None) -> None:
        """
        Setup standard logging configuration

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Path to log file (optional)
        """
        if cls._initialized:
            return

        numeric_level = getattr(logging, log_level.upper(), logging.INFO)

        root_logger = logging.getLogger("tetraflow")
        root_logger.setLevel(numeric_level)
        formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        cls._initialized = True
        root_logger.debug(f"🔧 Logging initialized - Level: {log_level}")

    @classmethod
    def get_logger(cls, name: str = None) -> logging.Logger:
        """Get a logger instance"""
        if not cls._initialized:
            cls.setup_logging()

        if name:
            return logging.getLogger(name)
        return logging.getLogger("tetraflow")


def setup_tetraflow_logging(log_level: str = "INFO",
                            log_dir: Optional[str] = None) -> None:
    """Setup logging for the TetraFlow package"""
    log_file = None
    if log_dir:
        log_file = str(Path(log_dir) / "tetraflow.log")

    LoggingConfig.setup_logging(log_level=log_level, log_file=log_file)


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger for a specific module"""
    return LoggingConfig.get_logger(module_name)
