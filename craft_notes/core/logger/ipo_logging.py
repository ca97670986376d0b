# Path: craft_notes/core/logger/ipo_logging.py
"""
IPO-Aware Logging for craft_notes

Input-Process-Output separated logging for the craft reconciler.

This module sets up logging with separate files for:
- INPUT layer (craft directory discovery, craft file reading)
- PROCESS layer (scanning, reconciliation, session cycles)
- OUTPUT layer (description formatting for display)
- Full activity (everything combined)

File logging is optional; without a log directory only the
console handler is installed.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Optional

from ...constants import (
    LOG_FORMAT,
    LOG_DATE_FORMAT,
    CONSOLE_LOG_FORMAT,
    LOG_FILES,
    LogLayer,
)


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name == self.layer or record.name.startswith(f'{self.layer}.')


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for craft_notes.

    When log_dir is given, creates separate log files for:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Args:
        log_dir: Directory for log files, or None for console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console

    Example:
        setup_ipo_logging(
            log_dir=Path('/opt/ksp/craft_notes/logs'),
            log_level='DEBUG',
            console_output=True
        )
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        full_handler = logging.FileHandler(log_dir / LOG_FILES['full'], encoding='utf-8')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for layer in LogLayer:
            layer_handler = logging.FileHandler(
                log_dir / LOG_FILES[layer.value], encoding='utf-8'
            )
            layer_handler.setLevel(logging.DEBUG)
            layer_handler.setFormatter(formatter)
            layer_handler.addFilter(IPOFilter(layer.value))
            root_logger.addHandler(layer_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
        root_logger.addHandler(console_handler)


def configure_logging(config: Any) -> None:
    """
    Set up IPO logging from configuration values.

    Reads 'log_dir', 'log_level', 'log_console' and 'debug';
    debug forces the DEBUG level.

    Args:
        config: ConfigLoader (or compatible) instance
    """
    log_level = config.get('log_level', 'INFO') or 'INFO'
    if config.get('debug', False):
        log_level = 'DEBUG'

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=log_level,
        console_output=config.get('log_console', True),
    )


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'craft_data', 'craft_reader')

    Returns:
        Logger configured for INPUT layer

    Example:
        logger = get_input_logger('craft_reader')
        logger.debug("Reading craft file")
    """
    return logging.getLogger(f'{LogLayer.INPUT.value}.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer.

    Args:
        name: Logger name (e.g., 'scanner', 'reconciler')

    Returns:
        Logger configured for PROCESS layer
    """
    return logging.getLogger(f'{LogLayer.PROCESS.value}.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """Get logger for OUTPUT layer."""
    return logging.getLogger(f'{LogLayer.OUTPUT.value}.{name}')


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'configure_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
