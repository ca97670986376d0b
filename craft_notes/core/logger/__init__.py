# Path: craft_notes/core/logger/__init__.py
"""
craft_notes Logger Package

IPO-aware logging for the craft description reconciler.

Provides separate log streams for:
- INPUT layer (craft discovery, craft reading)
- PROCESS layer (scanning, reconciliation)
- OUTPUT layer (description formatting)
"""

from .ipo_logging import (
    IPOFilter,
    setup_ipo_logging,
    configure_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'configure_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
