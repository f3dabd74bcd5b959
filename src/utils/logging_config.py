"""
Logging configuration
"""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    verbose: bool = False
):
    """Setup root logger with console and optional file output

    The CLI runs at WARNING so stdout carries only filter expressions;
    ``--verbose`` passes ``verbose=True``, which forces DEBUG and shows
    the boundary computations logged by src.date_range.
    """

    if verbose:
        level = "DEBUG"

    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Babel and Streamlit are chatty at DEBUG
    logging.getLogger('babel').setLevel(logging.WARNING)
    logging.getLogger('streamlit').setLevel(logging.WARNING)

    return root_logger
