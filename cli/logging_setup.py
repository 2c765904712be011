"""Logging setup for the CLI

stdout carries the MCP protocol, so every handler writes to stderr or a file.
"""

import logging
import os
import sys

import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(debug: bool = False) -> None:
    """
    Configure the root logger

    Args:
        debug: Log at DEBUG level and also append to the debug log file
    """
    root_logger = logging.getLogger()
    level = logging.DEBUG if debug else getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO)
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if debug:
        log_file = os.path.abspath(settings.DEBUG_LOG_FILE)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')  # 'a' to append
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.getLogger(__name__).info(f"Debug logging enabled - appending to {log_file}")

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)
