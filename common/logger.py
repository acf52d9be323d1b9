"""Shared logger configuration"""

import logging
import os
import sys
from pathlib import Path

# Centralized logs directory in the project root
LOGS_DIR = Path(os.getenv("XLIT_LOG_DIR", Path(__file__).parent.parent / "logs"))
LOGS_DIR.mkdir(parents=True, exist_ok=True)

LOGGER_NAME = "xlit"


def setup_xlit_logger(name: str = LOGGER_NAME):
    """Setup logger for the transliteration engine.

    Handlers are attached to the root "xlit" logger only once; child loggers
    ("xlit.queue", "xlit.pipeline", ...) propagate to it.
    """
    root = logging.getLogger(LOGGER_NAME)

    if not root.handlers:
        # Use centralized logs directory
        LOG_DIR = LOGS_DIR / "xlit"
        LOG_DIR.mkdir(parents=True, exist_ok=True)

        root.setLevel(logging.DEBUG)

        file_handler = logging.FileHandler(LOG_DIR / "xlit_engine.log", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
        file_handler.setFormatter(file_formatter)
        root.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s', datefmt='%H:%M:%S')
        console_handler.setFormatter(console_formatter)
        root.addHandler(console_handler)

    if name == LOGGER_NAME:
        return root
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_relay_logger():
    """Setup logger for the websocket chat relay"""
    LOG_DIR = LOGS_DIR / "websocket"
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    log = logging.getLogger("websocket_server")
    if log.handlers:
        return log
    log.setLevel(logging.INFO)

    file_handler = logging.FileHandler(LOG_DIR / "websocket_server.log", encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
    file_handler.setFormatter(file_formatter)
    log.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s', datefmt='%H:%M:%S')
    console_handler.setFormatter(console_formatter)
    log.addHandler(console_handler)

    return log
