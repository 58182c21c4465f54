"""
Session log setup shared by the context loggers.

A render session writes a DEBUG file log under FOLIO_LOGS_PATH and echoes
INFO and above to the console. Context-specific helpers live in
contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from folio import __version__

load_dotenv()
LOGS_PATH = Path(os.getenv("FOLIO_LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(context_name: str, log_dir: Optional[Path] = None, extra_provenance: dict = None) -> Path:
    """
    Route loguru output to `{log_dir}/{context_name}.log` and the console.

    Replaces any previously configured sinks, then writes a session header
    with the command line, the folio version and any extra_provenance pairs.

    Returns:
        Path to the log file
    """
    log_dir = log_dir or LOGS_PATH
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    header = {"Command": " ".join(sys.argv), "folio": __version__, **(extra_provenance or {})}
    logger.info("=" * 60)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 60)

    return log_file
