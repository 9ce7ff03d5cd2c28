# © 2026 SolveSquare contributors. GPL-3.0-or-later.
from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def create_logger(
    log_level: str = "WARNING",
    logger_name: str = "solvesquare",
    logs_dir: str | Path | None = None,
) -> logging.Logger:
    """
    Create a logger that outputs to stderr and optionally to a file.

    Module loggers (``logging.getLogger(__name__)``) under the package
    propagate here, so configuring the package logger once is enough.

    Args:
        log_level (str): Logging level (e.g., "INFO", "DEBUG").
        logger_name (str): Name for the logger instance.
        logs_dir (str | Path | None): Directory for ``<logger_name>.log``.
            If None, only the console handler is attached.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, str(log_level).upper(), logging.WARNING))
    formatter = logging.Formatter(LOG_FORMAT)

    # Prevent handler duplication on repeated calls
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logs_dir is not None:
        logs_dir = Path(logs_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        log_file = (logs_dir / f"{logger_name}.log").resolve()
        has_file = any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_file
            for h in logger.handlers
        )
        if not has_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
