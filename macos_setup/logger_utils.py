# Fedora-macOS-Setup/macos_setup/logger_utils.py
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from macos_setup.config import LOG_DIR, LOG_FILE_NAME, LOG_LEVEL

LOGGER_NAME = "FedoraMacosSetup"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.DEBUG


def setup_logger(
    logger_name: str = LOGGER_NAME,
    log_level: Union[int, str] = LOG_LEVEL,
    log_to_file: bool = True,
    log_file_path: Optional[Path] = None,
    log_to_console: bool = False,  # console_output.py handles user messages
    console_log_level: int = logging.WARNING
) -> logging.Logger:
    """
    Configures and returns a logger instance.

    Args:
        logger_name (str): The name for the logger instance.
        log_level (int | str): Base level for the logger and the file handler.
        log_to_file (bool): Whether to enable logging to a file.
        log_file_path (Optional[Path]): Absolute path to the log file.
                                        Defaults to LOG_DIR / LOG_FILE_NAME.
        log_to_console (bool): Whether to also log through a stream handler.
        console_log_level (int): Level for the console handler, if enabled.

    Returns:
        logging.Logger: The configured logger instance.
    """
    level = _resolve_level(log_level)
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Reconfiguring must not stack handlers
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - [%(module)s:%(lineno)d] - %(message)s"
    )

    if log_to_file:
        effective_log_file_path = log_file_path or (LOG_DIR / LOG_FILE_NAME)
        try:
            effective_log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(effective_log_file_path, mode='a', encoding='utf-8')
        except OSError as e:
            # Rich console output is for user messages, not for logger failures
            sys.stderr.write(
                f"ERROR [logger_utils]: Could not open log file {effective_log_file_path}. "
                f"File logging disabled. Error: {e}\n"
            )
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
            logger.info(f"File logging initialized to: {effective_log_file_path}")

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


# Default application logger. Call setup_logger() again to reconfigure it.
app_logger = setup_logger()
