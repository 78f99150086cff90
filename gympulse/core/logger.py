"""Logger configuration for GymPulse.

Workout commits, validation rejections and snapshot loads/writes log with
bound context (exercise, date, streak, path). The console shows the
message; the optional file sink also records that context.
"""

import sys
from pathlib import Path

from loguru import logger

APP_NAME = "gympulse"


def setup_logger(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    rotation: str = "5 MB",
    retention: str = "30 days",
) -> None:
    """Configure loguru logger with console and optional file output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (GYMPULSE_LOG_FILE). If None, only console logging.
        rotation: Log rotation size (e.g., "5 MB", "1 week")
        retention: Log retention period; workout history is kept long, so are its logs
    """
    logger.remove()
    logger.configure(extra={"app": APP_NAME})

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}",
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            encoding="utf-8",
        )

    logger.debug(f"Logger initialized with level={level}, file={log_file}")
