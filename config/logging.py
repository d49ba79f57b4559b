import sys
from pathlib import Path

from loguru import logger

from config.settings import settings


def setup_logging() -> None:
    """Настройка loguru: цветной вывод в stderr и, если задан LOG_DIR, файл с ротацией"""
    logger.remove()

    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        level=settings.LOG_LEVEL,
        colorize=True,
    )

    if settings.LOG_DIR:
        logs_dir = Path(settings.LOG_DIR)
        logs_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            logs_dir / "admin_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="14 days",
            encoding="utf-8",
        )

    logger.info(f"Logging initialized | level: {settings.LOG_LEVEL}")
