"""Настройка логирования"""

import logging
import logging.handlers
import sys
from pathlib import Path
from datetime import datetime

# Уровни для отдельных модулей
LOGGING_CONFIG = {
    "localization": logging.INFO,
    "localized_texts": logging.INFO,
    "text_store": logging.INFO,
    "culture": logging.INFO,

    # Шум от библиотек
    "PyQt5": logging.WARNING,
    "asyncio": logging.ERROR,
}


class ColoredFormatter(logging.Formatter):
    """Цветной вывод в консоль"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        result = super().format(record)

        # Другие обработчики должны видеть исходное имя уровня
        record.levelname = levelname

        return result


def setup_logging(log_file: bool = False, debug: bool = False, level: str = "INFO",
                  log_dir: Path = Path("logs")) -> None:
    """Настроить корневой логгер"""
    root_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(root_level)
    console_handler.setFormatter(ColoredFormatter(
        "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(exist_ok=True)
        log_filename = log_dir / f"localization_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        root_logger.addHandler(file_handler)

    if not debug:
        for logger_name, logger_level in LOGGING_CONFIG.items():
            logging.getLogger(logger_name).setLevel(max(logger_level, root_level))

    logging.getLogger(__name__).info(
        "Logging configured (console=%s, file=%s)",
        logging.getLevelName(root_level), 'ENABLED' if log_file else 'DISABLED'
    )
