# gradebook/config.py
"""Конфигурация приложения: ограничения, пути к файлам, уровень логирования."""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

# --- КОНФИГУРАЦИЯ ---
MAX_STUDENTS = 1000
MAX_NAME_LENGTH = 99
MAX_SUBJECTS = 10
MIN_MARK = 0
MAX_MARK = 100

DATA_FILE = "students.csv"
REPORT_FILE = "report.txt"
LOG_LEVEL = "WARNING"

FIELD_DELIMITER = ","
MARKS_DELIMITER = ";"

# Порядок колонок сохранённого файла
CSV_HEADER = ["id", "name", "subjectCount", "marks", "average", "grade"]
# "roll" - заголовок файлов старой версии программы
HEADER_PREFIXES = ("id", "roll")


@dataclass
class Settings:
    """Настройки одного запуска приложения."""
    capacity: int = MAX_STUDENTS
    data_file: str = DATA_FILE
    report_file: str = REPORT_FILE
    log_level: str = LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Читает настройки из переменных окружения GRADEBOOK_*."""
        env = os.environ if environ is None else environ

        raw_capacity = env.get("GRADEBOOK_MAX_STUDENTS")
        capacity = MAX_STUDENTS
        if raw_capacity:
            try:
                capacity = int(raw_capacity)
            except ValueError:
                raise ConfigError(f"GRADEBOOK_MAX_STUDENTS должно быть целым числом, получено '{raw_capacity}'.")
            if capacity <= 0:
                raise ConfigError(f"GRADEBOOK_MAX_STUDENTS должно быть больше нуля, получено {capacity}.")

        log_level = (env.get("GRADEBOOK_LOG_LEVEL") or LOG_LEVEL).strip().upper()
        # для неизвестного имени getLevelName возвращает строку "Level X"
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"Неизвестный уровень логирования GRADEBOOK_LOG_LEVEL: '{log_level}'.")

        return cls(
            capacity=capacity,
            data_file=env.get("GRADEBOOK_DATA_FILE") or DATA_FILE,
            report_file=env.get("GRADEBOOK_REPORT_FILE") or REPORT_FILE,
            log_level=log_level,
        )
