# gradebook/report.py
"""Форматированная таблица студентов и текстовый отчёт (report.txt)."""
import logging
from typing import Iterable, List

from .models import Student
from .store import StudentStore
from .errors import FileProcessingError

logger = logging.getLogger(__name__)

NAME_WIDTH = 25
# ID, имя, предметы, средний балл, оценка
COLUMN_WIDTHS = (6, NAME_WIDTH, 8, 8, 6)
ROW_FORMAT = "  ".join(f"{{:<{width}}}" for width in COLUMN_WIDTHS)
SEPARATOR = "  ".join("-" * width for width in COLUMN_WIDTHS)


def format_table_header() -> str:
    return ROW_FORMAT.format("ID", "Имя", "Предметы", "Средний", "Оценка") + "\n" + SEPARATOR


def format_student_row(student: Student) -> str:
    """Одна строка таблицы. Длинное имя обрезается до ширины колонки."""
    return ROW_FORMAT.format(
        student.id,
        student.name[:NAME_WIDTH],
        student.subject_count,
        f"{student.average:.2f}",
        student.grade,
    )


def format_table(students: Iterable[Student]) -> str:
    lines: List[str] = [format_table_header()]
    lines.extend(format_student_row(s) for s in students)
    return "\n".join(lines)


def format_student_line(student: Student) -> str:
    return f"ID {student.id} ({student.name}) Ср. балл {student.average:.2f}"


def render_report(store: StudentStore) -> str:
    """Полный текст отчёта: таблица и итоговый блок. Пустое хранилище -> EmptyStoreError."""
    stats = store.statistics()
    banner = "=" * 46
    lines = [
        banner,
        "            Отчёт по студентам",
        banner,
        "",
        format_table(store),
        "",
        "--- Итоги ---",
        f"Всего студентов  : {stats['total_students']}",
        f"Средний по группе: {stats['class_average']:.2f}",
        f"Лучший студент   : {format_student_line(stats['best_student'])}",
        f"Худший студент   : {format_student_line(stats['worst_student'])}",
    ]
    return "\n".join(lines) + "\n"


def export_report(filepath: str, store: StudentStore):
    """Записывает отчёт в текстовый файл."""
    text = render_report(store)
    try:
        with open(filepath, mode='w', encoding='utf-8') as file:
            file.write(text)
    except OSError as e:
        raise FileProcessingError(f"Ошибка экспорта отчёта в файл {filepath}: {e}")
    logger.info(f"Отчёт по {len(store)} студентам записан в {filepath}.")
