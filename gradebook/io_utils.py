# gradebook/io_utils.py
"""Модуль для операций ввода/вывода: чтение и запись файла со студентами.

Формат файла (одна строка на студента, первая строка - заголовок)::

    id,name,subjectCount,marks,average,grade
    1,Alice Johnson,3,85;90;78,84.33,B

Оценки внутри поля ``marks`` разделены точкой с запятой. Средний балл
и буквенная оценка записываются для удобства чтения, при загрузке они
пересчитываются из оценок.
"""
import csv
import logging
from typing import List, Sequence

from . import config
from .models import Student
from .errors import FileProcessingError, MalformedRecordError, DataValidationError

logger = logging.getLogger(__name__)

# Поля пишутся как есть, без кавычек: разделитель в имени заменяется при вводе
CSV_FORMAT = {"delimiter": config.FIELD_DELIMITER, "quoting": csv.QUOTE_NONE, "quotechar": None}


def is_header_row(row: Sequence[str]) -> bool:
    """Проверяет, является ли строка заголовком файла."""
    return bool(row) and row[0].strip().lower() in config.HEADER_PREFIXES


def student_to_row(student: Student) -> List[str]:
    """Преобразует студента в список полей одной строки файла."""
    marks_str = config.MARKS_DELIMITER.join(map(str, student.marks))
    return [
        str(student.id),
        student.name,
        str(student.subject_count),
        marks_str,
        f"{student.average:.2f}",
        student.grade,
    ]


def _parse_int(raw: str, field: str, line_num: int) -> int:
    try:
        return int(raw)
    except ValueError:
        raise MalformedRecordError(line_num, f"поле '{field}' не является целым числом: '{raw}'")


def parse_row(row: Sequence[str], line_num: int) -> Student:
    """Разбирает одну строку файла. Некорректная строка -> MalformedRecordError."""
    expected = len(config.CSV_HEADER)
    if len(row) < expected:
        raise MalformedRecordError(line_num, f"ожидалось {expected} полей, получено {len(row)}")

    raw_id, name, raw_count, raw_marks, raw_average, raw_grade = row[:expected]

    student_id = _parse_int(raw_id, "id", line_num)
    subject_count = _parse_int(raw_count, "subjectCount", line_num)
    if not 1 <= subject_count <= config.MAX_SUBJECTS:
        raise MalformedRecordError(
            line_num, f"количество предметов {subject_count} вне диапазона 1-{config.MAX_SUBJECTS}"
        )

    marks = [_parse_int(token, "marks", line_num) for token in raw_marks.split(config.MARKS_DELIMITER)]
    if len(marks) != subject_count:
        raise MalformedRecordError(
            line_num, f"объявлено {subject_count} оценок, найдено {len(marks)}"
        )

    try:
        stored_average = float(raw_average)
    except ValueError:
        raise MalformedRecordError(line_num, f"поле 'average' не является числом: '{raw_average}'")

    try:
        student = Student(student_id, name, marks)
    except DataValidationError as e:
        raise MalformedRecordError(line_num, str(e))

    if f"{stored_average:.2f}" != f"{student.average:.2f}" or raw_grade.strip() != student.grade:
        logger.debug(
            f"Строка {line_num}: сохранённые average/grade ({raw_average}/{raw_grade}) "
            f"пересчитаны в {student.average:.2f}/{student.grade}"
        )
    return student


def read_students_from_csv(filepath: str, capacity: int = config.MAX_STUDENTS) -> List[Student]:
    """Читает данные о студентах из файла.

    Отсутствующий файл - это пустой список, а не ошибка. Некорректные
    строки пропускаются с предупреждением в логе. Чтение прекращается,
    когда загружено ``capacity`` студентов.
    """
    students: List[Student] = []
    seen_ids = set()
    skipped = 0
    try:
        with open(filepath, mode='r', encoding='utf-8', newline='') as file:
            reader = csv.reader(file, **CSV_FORMAT)

            try:
                first_row = next(reader)
            except StopIteration:
                return []  # Пустой файл

            rows = reader
            if not is_header_row(first_row):
                rows = _prepend(first_row, reader)

            for row in rows:
                if not row or not any(field.strip() for field in row):
                    continue
                if len(students) >= capacity:
                    logger.warning(f"Достигнут лимит {capacity} студентов, остальные строки {filepath} не загружены.")
                    break
                try:
                    student = parse_row(row, reader.line_num)
                    if student.id in seen_ids:
                        raise MalformedRecordError(reader.line_num, f"повторяющийся ID {student.id}")
                except MalformedRecordError as e:
                    skipped += 1
                    logger.warning(f"Пропущена строка в {filepath}: {e}")
                    continue
                seen_ids.add(student.id)
                students.append(student)

    except FileNotFoundError:
        logger.info(f"Файл {filepath} не найден, начинаем с пустого списка.")
        return []
    except (OSError, csv.Error, UnicodeDecodeError) as e:
        raise FileProcessingError(f"Не удалось прочитать файл {filepath}: {e}")

    logger.info(f"Загружено {len(students)} студентов из {filepath} (пропущено строк: {skipped}).")
    return students


def _prepend(first_row, reader):
    yield first_row
    yield from reader


def write_students_to_csv(filepath: str, students: Sequence[Student]):
    """Перезаписывает файл целиком: заголовок и все студенты в текущем порядке."""
    try:
        with open(filepath, mode='w', encoding='utf-8', newline='') as file:
            writer = csv.writer(file, lineterminator='\n', **CSV_FORMAT)
            writer.writerow(config.CSV_HEADER)
            for s in students:
                writer.writerow(student_to_row(s))
    except (OSError, csv.Error) as e:
        raise FileProcessingError(f"Ошибка записи в файл {filepath}: {e}")
    logger.info(f"Сохранено {len(students)} студентов в {filepath}.")
