# gradebook/models.py
"""Модуль, определяющий основные модели данных, такие как Student."""
from typing import Iterable, List

from . import config
from .errors import InvalidInputError

# Пороги оценок: проверяются сверху вниз, первое совпадение побеждает
GRADE_THRESHOLDS = [(90.0, 'A'), (75.0, 'B'), (60.0, 'C'), (50.0, 'D')]
FAIL_GRADE = 'F'
GRADES = ['A', 'B', 'C', 'D', FAIL_GRADE]


def calculate_grade(average: float) -> str:
    """Переводит средний балл в буквенную оценку."""
    for threshold, grade in GRADE_THRESHOLDS:
        if average >= threshold:
            return grade
    return FAIL_GRADE


def sanitize_name(name: str) -> str:
    """Заменяет разделитель полей на пробел, чтобы имя не ломало файл."""
    return name.replace(config.FIELD_DELIMITER, ' ')


def validate_name(name: str) -> str:
    """Проверяет имя и возвращает его нормализованную версию."""
    if not isinstance(name, str):
        raise InvalidInputError("Имя студента должно быть строкой.")
    name = sanitize_name(name)
    if not name.strip():
        raise InvalidInputError("Имя студента не может быть пустым.")
    if '\r' in name or '\n' in name:
        raise InvalidInputError("Имя студента не может содержать перевод строки.")
    if len(name) > config.MAX_NAME_LENGTH:
        raise InvalidInputError(
            f"Имя слишком длинное ({len(name)} символов). Максимум {config.MAX_NAME_LENGTH}."
        )
    return name


def validate_marks(marks: Iterable[int]) -> List[int]:
    """Проверяет оценки. Если хоть одна плохая - ошибка."""
    checked = []
    for mark in marks:
        # bool - подкласс int, но оценкой не является
        if not isinstance(mark, int) or isinstance(mark, bool):
            raise InvalidInputError(f"Оценка '{mark}' должна быть целым числом.")
        if mark < config.MIN_MARK or mark > config.MAX_MARK:
            raise InvalidInputError(
                f"Оценка {mark} недопустима. Разрешен диапазон {config.MIN_MARK}-{config.MAX_MARK}."
            )
        checked.append(mark)

    if not 1 <= len(checked) <= config.MAX_SUBJECTS:
        raise InvalidInputError(
            f"Количество предметов должно быть от 1 до {config.MAX_SUBJECTS}, получено {len(checked)}."
        )
    return checked


class Student:
    """Представляет студента с его ID, именем и оценками.

    Средний балл и буквенная оценка не хранятся, а вычисляются из оценок,
    поэтому всегда соответствуют текущему списку ``marks``.
    """
    def __init__(self, student_id: int, name: str, marks: List[int]):
        if not isinstance(student_id, int) or isinstance(student_id, bool) or student_id <= 0:
            raise InvalidInputError("ID студента должен быть положительным целым числом.")

        self.id = student_id
        self.name = name
        self.marks = marks

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = validate_name(value)

    @property
    def marks(self) -> List[int]:
        return list(self._marks)

    @marks.setter
    def marks(self, value: Iterable[int]):
        self._marks = validate_marks(value)

    @property
    def subject_count(self) -> int:
        return len(self._marks)

    @property
    def average(self) -> float:
        """Рассчитывает средний балл студента."""
        return sum(self._marks) / len(self._marks)

    @property
    def grade(self) -> str:
        return calculate_grade(self.average)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(id={self.id}, name='{self.name}', average={self.average:.2f}, grade='{self.grade}')"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        marks_str = ", ".join(map(str, self._marks))
        return (f"ID: {self.id:<3} | Имя: {self.name:<20} | Средний балл: {self.average:<6.2f} "
                f"| Оценка: {self.grade} | Оценки: [{marks_str}]")
