# gradebook/store.py
"""Хранилище студентов: добавление, поиск, обновление, удаление, сортировка, статистика."""
import logging
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union

from . import config, io_utils
from .models import Student, GRADES, validate_marks, validate_name
from .errors import (
    CapacityExceededError,
    EmptyStoreError,
    InvalidInputError,
    StudentNotFoundError,
)

logger = logging.getLogger(__name__)


class SortKey(Enum):
    """Поле, по которому сортируется список."""
    ID = "id"
    NAME = "name"
    AVERAGE = "average"


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


_SORT_KEY_ALIASES = {"id": SortKey.ID, "name": SortKey.NAME, "avg": SortKey.AVERAGE, "average": SortKey.AVERAGE}
_SORT_ORDER_ALIASES = {"asc": SortOrder.ASC, "desc": SortOrder.DESC}


def parse_sort_key(key: Union[SortKey, str]) -> SortKey:
    if isinstance(key, SortKey):
        return key
    try:
        return _SORT_KEY_ALIASES[str(key).strip().lower()]
    except KeyError:
        raise InvalidInputError("Неверный ключ для сортировки. Доступно: 'id', 'name', 'avg'.")


def parse_sort_order(order: Union[SortOrder, str]) -> SortOrder:
    if isinstance(order, SortOrder):
        return order
    try:
        return _SORT_ORDER_ALIASES[str(order).strip().lower()]
    except KeyError:
        raise InvalidInputError("Неверное направление сортировки. Доступно: 'asc', 'desc'.")


def sort_value(student: Student, key: SortKey):
    """Значение, по которому сравниваются студенты для данного ключа."""
    if key is SortKey.ID:
        return student.id
    elif key is SortKey.NAME:
        return student.name.lower()
    else:
        return student.average


class StudentStore:
    """Упорядоченный список студентов в памяти.

    Если хранилище привязано к файлу (``filepath``), после каждого
    изменения весь список перезаписывается в этот файл.
    """

    def __init__(self, students: Optional[List[Student]] = None,
                 capacity: int = config.MAX_STUDENTS,
                 filepath: Optional[str] = None):
        students = list(students or [])
        if len(students) > capacity:
            raise CapacityExceededError(f"Нельзя хранить {len(students)} студентов: лимит {capacity}.")
        ids = [s.id for s in students]
        if len(ids) != len(set(ids)):
            raise InvalidInputError("ID студентов должны быть уникальными.")

        self._students = students
        self.capacity = capacity
        self.filepath = filepath
        self._last_id = max(ids, default=0)

    @classmethod
    def load(cls, filepath: str, capacity: int = config.MAX_STUDENTS) -> "StudentStore":
        """Создаёт хранилище из файла. Если файла нет - хранилище пустое."""
        students = io_utils.read_students_from_csv(filepath, capacity)
        return cls(students, capacity=capacity, filepath=filepath)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students))

    @property
    def students(self) -> List[Student]:
        return list(self._students)

    def save(self):
        """Записывает всё хранилище в привязанный файл."""
        if self.filepath is None:
            return
        io_utils.write_students_to_csv(self.filepath, self._students)

    def _next_id(self) -> int:
        # ID удалённых студентов повторно не выдаются
        return max(self._last_id, max((s.id for s in self._students), default=0)) + 1

    def _index_of(self, student_id: int) -> int:
        for i, s in enumerate(self._students):
            if s.id == student_id:
                return i
        raise StudentNotFoundError(student_id)

    def add(self, name: str, marks: List[int]) -> Student:
        """Добавляет нового студента с автоматически выданным ID."""
        if len(self._students) >= self.capacity:
            raise CapacityExceededError(f"Нельзя добавить студента: достигнут лимит {self.capacity}.")

        new_student = Student(self._next_id(), name, marks)
        self._students.append(new_student)
        self._last_id = new_student.id
        logger.info(f"Добавлен студент {new_student!r}")
        self.save()
        return new_student

    def find_by_id(self, student_id: int) -> Student:
        return self._students[self._index_of(student_id)]

    def find_by_name(self, query: str) -> List[Student]:
        """Поиск по части имени без учёта регистра. Пустой запрос находит всех."""
        needle = query.lower()
        return [s for s in self._students if needle in s.name.lower()]

    def update(self, student_id: int, name: Optional[str] = None,
               marks: Optional[List[int]] = None) -> Student:
        """Обновляет имя и/или оценки. Ничего не меняется, если хоть одно значение некорректно."""
        student = self.find_by_id(student_id)

        new_name = validate_name(name) if name is not None else None
        new_marks = validate_marks(marks) if marks is not None else None

        if new_name is not None:
            student.name = new_name
        if new_marks is not None:
            student.marks = new_marks
        logger.info(f"Обновлён студент {student!r}")
        self.save()
        return student

    def delete(self, student_id: int):
        """Удаляет студента, сохраняя порядок остальных."""
        removed = self._students.pop(self._index_of(student_id))
        logger.info(f"Удалён студент {removed!r}")
        self.save()

    def sort_by(self, key: Union[SortKey, str] = SortKey.ID,
                order: Union[SortOrder, str] = SortOrder.ASC):
        """Сортирует список на месте и сохраняет новый порядок."""
        key = parse_sort_key(key)
        order = parse_sort_order(order)
        self._students.sort(key=lambda s: sort_value(s, key), reverse=order is SortOrder.DESC)
        self.save()

    def statistics(self) -> Dict[str, Any]:
        """Рассчитывает статистику по группе студентов."""
        if not self._students:
            raise EmptyStoreError("Список студентов пуст, статистика недоступна.")

        best_student = worst_student = self._students[0]
        grade_counts = {grade: 0 for grade in GRADES}
        total = 0.0
        for s in self._students:
            total += s.average
            if s.average > best_student.average:
                best_student = s
            if s.average < worst_student.average:
                worst_student = s
            grade_counts[s.grade] += 1

        return {
            "total_students": len(self._students),
            "class_average": total / len(self._students),
            "best_student": best_student,
            "worst_student": worst_student,
            "grade_counts": grade_counts,
        }
