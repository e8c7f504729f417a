# tests/conftest.py
import pytest
from typing import List
from gradebook.models import Student
from gradebook.store import StudentStore

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student(1, "Иванов Иван", [78, 85, 90]),
        Student(3, "Петров Петр", [92, 88, 95]),
        Student(2, "Сидорова Анна", [65, 70]),
    ]

@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "students.csv"

@pytest.fixture
def store(sample_students, data_file) -> StudentStore:
    """Хранилище с тестовыми студентами, привязанное к временному файлу."""
    return StudentStore(sample_students, filepath=str(data_file))
