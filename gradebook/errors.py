# gradebook/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class StudentAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class DataValidationError(StudentAppError):
    """Исключение, связанное с некорректными данными (в файле или вводе)."""
    pass

class InvalidInputError(DataValidationError, ValueError):
    """Значение от пользователя нарушает ограничение (имя, оценки, количество предметов)."""
    pass

class MalformedRecordError(DataValidationError):
    """Строка сохранённого файла не прошла проверку структуры."""

    def __init__(self, line_num: int, reason: str):
        super().__init__(f"Строка {line_num}: {reason}")
        self.line_num = line_num
        self.reason = reason

class FileProcessingError(StudentAppError):
    """Исключение, связанное с ошибками файловых операций."""
    pass

class StudentNotFoundError(StudentAppError):
    """Исключение, когда студент с заданным ID не найден."""

    def __init__(self, student_id: int):
        super().__init__(f"Студент с ID {student_id} не найден.")
        self.student_id = student_id

class CapacityExceededError(StudentAppError):
    """Хранилище заполнено, добавить студента нельзя."""
    pass

class EmptyStoreError(StudentAppError):
    """Операция требует хотя бы одного студента."""
    pass

class ConfigError(StudentAppError):
    pass
