# tests/test_models.py
import pytest
from gradebook import config
from gradebook.models import Student, calculate_grade, sanitize_name
from gradebook.errors import InvalidInputError

def test_student_creation():
    s = Student(1, "Тестов Тест", [80, 90])
    assert s.id == 1
    assert s.name == "Тестов Тест"
    assert s.marks == [80, 90]
    assert s.subject_count == 2

def test_student_average_and_grade():
    s = Student(1, "С оценками", [70, 80, 90])
    assert s.average == 80.0
    assert s.grade == 'B'

def test_derived_fields_follow_marks():
    s = Student(1, "Студент", [100, 100])
    assert s.grade == 'A'
    s.marks = [40, 50]
    assert s.average == 45.0
    assert s.grade == 'F'

@pytest.mark.parametrize("average, grade", [
    (100, 'A'), (90, 'A'), (89.99, 'B'), (75, 'B'), (74.5, 'C'),
    (60, 'C'), (59.9, 'D'), (50, 'D'), (49.99, 'F'), (0, 'F'),
])
def test_calculate_grade_thresholds(average, grade):
    assert calculate_grade(average) == grade

def test_name_delimiter_replaced_with_space():
    s = Student(1, "Smith, John", [50])
    assert s.name == "Smith  John"
    assert config.FIELD_DELIMITER not in s.name
    assert sanitize_name("a,b,c") == "a b c"

@pytest.mark.parametrize("name", ["", "   "])
def test_empty_name_rejected(name):
    with pytest.raises(InvalidInputError):
        Student(1, name, [50])

def test_too_long_name_rejected():
    with pytest.raises(InvalidInputError):
        Student(1, "x" * (config.MAX_NAME_LENGTH + 1), [50])

@pytest.mark.parametrize("marks", [[], [101], [-1], [50, "60"], [50] * (config.MAX_SUBJECTS + 1)])
def test_invalid_marks_rejected(marks):
    with pytest.raises(InvalidInputError):
        Student(1, "Студент", marks)

@pytest.mark.parametrize("student_id", [0, -5, "1"])
def test_invalid_id_rejected(student_id):
    with pytest.raises(InvalidInputError):
        Student(student_id, "Студент", [50])

def test_marks_setter_validates_and_keeps_old_value():
    s = Student(1, "Студент", [70])
    with pytest.raises(InvalidInputError):
        s.marks = [200]
    assert s.marks == [70]

def test_student_str_representation(capsys):
    s = Student(5, "Анна Котова", [100, 95])
    print(s)
    captured = capsys.readouterr()
    assert "ID: 5" in captured.out
    assert "Анна Котова" in captured.out
    assert "97.50" in captured.out
    assert "[100, 95]" in captured.out

@pytest.mark.parametrize("name", [",", ", ,", " ,"])
def test_name_of_only_delimiters_rejected(name):
    with pytest.raises(InvalidInputError):
        Student(1, name, [50])

@pytest.mark.parametrize("name", ["Иван\nИванов", "Иван\r"])
def test_name_with_line_break_rejected(name):
    with pytest.raises(InvalidInputError):
        Student(1, name, [50])
