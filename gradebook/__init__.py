"""Консольный учёт студентов: список с оценками, средним баллом и буквенной оценкой.

- models.py: Student, расчёт среднего и оценки
- store.py: хранилище и операции над ним
- io_utils.py: чтение и запись students.csv
- report.py: таблица и report.txt
- main.py: меню
"""
