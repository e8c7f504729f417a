# gradebook/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для управления студентами."""
import logging
import sys
import traceback
from typing import List, Optional

from . import config, report
from .config import Settings
from .errors import StudentAppError, FileProcessingError
from .store import StudentStore, SortKey, SortOrder

logger = logging.getLogger(__name__)

MAX_ID_INPUT = 1_000_000_000

SORT_CHOICES = {
    1: (SortKey.ID, SortOrder.ASC),
    2: (SortKey.ID, SortOrder.DESC),
    3: (SortKey.NAME, SortOrder.ASC),
    4: (SortKey.NAME, SortOrder.DESC),
    5: (SortKey.AVERAGE, SortOrder.ASC),
    6: (SortKey.AVERAGE, SortOrder.DESC),
}


def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*30)
    print("      МЕНЮ УПРАВЛЕНИЯ")
    print("="*30)
    print("1. Добавить студента")
    print("2. Показать всех студентов")
    print("3. Найти студента по ID")
    print("4. Найти студентов по имени")
    print("5. Изменить студента")
    print("6. Удалить студента")
    print("7. Сортировать список")
    print("8. Показать статистику по группе")
    print("9. Экспорт отчёта")
    print("0. Сохранить и выйти")
    print("="*30)


def input_int_in_range(prompt: str, low: int, high: int) -> int:
    """Запрашивает целое число, пока оно не попадёт в диапазон [low, high]."""
    while True:
        raw = input(prompt)
        try:
            value = int(raw.strip())
        except ValueError:
            value = None
        if value is not None and low <= value <= high:
            return value
        print(f"❌ Неверный ввод. Введите число от {low} до {high}.")


def input_marks() -> List[int]:
    count = input_int_in_range(f"Введите количество предметов (1-{config.MAX_SUBJECTS}): ", 1, config.MAX_SUBJECTS)
    return [
        input_int_in_range(f"Оценка по предмету {i + 1} ({config.MIN_MARK}-{config.MAX_MARK}): ",
                           config.MIN_MARK, config.MAX_MARK)
        for i in range(count)
    ]


def show_table(students):
    print()
    print(report.format_table(students))


def add_student(store: StudentStore):
    name = input("Введите имя студента: ")
    if not name.strip():
        print("❌ Имя не может быть пустым.")
        return
    marks = input_marks()
    student = store.add(name, marks)
    print(f"✅ Добавлен: ID {student.id} | {student.name} | Ср. балл: {student.average:.2f} | Оценка: {student.grade}")


def search_by_id(store: StudentStore):
    student_id = input_int_in_range("Введите ID студента: ", 1, MAX_ID_INPUT)
    student = store.find_by_id(student_id)
    show_table([student])
    print("Оценки: " + ", ".join(map(str, student.marks)))


def search_by_name(store: StudentStore):
    query = input("Введите имя (или его часть): ")
    if not query:
        print("ℹ️ Пустой запрос.")
        return
    found = store.find_by_name(query)
    if not found:
        print(f"ℹ️ Нет совпадений для \"{query}\".")
        return
    show_table(found)


def update_student(store: StudentStore):
    student_id = input_int_in_range("Введите ID студента для изменения: ", 1, MAX_ID_INPUT)
    student = store.find_by_id(student_id)
    print(f"\nИзменение студента ID {student.id} ({student.name})")
    print("1) Изменить имя")
    print("2) Изменить предметы и оценки")
    print("3) Отмена")
    choice = input_int_in_range("Выберите: ", 1, 3)

    if choice == 1:
        name = input("Новое имя: ")
        if not name.strip():
            print("ℹ️ Имя не изменено.")
            return
        store.update(student_id, name=name)
    elif choice == 2:
        store.update(student_id, marks=input_marks())
    else:
        print("ℹ️ Отменено.")
        return
    print("✅ Данные студента обновлены.")


def delete_student(store: StudentStore):
    student_id = input_int_in_range("Введите ID студента для удаления: ", 1, MAX_ID_INPUT)
    student = store.find_by_id(student_id)
    answer = input(f"Удалить студента ID {student.id} ({student.name})? (y/n): ")
    if answer.strip().lower() not in ('y', 'д'):
        print("ℹ️ Отменено.")
        return
    store.delete(student_id)
    print(f"✅ Студент с ID {student_id} успешно удален.")


def sort_students(store: StudentStore):
    print("\nСортировать по:")
    print("1) ID (по возрастанию)")
    print("2) ID (по убыванию)")
    print("3) Имени (по возрастанию)")
    print("4) Имени (по убыванию)")
    print("5) Среднему баллу (по возрастанию)")
    print("6) Среднему баллу (по убыванию)")
    key, order = SORT_CHOICES[input_int_in_range("Выберите: ", 1, 6)]
    store.sort_by(key, order)
    print("✅ Список отсортирован.")


def show_statistics(store: StudentStore):
    stats = store.statistics()
    best, worst = stats['best_student'], stats['worst_student']
    counts = ", ".join(f"{grade}={n}" for grade, n in stats['grade_counts'].items())
    print("\n--- Статистика по группе ---")
    print(f"Всего студентов: {stats['total_students']}")
    print(f"Средний балл группы: {stats['class_average']:.2f}")
    print(f"Лучший студент: ID {best.id} ({best.name}) ср. балл {best.average:.2f}")
    print(f"Худший студент: ID {worst.id} ({worst.name}) ср. балл {worst.average:.2f}")
    print(f"Оценки: {counts}")


def main_cli(store: StudentStore, settings: Optional[Settings] = None):
    """Основной цикл консольного приложения."""
    settings = settings or Settings()

    while True:
        print_menu()
        choice = input("Выберите пункт меню: ").strip()

        try:
            if choice == '1':
                add_student(store)

            elif choice == '2':
                if not len(store):
                    print("ℹ️ Список студентов пуст.")
                else:
                    show_table(store)

            elif choice in ('3', '4', '5', '6', '7') and not len(store):
                print("ℹ️ Список студентов пуст.")

            elif choice == '3':
                search_by_id(store)

            elif choice == '4':
                search_by_name(store)

            elif choice == '5':
                update_student(store)

            elif choice == '6':
                delete_student(store)

            elif choice == '7':
                sort_students(store)

            elif choice == '8':
                show_statistics(store)

            elif choice == '9':
                report.export_report(settings.report_file, store)
                print(f"✅ Отчёт сохранён в '{settings.report_file}'.")

            elif choice == '0':
                store.save()
                print("👋 Данные сохранены. До свидания!")
                break

            else:
                print("❌ Неверный выбор. Пожалуйста, введите число от 0 до 9.")

        except StudentAppError as e:
            print(f"❌ Ошибка: {e}")


def load_store(settings: Settings) -> StudentStore:
    """Загружает хранилище; нечитаемый файл считается отсутствием данных."""
    try:
        return StudentStore.load(settings.data_file, settings.capacity)
    except FileProcessingError as e:
        logger.error(f"{e}. Начинаем с пустого списка.")
        return StudentStore(capacity=settings.capacity, filepath=settings.data_file)


def run():
    """Точка входа консольной команды."""
    try:
        settings = Settings.from_env()
        logging.basicConfig(level=settings.log_level,
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        store = load_store(settings)
        print(f"✅ Загружено студентов: {len(store)}")
        main_cli(store, settings)
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    run()
