"""
Демонстрационные сценарии для котов и дробей.

Каждый сценарий печатает трассировку операций в stdout. Ожидаемые ошибки
перехватываются и печатаются как 'Ошибка ...: <сообщение>'.
"""

import logging

from pydantic import ValidationError

from src.core.domain.cached_fraction import CachedFraction
from src.core.domain.fraction import (
    DivisionByZero,
    Fraction,
    FractionOperations,
    InvalidDenominator,
)
from src.demo.config import DemoConfig
from src.demo.formatting import (
    format_operation,
    format_real,
    section_header,
    validation_message,
)
from src.meow import Cat, Meowable, MeowCounter, RobotCat, make_all_meow

logger = logging.getLogger(__name__)


# =============================================================================
# КОТЫ
# =============================================================================


def demonstrate_cats(config: DemoConfig) -> None:
    width = config.separator_width

    barsik = Cat("Барсик")
    print(f"Создан: {barsik}")
    print("Мяукает один раз: ", end="")
    barsik.meow()
    print("Мяукает три раза: ", end="")
    barsik.meow(3)

    print("\n" + section_header("Тестирование метода make_all_meow", width))
    meowables: list[Meowable] = [
        Cat("Мурзик"),
        Cat("Васька"),
        RobotCat("RX-78"),
        Cat("Рыжик"),
    ]
    print("Все мяукают:")
    make_all_meow(meowables)

    print("\n" + section_header("Подсчет мяуканий", width))
    counter = MeowCounter(Cat("Мурзик"))
    print(f"До мяуканий: счетчик = {counter.meow_count}")
    for _ in range(3):
        counter.meow()
    print(f"После мяуканий: счетчик = {counter.meow_count}")

    print("\n" + section_header("Подсчет мяуканий в методе make_all_meow", width))
    counter1 = MeowCounter(Cat("Барсик"))
    counter2 = MeowCounter(Cat("Мурзик"))
    counter3 = MeowCounter(RobotCat("AI-Cat"))
    counted = [counter1, counter2, counter3]

    print("До вызова метода:")
    print(f"Барсик мяукал: {counter1.meow_count} раз")
    print(f"Мурзик мяукал: {counter2.meow_count} раз")

    print("\nВызываем make_all_meow дважды:")
    make_all_meow(counted)
    make_all_meow(counted)

    print("\nПосле вызова метода:")
    print(f"Барсик мяукал: {counter1.meow_count} раз")
    print(f"Мурзик мяукал: {counter2.meow_count} раз")
    print(f"Робокот мяукал: {counter3.meow_count} раз")

    print("\n" + section_header("Проверка обработки исключений", width))
    try:
        Cat("")
    except ValidationError as e:
        logger.debug("cat creation rejected: %s", e)
        print(f"Ошибка создания кота: {validation_message(e)}")

    try:
        Cat("Барсик").meow(0)
    except ValueError as e:
        print(f"Ошибка мяуканья: {e}")

    try:
        make_all_meow(None)
    except TypeError as e:
        print(f"Ошибка вызова метода: {e}")


# =============================================================================
# ДРОБИ
# =============================================================================


def demonstrate_fractions(config: DemoConfig) -> None:
    width = config.separator_width
    precision = config.precision

    print(section_header("1. СОЗДАНИЕ ДРОБЕЙ:", width))
    f1 = Fraction(1, 3)
    f2 = Fraction(2, 3)
    f3 = Fraction(3, 4)
    f4 = Fraction(-2, 5)
    f5 = Fraction(4)
    for name, value in (("f1", f1), ("f2", f2), ("f3", f3), ("f4", f4), ("f5", f5)):
        print(f"{name} = {value}")

    print("\n" + section_header("2. ПРИМЕРЫ ОПЕРАЦИЙ:", width))
    print(f"f1.add(f2) = {format_operation(f1, '+', f2, f1.add(f2))}")
    print(f"f3.subtract(f1) = {format_operation(f3, '-', f1, f3.subtract(f1))}")
    print(f"f1.multiply(f2) = {format_operation(f1, '*', f2, f1.multiply(f2))}")
    print(f"f2.divide(f1) = {format_operation(f2, '/', f1, f2.divide(f1))}")

    print("\nОперации с целыми числами:")
    print(f"f1.add(2) = {format_operation(f1, '+', 2, f1.add(2))}")
    print(f"f3.subtract(1) = {format_operation(f3, '-', 1, f3.subtract(1))}")
    print(f"f2.multiply(3) = {format_operation(f2, '*', 3, f2.multiply(3))}")
    print(f"f5.divide(2) = {format_operation(f5, '/', 2, f5.divide(2))}")

    print("\n" + section_header("3. ИСПОЛЬЗОВАНИЕ ПЕРЕГРУЖЕННЫХ ОПЕРАТОРОВ:", width))
    print(f"{f1} + {f2} = {f1 + f2}")
    print(f"{f3} - {f1} = {f3 - f1}")
    print(f"{f1} * {f2} = {f1 * f2}")
    print(f"{f2} / {f1} = {f2 / f1}")
    print(f"{f1} + 2 = {f1 + 2}")
    print(f"3 * {f2} = {3 * f2}")
    print(f"{f4} * {f3} = {f4 * f3} (работа с отрицательными)")

    print("\n" + section_header("4. СЛОЖНОЕ ВЫРАЖЕНИЕ:", width))
    print(f"Исходные дроби: f1={f1}, f2={f2}, f3={f3}")
    print("Вычисляем: f1.add(f2).divide(f3).subtract(5)")
    step1 = f1.add(f2)
    print(f"  Шаг 1: f1.add(f2) = {step1}")
    step2 = step1.divide(f3)
    print(f"  Шаг 2: {step1}.divide(f3) = {step2}")
    result = step2.subtract(5)
    print(f"  Шаг 3: {step2}.subtract(5) = {result}")
    print(f"\nИтог одной строкой: {f1}.add({f2}).divide({f3}).subtract(5) = {result}")
    print(f"Вещественное значение: {format_real(result.real_value(), precision)}")

    print("\n" + section_header("5. СРАВНЕНИЕ ДРОБЕЙ:", width))
    f6 = Fraction(2, 4)
    f7 = Fraction(1, 2)
    f8 = Fraction(3, 4)
    print(f"f6 = {f6} (исходно 2/4)")
    print(f"f7 = {f7}")
    print(f"f8 = {f8}")
    print(f"\nf6 == f7: {f6 == f7} (должно быть True)")
    print(f"f6.equals(f7): {f6.equals(f7)} (должно быть True)")
    print(f"f6 == f8: {f6 == f8} (должно быть False)")
    print(f"f6.compare(f8): {f6.compare(f8)} (должно быть -1)")
    print(f"f8.compare(f6): {f8.compare(f6)} (должно быть 1)")
    print(f"f6.compare(f7): {f6.compare(f7)} (должно быть 0)")

    print("\n" + section_header("6. КЛОНИРОВАНИЕ:", width))
    original = Fraction(3, 5)
    clone = original.clone()
    print(f"Оригинал: {original}")
    print(f"Клон: {clone}")
    print(f"Оригинал == Клон: {original == clone}")
    print(f"Ссылаются на один объект: {original is clone}")
    clone.set_numerator(6)
    print("\nПосле изменения клона:")
    print(f"Оригинал: {original} (не изменился)")
    print(f"Клон: {clone} (изменился)")

    print("\n" + section_header("7. РАБОТА С ИНТЕРФЕЙСОМ FractionOperations:", width))
    operations: FractionOperations = Fraction(2, 3)
    print(f"Дробь через интерфейс: {operations}")
    print(f"Вещественное значение: {format_real(operations.real_value(), precision)}")
    print("\nИзменяем через интерфейс:")
    operations.set_numerator(5)
    operations.set_denominator(8)
    print(f"Новая дробь: {operations}")
    print(f"Новое значение: {format_real(operations.real_value(), precision)}")

    _demonstrate_cached_fraction(config)
    _demonstrate_errors(config, f1)

    print("\n" + section_header("10. ЦЕПОЧКА ВЫЗОВОВ С ОПЕРАТОРАМИ:", width))
    chain_result = f1.add(f2).divide(f3).subtract(5)
    print(f"Цепочка вызовов: {f1}.add({f2}).divide({f3}).subtract(5) = {chain_result}")
    operator_result = (f1 + f2) / f3 - 5
    print(f"С операторами: ({f1} + {f2}) / {f3} - 5 = {operator_result}")
    print(f"Результаты совпадают: {chain_result == operator_result}")

    print("\n" + section_header("11. ПРОВЕРКА ОТРИЦАТЕЛЬНЫХ ДРОБЕЙ:", width))
    neg1 = Fraction(-3, 4)
    neg2 = Fraction(2, -5)
    print(f"neg1 = {neg1}")
    print(f"neg2 = {neg2} (знаменатель автоматически стал положительным)")
    print(f"{neg1} + {neg2} = {neg1 + neg2}")
    print(f"{neg1} * {neg2} = {neg1 * neg2}")
    print(f"{neg1} - {neg2} = {neg1 - neg2}")
    print(f"{neg1} / {neg2} = {neg1 / neg2}")


def _demonstrate_cached_fraction(config: DemoConfig) -> None:
    precision = config.precision + 2

    print("\n" + section_header("8. КЭШИРОВАННАЯ ВЕРСИЯ ДРОБИ:", config.separator_width))
    cached = CachedFraction(1, 3)
    print(f"Дробь: {cached}")

    print("Первое получение значения (должно вычислиться):")
    val1 = cached.real_value()
    print(f"  Значение: {format_real(val1, precision)}")

    print("Второе получение значения (должно взять из кэша):")
    val2 = cached.real_value()
    print(f"  Значение: {format_real(val2, precision)}")
    print(f"  То же самое значение: {val1 == val2}")

    print("\nИзменяем дробь:")
    cached.set_numerator(2)
    cached.set_denominator(5)
    print(f"Новая дробь: {cached}")

    print("Получение значения после изменения (должно пересчитать):")
    val3 = cached.real_value()
    print(f"  Значение: {format_real(val3, precision)}")


def _demonstrate_errors(config: DemoConfig, divisible: Fraction) -> None:
    print("\n" + section_header("9. ПРОВЕРКА ОБРАБОТКИ ИСКЛЮЧЕНИЙ:", config.separator_width))
    try:
        Fraction(1, 0)
    except InvalidDenominator as e:
        logger.debug("fraction creation rejected: %s", e)
        print(f"Ошибка создания дроби: {e}")

    try:
        divisible.divide(0)
    except DivisionByZero as e:
        logger.debug("division rejected: %s", e)
        print(f"Ошибка деления: {e}")

    normalized = Fraction(3, -5)
    print(f"Дробь с отрицательным знаменателем автоматически корректируется: {normalized}")


# =============================================================================
# ЗАПУСК
# =============================================================================


SCENARIOS = {
    "cats": ("ДЕМОНСТРАЦИЯ РАБОТЫ С КОТАМИ", demonstrate_cats),
    "fractions": ("ДЕМОНСТРАЦИЯ РАБОТЫ С ДРОБЯМИ", demonstrate_fractions),
}


def run_demo(config: DemoConfig) -> None:
    """Последовательно выполнить выбранные сценарии."""
    for index, section in enumerate(config.sections):
        title, scenario = SCENARIOS[section]
        prefix = "" if index == 0 else "\n\n"
        print(f"{prefix}========== {title} ==========\n")
        logger.info("running demo section %s", section)
        scenario(config)
