"""
Тесты для консольной демонстрации

Проверяет:
1. DemoConfig: значения по умолчанию и валидацию
2. Трассировки сценариев котов и дробей
3. CLI: выбор разделов, точность, ошибки аргументов
"""

import argparse
import logging

import pytest

from src.core.domain import Fraction
from src.demo import DemoConfig, demonstrate_cats, demonstrate_fractions, run_demo
from src.demo.cli import main
from src.demo.formatting import format_operation, format_real, section_header


class TestDemoConfig:
    """Тесты для DemoConfig"""

    def test_defaults(self) -> None:
        config = DemoConfig()
        assert config.sections == ("cats", "fractions")
        assert config.precision == 4
        assert config.separator_width == 50

    def test_unknown_section_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown demo sections"):
            DemoConfig(sections=("dogs",))

    def test_empty_sections_rejected(self) -> None:
        with pytest.raises(ValueError):
            DemoConfig(sections=())

    def test_negative_precision_rejected(self) -> None:
        with pytest.raises(ValueError, match="precision"):
            DemoConfig(precision=-1)

    def test_non_positive_width_rejected(self) -> None:
        with pytest.raises(ValueError, match="separator_width"):
            DemoConfig(separator_width=0)

    def test_from_args(self) -> None:
        args = argparse.Namespace(section="fractions", precision=2)
        assert DemoConfig.from_args(args) == DemoConfig(sections=("fractions",), precision=2)

        args = argparse.Namespace(section="all", precision=4)
        assert DemoConfig.from_args(args).sections == ("cats", "fractions")


class TestFormatting:
    """Тесты помощников форматирования"""

    def test_format_operation(self) -> None:
        assert format_operation(Fraction(1, 3), "+", Fraction(2, 3), Fraction(1)) == "1/3 + 2/3 = 1/1"
        assert format_operation(Fraction(4), "/", 2, Fraction(2)) == "4/1 / 2 = 2/1"

    def test_format_real(self) -> None:
        assert format_real(-11 / 3, 4) == "-3.6667"
        assert format_real(0.4, 6) == "0.400000"

    def test_section_header(self) -> None:
        assert section_header("T", 3) == "T\n---"


class TestScenarios:
    """Тесты сценариев"""

    def test_cats(self, capsys) -> None:
        demonstrate_cats(DemoConfig())
        out = capsys.readouterr().out

        assert "Создан: кот: Барсик" in out
        assert "Мяукает три раза: Барсик: мяу-мяу-мяу!" in out
        assert "RX-78: БИП-МЯУ!" in out
        assert "После мяуканий: счетчик = 3" in out
        assert "Робокот мяукал: 2 раз" in out
        assert (
            "Ошибка создания кота: Имя кота не может быть пустым или содержать только пробелы"
            in out
        )
        assert "Ошибка мяуканья: Количество мяуканий должно быть положительным числом" in out
        assert "Ошибка вызова метода: Коллекция не может быть None" in out

    def test_cats_separator_width(self, capsys) -> None:
        demonstrate_cats(DemoConfig(separator_width=7))
        out = capsys.readouterr().out
        assert "Подсчет мяуканий\n-------\n" in out
        assert "Проверка обработки исключений\n-------\n" in out
        assert "-" * 8 not in out

    def test_fractions(self, capsys) -> None:
        demonstrate_fractions(DemoConfig())
        out = capsys.readouterr().out

        assert "f1.add(f2) = 1/3 + 2/3 = 1/1" in out
        assert "f3.subtract(f1) = 3/4 - 1/3 = 5/12" in out
        assert "f5.divide(2) = 4/1 / 2 = 2/1" in out
        assert "3 * 2/3 = 2/1" in out
        assert "  Шаг 3: 4/3.subtract(5) = -11/3" in out
        assert "Вещественное значение: -3.6667" in out
        assert "f6.compare(f8): -1 (должно быть -1)" in out
        assert "Клон: 6/5 (изменился)" in out
        assert "Новая дробь: 5/8" in out
        assert "  Значение: 0.400000" in out
        assert "  То же самое значение: True" in out
        assert "Ошибка создания дроби: Знаменатель не может быть равен нулю" in out
        assert "Ошибка деления: Нельзя делить на ноль" in out
        assert "автоматически корректируется: -3/5" in out
        assert "Результаты совпадают: True" in out
        assert "-3/4 / -2/5 = 15/8" in out

    def test_precision_respected(self, capsys) -> None:
        demonstrate_fractions(DemoConfig(precision=2))
        out = capsys.readouterr().out
        assert "Вещественное значение: -3.67" in out
        assert "  Значение: 0.3333\n" in out

    def test_run_demo_sections(self, capsys) -> None:
        run_demo(DemoConfig(sections=("fractions",)))
        out = capsys.readouterr().out
        assert out.startswith("========== ДЕМОНСТРАЦИЯ РАБОТЫ С ДРОБЯМИ ==========")
        assert "КОТАМИ" not in out


class TestCli:
    """Тесты CLI"""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        """main() перенастраивает корневой логгер"""
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level
        yield
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
        root.setLevel(level)

    def test_main_all_sections(self, capsys) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "ДЕМОНСТРАЦИЯ РАБОТЫ С КОТАМИ" in out
        assert "\n\n========== ДЕМОНСТРАЦИЯ РАБОТЫ С ДРОБЯМИ" in out

    def test_main_single_section(self, capsys) -> None:
        assert main(["--section", "cats"]) == 0
        out = capsys.readouterr().out
        assert "ДРОБЯМИ" not in out

    def test_debug_logging_to_stderr(self, capsys) -> None:
        main(["--section", "fractions", "--log-level", "DEBUG"])
        err = capsys.readouterr().err
        assert "D | src.core.domain.cached_fraction | cache miss" in err

    def test_invalid_precision(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--precision", "-1"])
        assert exc_info.value.code == 2
        assert "precision must be non-negative" in capsys.readouterr().err

    def test_unknown_section(self) -> None:
        with pytest.raises(SystemExit):
            main(["--section", "dogs"])
