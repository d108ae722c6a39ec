"""
Cats — Объекты, способные мяукать

Immutable Pydantic модели котов. Имя/модель проверяются при создании,
счётчик мяуканий кота хранится в приватном атрибуте и не входит в поля модели.
"""

from typing import Final, Protocol, runtime_checkable

from pydantic import BaseModel, Field, PrivateAttr, field_validator


# =============================================================================
# ОГРАНИЧЕНИЯ
# =============================================================================

# Максимальная длина имени кота
CAT_NAME_MAX_LENGTH: Final[int] = 50

# Максимальное число мяуканий за один вызов
MEOW_COUNT_MAX: Final[int] = 100

MEOW_SOUND: Final[str] = "мяу"
ROBOT_MEOW_SOUND: Final[str] = "БИП-МЯУ"


# =============================================================================
# ИНТЕРФЕЙС
# =============================================================================


@runtime_checkable
class Meowable(Protocol):
    """Объект, способный мяукать."""

    def meow(self) -> None: ...


# =============================================================================
# CAT
# =============================================================================


class Cat(BaseModel):
    """
    Кот с именем и счётчиком мяуканий.

    Examples:
        >>> cat = Cat("Барсик")
        >>> cat.meow(3)
        Барсик: мяу-мяу-мяу!
        >>> cat.meow_count
        3
    """

    name: str = Field(..., description="Имя кота")

    model_config = {"frozen": True}

    _meow_count: int = PrivateAttr(default=0)

    def __init__(self, name: str, **data):
        super().__init__(name=name, **data)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Имя кота не может быть пустым или содержать только пробелы")
        if len(v) > CAT_NAME_MAX_LENGTH:
            raise ValueError(
                f"Имя кота не может быть длиннее {CAT_NAME_MAX_LENGTH} символов"
            )
        return v

    @property
    def meow_count(self) -> int:
        return self._meow_count

    def meow(self, count: int = 1) -> None:
        """
        Мяукнуть count раз подряд.

        Args:
            count: Количество мяуканий (1..MEOW_COUNT_MAX)

        Raises:
            ValueError: Если count вне допустимого диапазона
        """
        if count <= 0:
            raise ValueError("Количество мяуканий должно быть положительным числом")
        if count > MEOW_COUNT_MAX:
            raise ValueError(
                f"Кот не может мяукать больше {MEOW_COUNT_MAX} раз подряд"
            )

        self._meow_count += count
        print(f"{self.name}: {'-'.join([MEOW_SOUND] * count)}!")

    def __str__(self) -> str:
        return f"кот: {self.name}"


# =============================================================================
# ROBOT CAT
# =============================================================================


class RobotCat(BaseModel):
    """Робот-кот, мяукающий электронным голосом."""

    model: str = Field(..., description="Модель робота-кота")

    model_config = {"frozen": True}

    def __init__(self, model: str, **data):
        super().__init__(model=model, **data)

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Модель робота-кота не может быть пустой")
        return v

    def meow(self) -> None:
        print(f"{self.model}: {ROBOT_MEOW_SOUND}!")

    def __str__(self) -> str:
        return f"робот-кот: {self.model}"
