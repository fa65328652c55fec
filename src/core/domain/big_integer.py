"""
BigInteger — Целое произвольной точности (значимый тип)

Immutable Pydantic модель: magnitude (десятичные цифры, least-significant-first)
и флаг знака. Вся беззнаковая арифметика делегирована в
src.core.math.digit_arithmetic; здесь живёт только знаковая логика.

Конструкторы:
- BigInteger()                          → канонический ноль
- BigInteger.from_int64(n)              → из 64-битного знакового целого
- BigInteger.from_decimal_string(text)  → из десятичной строки (может бросить InvalidFormat)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль всегда положительный (is_negative=False при magnitude == (0,))
2. magnitude не содержит нулей в старших разрядах, кроме единственного (0,)
3. Каждая цифра magnitude в диапазоне 0..9
4. Операции не мутируют операнды и возвращают новый экземпляр;
   a += b / a -= b / a *= b перепривязывают имя к новому значению
5. InvalidFormat бросается только при разборе строки; арифметика,
   сравнения и рендеринг тотальны
"""

import logging
from typing import Final, NoReturn

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.digit_arithmetic import (
    DECIMAL_BASE,
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    Magnitude,
    add_magnitudes,
    compare_magnitudes,
    is_zero_magnitude,
    magnitude_from_digit_string,
    magnitude_less,
    magnitude_to_digit_string,
    multiply_magnitudes,
    normalize_magnitude,
    subtract_magnitudes,
    validate_magnitude,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Границы 64-битного знакового целого
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# |INT64_MIN| не помещается в положительный диапазон int64,
# поэтому его цифры задаются литералом
INT64_MIN_MAGNITUDE: Final[str] = "9223372036854775808"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormat(ValueError):
    """
    Строка не является десятичным целым.

    Единственная доменная ошибка модуля. Покрывает:
    - пустую строку
    - символ, не являющийся ASCII-цифрой, после необязательного знака
    - знак без цифр ("+", "-")
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid decimal integer {text!r}: {reason}")


# =============================================================================
# BIG INTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое целое произвольной точности.

    Immutable модель (frozen=True). Прямое создание через поля валидируется,
    но обычный путь — конструкторы from_int64 / from_decimal_string.
    """

    magnitude: tuple[int, ...] = Field(
        default=ZERO_MAGNITUDE,
        description="Десятичные цифры |value|, младший разряд первым",
    )
    is_negative: bool = Field(default=False, description="Знак (ноль всегда положительный)")

    model_config = {"frozen": True, "strict": True}

    @field_validator("magnitude")
    @classmethod
    def validate_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка цифр 0..9 и отсутствия нулей в старших разрядах."""
        validate_magnitude(v)
        return v

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "BigInteger":
        """Запрет отрицательного нуля."""
        if self.is_negative and is_zero_magnitude(self.magnitude):
            raise ValueError("Zero must not be negative")
        return self

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def _from_magnitude(cls, digits: Magnitude, negative: bool) -> "BigInteger":
        """
        Нормализующий конструктор.

        Удаляет нули в старших разрядах и сбрасывает знак у нуля.
        Все арифметические результаты проходят через него.
        """
        magnitude = normalize_magnitude(digits)
        return cls(
            magnitude=magnitude,
            is_negative=negative and not is_zero_magnitude(magnitude),
        )

    @classmethod
    def from_int64(cls, value: int) -> "BigInteger":
        """
        Конверсия 64-битного знакового целого.

        INT64_MIN обрабатывается отдельно: его модуль задаётся литералом
        INT64_MIN_MAGNITUDE, abs() от входа не вычисляется.

        Args:
            value: Целое в диапазоне [INT64_MIN, INT64_MAX]

        Returns:
            BigInteger с тем же значением

        Raises:
            TypeError: Если value не int (bool тоже отвергается)
            ValueError: Если value вне диапазона int64

        Examples:
            >>> str(BigInteger.from_int64(-9223372036854775808))
            '-9223372036854775808'
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"from_int64 expects int, got {type(value).__name__}")

        if value < INT64_MIN or value > INT64_MAX:
            raise ValueError(
                f"Value {value} out of int64 range [{INT64_MIN}, {INT64_MAX}]"
            )

        negative = value < 0

        if value == INT64_MIN:
            return cls._from_magnitude(magnitude_from_digit_string(INT64_MIN_MAGNITUDE), True)

        remaining = -value if negative else value
        digits: list[int] = []
        while True:
            remaining, digit = divmod(remaining, DECIMAL_BASE)
            digits.append(digit)
            if remaining == 0:
                break

        return cls._from_magnitude(tuple(digits), negative)

    @classmethod
    def from_decimal_string(cls, text: str) -> "BigInteger":
        """
        Разбор десятичной строки.

        Формат: необязательный '+' или '-', затем одна или более ASCII-цифр.
        Ведущие нули удаляются; строка из одних нулей (с любым знаком)
        даёт канонический положительный ноль.

        Args:
            text: Строка вида "[+-]?[0-9]+"

        Returns:
            BigInteger

        Raises:
            TypeError: Если text не str
            InvalidFormat: Пустая строка, знак без цифр или не-цифровой символ

        Examples:
            >>> str(BigInteger.from_decimal_string("-007"))
            '-7'
            >>> str(BigInteger.from_decimal_string("-000"))
            '0'
        """
        if not isinstance(text, str):
            raise TypeError(f"from_decimal_string expects str, got {type(text).__name__}")

        if text == "":
            cls._reject(text, "input string is empty")

        start = 0
        negative = False
        if text[0] in "+-":
            negative = text[0] == "-"
            start = 1

        if start == len(text):
            cls._reject(text, "sign without digits")

        for position in range(start, len(text)):
            char = text[position]
            # str.isdigit() пропускает не-ASCII цифры ('٣', '²')
            if not ("0" <= char <= "9"):
                cls._reject(text, f"invalid character {char!r} at position {position}")

        return cls._from_magnitude(magnitude_from_digit_string(text[start:]), negative)

    @staticmethod
    def _reject(text: str, reason: str) -> NoReturn:
        logger.debug("Rejected decimal string %r: %s", text, reason)
        raise InvalidFormat(text, reason)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        """Проверка на ноль."""
        return is_zero_magnitude(self.magnitude)

    def sign(self) -> int:
        """Знак: -1, 0 или 1."""
        if self.is_zero():
            return 0
        return -1 if self.is_negative else 1

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "BigInteger") -> "BigInteger":
        """
        Знаковое сложение.

        Диспетчеризация по комбинации знаков:
        - (+, +) → +(|a| + |b|)
        - (-, -) → -(|a| + |b|)
        - (-, +) → |a| < |b| ? +(|b| - |a|) : -(|a| - |b|)
        - (+, -) → |b| < |a| ? +(|a| - |b|) : -(|b| - |a|)
        """
        a, b = self.magnitude, other.magnitude

        if not self.is_negative and not other.is_negative:
            return self._from_magnitude(add_magnitudes(a, b), False)

        if self.is_negative and other.is_negative:
            return self._from_magnitude(add_magnitudes(a, b), True)

        if self.is_negative:
            if magnitude_less(a, b):
                return self._from_magnitude(subtract_magnitudes(b, a), False)
            return self._from_magnitude(subtract_magnitudes(a, b), True)

        if magnitude_less(b, a):
            return self._from_magnitude(subtract_magnitudes(a, b), False)
        return self._from_magnitude(subtract_magnitudes(b, a), True)

    def subtract(self, other: "BigInteger") -> "BigInteger":
        """
        Знаковое вычитание.

        Эквивалентно add(-other), но без промежуточного экземпляра:
        - (+, +) → |a| < |b| ? -(|b| - |a|) : +(|a| - |b|)
        - (-, -) → |a| < |b| ? +(|b| - |a|) : -(|a| - |b|)
        - (-, +) → -(|a| + |b|)
        - (+, -) → +(|a| + |b|)
        """
        a, b = self.magnitude, other.magnitude

        if not self.is_negative and not other.is_negative:
            if magnitude_less(a, b):
                return self._from_magnitude(subtract_magnitudes(b, a), True)
            return self._from_magnitude(subtract_magnitudes(a, b), False)

        if self.is_negative and other.is_negative:
            if magnitude_less(a, b):
                return self._from_magnitude(subtract_magnitudes(b, a), False)
            return self._from_magnitude(subtract_magnitudes(a, b), True)

        if self.is_negative:
            return self._from_magnitude(add_magnitudes(a, b), True)

        return self._from_magnitude(add_magnitudes(a, b), False)

    def multiply(self, other: "BigInteger") -> "BigInteger":
        """
        Знаковое умножение.

        Знак результата — XOR знаков операндов; нулевой операнд
        даёт канонический положительный ноль.
        """
        product = multiply_magnitudes(self.magnitude, other.magnitude)
        return self._from_magnitude(product, self.is_negative != other.is_negative)

    def negate(self) -> "BigInteger":
        """Смена знака; ноль остаётся положительным."""
        return self._from_magnitude(self.magnitude, not self.is_negative)

    def __add__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return self._from_magnitude(self.magnitude, False)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: "BigInteger") -> int:
        """
        Трёхзначное сравнение.

        Отрицательные раньше положительных. При равных знаках сравниваются
        magnitudes; для двух отрицательных результат инвертируется.

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other
        """
        if self.is_negative != other.is_negative:
            return -1 if self.is_negative else 1

        result = compare_magnitudes(self.magnitude, other.magnitude)
        return -result if self.is_negative else result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.is_negative == other.is_negative and self.magnitude == other.magnitude

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return not self == other

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self.is_negative, self.magnitude))

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def to_decimal_string(self) -> str:
        """
        Каноническая десятичная строка.

        '-' только для отрицательных (никогда '+'), цифры от старшего
        разряда, без разделителей и без ведущих нулей.
        """
        digits = magnitude_to_digit_string(self.magnitude)
        return f"-{digits}" if self.is_negative else digits

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"BigInteger({self.to_decimal_string()!r})"

    def __format__(self, format_spec: str) -> str:
        # Выравнивание и ширина применяются к отрендеренной строке
        return format(self.to_decimal_string(), format_spec)


ZERO: Final[BigInteger] = BigInteger()
ONE: Final[BigInteger] = BigInteger(magnitude=ONE_MAGNITUDE, is_negative=False)
