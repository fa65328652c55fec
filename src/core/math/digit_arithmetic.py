"""
Digit Arithmetic — Magnitude Primitives

Беззнаковая арифметика над десятичными цифрами произвольной длины.

Представление magnitude:
- Кортеж цифр 0..9 в порядке least-significant-first (младший разряд — индекс 0)
- Такой порядок позволяет распространять перенос/заём от индекса 0
- Нормализованная форма не содержит нулей в старших разрядах;
  ноль представлен ровно одной цифрой (0,)

Модуль ничего не знает о знаке. Знаковая логика живёт в
src.core.domain.big_integer и сводится к вызовам функций отсюда.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции чистые: входы не мутируются, результат — новый tuple
2. Результаты add/subtract/multiply всегда нормализованы
3. subtract_magnitudes(a, b) требует a >= b; нарушение → ValueError
4. Умножение — школьный алгоритм O(n1 * n2), без divide-and-conquer
"""

from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (одна цифра на позицию)
DECIMAL_BASE: Final[int] = 10

# Каноническое представление нуля
ZERO_MAGNITUDE: Final[tuple[int, ...]] = (0,)

# Каноническое представление единицы
ONE_MAGNITUDE: Final[tuple[int, ...]] = (1,)

Magnitude = tuple[int, ...]


# =============================================================================
# НОРМАЛИЗАЦИЯ И ВАЛИДАЦИЯ
# =============================================================================


def normalize_magnitude(digits: Sequence[int]) -> Magnitude:
    """
    Удаление нулей в старших разрядах.

    Args:
        digits: Цифры в порядке least-significant-first (возможно с лишними нулями)

    Returns:
        Нормализованный tuple; пустой или нулевой вход → (0,)

    Examples:
        >>> normalize_magnitude([3, 2, 1, 0, 0])
        (3, 2, 1)
        >>> normalize_magnitude([0, 0, 0])
        (0,)
        >>> normalize_magnitude([])
        (0,)
    """
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1

    if end == 0:
        return ZERO_MAGNITUDE

    return tuple(digits[:end])


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """Проверка, что нормализованная magnitude равна нулю."""
    return len(digits) == 1 and digits[0] == 0


def validate_magnitude(digits: Sequence[int]) -> None:
    """
    Проверка инвариантов нормализованной magnitude.

    Args:
        digits: Цифры в порядке least-significant-first

    Raises:
        ValueError: Пустая последовательность, не-int элемент, цифра вне 0..9,
            или ноль в старшем разряде (кроме единственного нуля)
    """
    if len(digits) == 0:
        raise ValueError("Magnitude must contain at least one digit")

    for position, digit in enumerate(digits):
        # bool — подкласс int, но цифрой не является
        if not isinstance(digit, int) or isinstance(digit, bool):
            raise ValueError(
                f"Digit at position {position} must be int, got {type(digit).__name__}"
            )
        if digit < 0 or digit >= DECIMAL_BASE:
            raise ValueError(f"Digit at position {position} out of range 0..9: {digit}")

    if len(digits) > 1 and digits[-1] == 0:
        raise ValueError(
            f"Magnitude has redundant leading zero at position {len(digits) - 1}"
        )


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Трёхзначное беззнаковое сравнение нормализованных magnitudes.

    Более короткая последовательность меньше. При равной длине цифры
    сравниваются от старшего разряда к младшему.

    Args:
        a: Первая magnitude (нормализованная)
        b: Вторая magnitude (нормализованная)

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for position in range(len(a) - 1, -1, -1):
        if a[position] != b[position]:
            return -1 if a[position] < b[position] else 1

    return 0


def magnitude_less(a: Sequence[int], b: Sequence[int]) -> bool:
    """
    Беззнаковое a < b для нормализованных magnitudes.

    Examples:
        >>> magnitude_less((9,), (0, 1))   # 9 < 10
        True
        >>> magnitude_less((2, 1), (1, 2))  # 12 < 21
        True
        >>> magnitude_less((5,), (5,))
        False
    """
    return compare_magnitudes(a, b) < 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> Magnitude:
    """
    Сложение magnitudes с распространением переноса.

    Длина результата: max(len(a), len(b)) или на единицу больше
    (если остался перенос из старшего разряда).

    Args:
        a: Первое слагаемое (least-significant-first)
        b: Второе слагаемое (least-significant-first)

    Returns:
        Сумма (нормализованная)

    Examples:
        >>> add_magnitudes((9, 9), (1,))  # 99 + 1
        (0, 0, 1)
    """
    result: list[int] = []
    carry = 0

    for position in range(max(len(a), len(b))):
        total = carry
        if position < len(a):
            total += a[position]
        if position < len(b):
            total += b[position]
        carry, digit = divmod(total, DECIMAL_BASE)
        result.append(digit)

    if carry:
        result.append(carry)

    return normalize_magnitude(result)


def subtract_magnitudes(a: Sequence[int], b: Sequence[int]) -> Magnitude:
    """
    Вычитание magnitudes с распространением заёма.

    Предусловие: a >= b (как беззнаковые числа). Нули в старших
    разрядах результата удаляются; нулевая разность → (0,).

    Args:
        a: Уменьшаемое (least-significant-first)
        b: Вычитаемое (least-significant-first), b <= a

    Returns:
        Разность a - b (нормализованная)

    Raises:
        ValueError: Если a < b (после прохода остался заём)

    Examples:
        >>> subtract_magnitudes((0, 0, 1), (1,))  # 100 - 1
        (9, 9)
        >>> subtract_magnitudes((7, 4), (7, 4))
        (0,)
    """
    result: list[int] = []
    borrow = 0

    for position in range(max(len(a), len(b))):
        digit_a = a[position] if position < len(a) else 0
        digit_b = b[position] if position < len(b) else 0
        diff = digit_a - digit_b - borrow
        if diff < 0:
            diff += DECIMAL_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    if borrow:
        raise ValueError(
            "subtract_magnitudes requires minuend >= subtrahend "
            f"(got {magnitude_to_digit_string(a)} - {magnitude_to_digit_string(b)})"
        )

    return normalize_magnitude(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> Magnitude:
    """
    Школьное умножение magnitudes, O(n1 * n2).

    Аккумулятор из n1 + n2 позиций. Для каждой пары разрядов (i, j)
    в позицию i + j добавляется a[i] * b[j] плюс текущий перенос;
    остаток переноса после внутреннего цикла уходит в позицию i + n2.

    Args:
        a: Первый множитель (least-significant-first)
        b: Второй множитель (least-significant-first)

    Returns:
        Произведение (нормализованное); любой нулевой множитель → (0,)

    Examples:
        >>> multiply_magnitudes((2, 1), (2, 1))  # 12 * 12
        (4, 4, 1)
    """
    if is_zero_magnitude(a) or is_zero_magnitude(b):
        return ZERO_MAGNITUDE

    accumulator = [0] * (len(a) + len(b))

    for i, digit_a in enumerate(a):
        if digit_a == 0:
            continue
        carry = 0
        for j, digit_b in enumerate(b):
            total = accumulator[i + j] + digit_a * digit_b + carry
            carry, accumulator[i + j] = divmod(total, DECIMAL_BASE)
        position = i + len(b)
        # Перенос < DECIMAL_BASE, но позиция могла уже быть заполнена
        while carry:
            carry, accumulator[position] = divmod(
                accumulator[position] + carry, DECIMAL_BASE
            )
            position += 1

    return normalize_magnitude(accumulator)


# =============================================================================
# КОНВЕРСИЯ СТРОК
# =============================================================================


def magnitude_from_digit_string(text: str) -> Magnitude:
    """
    Конверсия строки ASCII-цифр (most-significant-first) в magnitude.

    Ведущие нули удаляются.

    Args:
        text: Непустая строка из символов '0'..'9'

    Returns:
        Нормализованная magnitude

    Raises:
        ValueError: Если строка пустая или содержит не-ASCII-цифру
    """
    if not text:
        raise ValueError("Digit string is empty")

    digits: list[int] = []
    for char in reversed(text):
        if not ("0" <= char <= "9"):
            raise ValueError(f"Invalid digit character: {char!r}")
        digits.append(ord(char) - ord("0"))

    return normalize_magnitude(digits)


def magnitude_to_digit_string(digits: Sequence[int]) -> str:
    """Рендеринг magnitude в строку цифр most-significant-first, без знака."""
    return "".join(str(digit) for digit in reversed(digits))
