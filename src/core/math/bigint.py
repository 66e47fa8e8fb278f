"""
BigInt — Целые числа произвольной точности

Модуль реализует знаковое целое неограниченной величины поверх
последовательности limbs фиксированной ширины:
- Представление: sign ∈ {-1, 0, 1} + magnitude (tuple limbs, base 2**32)
- Порядок limbs: младший limb первым (little-endian)
- Сложение/вычитание с переносом (carry/borrow) за O(max(len(x), len(y)))
- Умножение "в столбик" (schoolbook) за O(len(x) * len(y))
- Точные сравнения и конвертация в десятичную строку

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение невозможно: каждый limb строго в [0, LIMB_BASE)
2. Нормализация: старший limb никогда не равен нулю
3. Ноль представлен единственным образом: sign=0, limbs=()
4. Immutable value semantics: каждая операция создаёт новый экземпляр
5. Арифметика совпадает с математической семантикой целых чисел

Десятичная конвертация выполняется на limbs (короткое деление на 10**9),
поэтому не зависит от ограничения int_max_str_digits интерпретатора.
"""

import re
from dataclasses import dataclass
from typing import Final, Union

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Ширина одного limb в битах
LIMB_BITS: Final[int] = 32
LIMB_BYTES: Final[int] = LIMB_BITS // 8

# Основание системы счисления limbs
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Маска для выделения младшего limb
LIMB_MASK: Final[int] = LIMB_BASE - 1

# Основание и ширина десятичного чанка для конвертации str <-> BigInt
DECIMAL_CHUNK_DIGITS: Final[int] = 9
DECIMAL_CHUNK_BASE: Final[int] = 10**DECIMAL_CHUNK_DIGITS

_DECIMAL_PATTERN: Final = re.compile(r"^[+-]?[0-9]+$")


# =============================================================================
# ОПЕРАЦИИ НАД MAGNITUDE (tuple limbs, little-endian)
# =============================================================================


def _strip(limbs: list[int]) -> tuple[int, ...]:
    """Удаление старших нулевых limbs."""
    end = len(limbs)
    while end and limbs[end - 1] == 0:
        end -= 1
    return tuple(limbs[:end])


def _compare_magnitude(x: tuple[int, ...], y: tuple[int, ...]) -> int:
    """
    Сравнение модулей.

    Returns:
        -1 если |x| < |y|, 0 если равны, 1 если |x| > |y|
    """
    if len(x) != len(y):
        return -1 if len(x) < len(y) else 1

    for xi, yi in zip(reversed(x), reversed(y)):
        if xi != yi:
            return -1 if xi < yi else 1

    return 0


def _add_magnitude(x: tuple[int, ...], y: tuple[int, ...]) -> tuple[int, ...]:
    """Сложение модулей с распространением переноса."""
    if len(x) < len(y):
        x, y = y, x

    result = []
    carry = 0
    for i, xi in enumerate(x):
        total = xi + carry
        if i < len(y):
            total += y[i]
        result.append(total & LIMB_MASK)
        carry = total >> LIMB_BITS

    if carry:
        result.append(carry)

    return tuple(result)


def _subtract_magnitude(x: tuple[int, ...], y: tuple[int, ...]) -> tuple[int, ...]:
    """
    Вычитание модулей |x| - |y|.

    Требует |x| >= |y| (проверяется вызывающим кодом через _compare_magnitude).
    """
    result = []
    borrow = 0
    for i, xi in enumerate(x):
        diff = xi - borrow
        if i < len(y):
            diff -= y[i]
        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return _strip(result)


def _multiply_magnitude(x: tuple[int, ...], y: tuple[int, ...]) -> tuple[int, ...]:
    """
    Умножение модулей в столбик (schoolbook).

    Промежуточная сумма limb + xi*yj + carry не превышает LIMB_BASE**2 - 1,
    поэтому carry всегда помещается в один limb.
    """
    if not x or not y:
        return ()

    result = [0] * (len(x) + len(y))
    for i, xi in enumerate(x):
        if xi == 0:
            continue
        carry = 0
        k = i
        for yj in y:
            total = result[k] + xi * yj + carry
            result[k] = total & LIMB_MASK
            carry = total >> LIMB_BITS
            k += 1
        result[k] = carry

    return _strip(result)


def _multiply_small_add(
    limbs: tuple[int, ...], factor: int, addend: int
) -> tuple[int, ...]:
    """limbs * factor + addend для factor, addend < LIMB_BASE."""
    result = []
    carry = addend
    for limb in limbs:
        total = limb * factor + carry
        result.append(total & LIMB_MASK)
        carry = total >> LIMB_BITS

    while carry:
        result.append(carry & LIMB_MASK)
        carry >>= LIMB_BITS

    return _strip(result)


def _divmod_small(limbs: tuple[int, ...], divisor: int) -> tuple[tuple[int, ...], int]:
    """Короткое деление модуля на divisor < LIMB_BASE: (quotient, remainder)."""
    quotient = [0] * len(limbs)
    remainder = 0
    for i in range(len(limbs) - 1, -1, -1):
        current = (remainder << LIMB_BITS) | limbs[i]
        quotient[i], remainder = divmod(current, divisor)

    return _strip(quotient), remainder


# =============================================================================
# BIGINT
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class BigInt:
    """
    Знаковое целое произвольной точности.

    Immutable (frozen=True): все изменения создают новый экземпляр.
    Создаётся через from_int()/from_decimal() или как результат арифметики;
    прямой конструктор принимает уже нормализованное представление.

    Examples:
        >>> BigInt.from_int(2**64) + BigInt.from_int(1)
        BigInt(18446744073709551617)
        >>> str(BigInt.from_int(-7) * BigInt.from_int(6))
        '-42'
    """

    sign: int = 0
    limbs: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if self.sign not in (-1, 0, 1):
            raise ValueError(f"sign must be -1, 0 or 1, got {self.sign}")
        if (self.sign == 0) != (not self.limbs):
            raise ValueError(
                f"sign={self.sign} inconsistent with limbs of length {len(self.limbs)}"
            )
        if self.limbs and self.limbs[-1] == 0:
            raise ValueError("limbs must be normalized (no leading zero limb)")
        for limb in self.limbs:
            if not 0 <= limb < LIMB_BASE:
                raise ValueError(f"limb {limb} out of range [0, {LIMB_BASE})")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _from_magnitude(cls, sign: int, limbs: tuple[int, ...]) -> "BigInt":
        if not limbs:
            return ZERO
        return cls(sign, limbs)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """
        Конверсия из встроенного int.

        Args:
            value: Любое целое (знак сохраняется)

        Returns:
            Эквивалентный BigInt
        """
        if isinstance(value, BigInt):
            return value
        if not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")

        value = int(value)
        sign = (value > 0) - (value < 0)
        magnitude = abs(value)

        limb_count = -(-magnitude.bit_length() // LIMB_BITS)
        raw = magnitude.to_bytes(limb_count * LIMB_BYTES, "little")
        limbs = tuple(
            int.from_bytes(raw[i:i + LIMB_BYTES], "little")
            for i in range(0, len(raw), LIMB_BYTES)
        )

        return cls._from_magnitude(sign, limbs)

    @classmethod
    def from_decimal(cls, text: str) -> "BigInt":
        """
        Разбор десятичной строки (опциональный знак + цифры).

        Raises:
            ValueError: Если строка не является десятичным целым
        """
        text = text.strip()
        if not _DECIMAL_PATTERN.match(text):
            raise ValueError(f"invalid decimal integer literal: {text[:32]!r}")

        sign = -1 if text[0] == "-" else 1
        digits = text.lstrip("+-")

        limbs: tuple[int, ...] = ()
        head = len(digits) % DECIMAL_CHUNK_DIGITS or DECIMAL_CHUNK_DIGITS
        start = 0
        end = head
        while start < len(digits):
            chunk = digits[start:end]
            limbs = _multiply_small_add(limbs, 10 ** len(chunk), int(chunk))
            start, end = end, end + DECIMAL_CHUNK_DIGITS

        return cls._from_magnitude(sign, limbs)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInt":
        return BigInt._from_magnitude(-self.sign, self.limbs)

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        return BigInt._from_magnitude(abs(self.sign), self.limbs)

    def __add__(self, other: object) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented

        if self.sign == 0:
            return other
        if other.sign == 0:
            return self

        if self.sign == other.sign:
            return BigInt._from_magnitude(
                self.sign, _add_magnitude(self.limbs, other.limbs)
            )

        # Разные знаки: вычитаем меньший модуль из большего
        order = _compare_magnitude(self.limbs, other.limbs)
        if order == 0:
            return ZERO
        if order > 0:
            return BigInt._from_magnitude(
                self.sign, _subtract_magnitude(self.limbs, other.limbs)
            )
        return BigInt._from_magnitude(
            other.sign, _subtract_magnitude(other.limbs, self.limbs)
        )

    __radd__ = __add__

    def __sub__(self, other: object) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: object) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other + (-self)

    def __mul__(self, other: object) -> "BigInt":
        other = _coerce(other)
        if other is None:
            return NotImplemented

        if self.sign == 0 or other.sign == 0:
            return ZERO

        return BigInt._from_magnitude(
            self.sign * other.sign, _multiply_magnitude(self.limbs, other.limbs)
        )

    __rmul__ = __mul__

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def _compare(self, other: "BigInt") -> int:
        if self.sign != other.sign:
            return -1 if self.sign < other.sign else 1
        return self.sign * _compare_magnitude(self.limbs, other.limbs)

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.sign == other.sign and self.limbs == other.limbs

    def __lt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) >= 0

    def __hash__(self) -> int:
        # Согласовано с int: BigInt.from_int(k) == k => равные хэши
        return hash(int(self))

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return self.sign != 0

    def __int__(self) -> int:
        raw = b"".join(limb.to_bytes(LIMB_BYTES, "little") for limb in self.limbs)
        return self.sign * int.from_bytes(raw, "little")

    __index__ = __int__

    def __str__(self) -> str:
        if self.sign == 0:
            return "0"

        chunks = []
        magnitude = self.limbs
        while magnitude:
            magnitude, chunk = _divmod_small(magnitude, DECIMAL_CHUNK_BASE)
            chunks.append(chunk)

        head = str(chunks[-1])
        tail = "".join(
            str(chunk).zfill(DECIMAL_CHUNK_DIGITS) for chunk in reversed(chunks[:-1])
        )
        return ("-" if self.sign < 0 else "") + head + tail

    def __repr__(self) -> str:
        return f"BigInt({self})"

    def bit_length(self) -> int:
        """Количество бит модуля (0 для нуля), как int.bit_length()."""
        if not self.limbs:
            return 0
        return (len(self.limbs) - 1) * LIMB_BITS + self.limbs[-1].bit_length()


ZERO: Final[BigInt] = BigInt()
ONE: Final[BigInt] = BigInt(1, (1,))

IntLike = Union[BigInt, int]


def _coerce(value: object) -> Union[BigInt, None]:
    """Приведение операнда к BigInt; None для неподдерживаемых типов."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int):
        return BigInt.from_int(value)
    return None


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ ИНТЕРФЕЙС
# =============================================================================


def from_small_integer(k: int) -> BigInt:
    """
    Создание BigInt из небольшого неотрицательного литерала (0, 1).

    Используется для инициализации порождающей матрицы.
    """
    if k < 0:
        raise ValueError(f"small integer literal must be non-negative, got {k}")
    return BigInt.from_int(k)


def add(x: IntLike, y: IntLike) -> BigInt:
    """Точная сумма x + y для любой комбинации знаков."""
    return BigInt.from_int(x) + y


def multiply(x: IntLike, y: IntLike) -> BigInt:
    """Точное произведение x * y (schoolbook)."""
    return BigInt.from_int(x) * y


def equals(x: IntLike, y: IntLike) -> bool:
    """Точное сравнение значений на равенство."""
    return BigInt.from_int(x) == y


def less_than(x: IntLike, y: IntLike) -> bool:
    """Точная проверка x < y."""
    return BigInt.from_int(x) < y
