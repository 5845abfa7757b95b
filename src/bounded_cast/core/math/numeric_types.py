"""
Numeric Types — Fixed-width типы значений и extent

Python int не ограничен по ширине, а float всегда double. Чтобы границы доменов
и результат конверсии вели себя как значения fixed-width типа, каждый домен
несёт NumericType:
- value_type: представление значений домена (int8 … uint64, float32, float64)
- extent_type: тип, в котором считается max - min без переполнения

Тип EXACT (рациональное число без ограничения ширины) допустим только как
extent_type: он шире любого fixed-width типа.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. cast() для целых типов усекает к нулю (как static_cast из float)
2. cast() для float32 округляет к ближайшему IEEE single
3. widen() всегда возвращает тип строго шире или другой знаковости
"""

import math
import struct
import sys
from enum import Enum
from fractions import Fraction
from typing import Final, Union

Number = Union[int, float, Fraction]

_FLOAT32_MAX: Final[float] = struct.unpack("<f", bytes.fromhex("ffff7f7f"))[0]
_FLOAT64_MAX: Final[float] = sys.float_info.max

# Мантисса float32: 24 значащих бита; наименьший нормализованный порядок 2^-126
_FLOAT32_MANTISSA_BITS: Final[int] = 24
_FLOAT32_MIN_EXPONENT: Final[int] = -126


def _round_to_float32(value: Number) -> float:
    """
    Округление точного значения к ближайшему IEEE single (ties to even).

    float переводится через struct напрямую: double → single округляется один
    раз. int и Fraction округляются по 24 значащим битам сразу, без
    промежуточного double, иначе середина между single может быть
    округлена дважды.

    Raises:
        OverflowError: Значение округляется за пределы FLOAT32
    """
    if isinstance(value, float):
        return struct.unpack("<f", struct.pack("<f", value))[0]

    exact = Fraction(value)
    if exact == 0:
        return 0.0
    magnitude = abs(exact)

    # 2^exponent <= magnitude < 2^(exponent + 1)
    exponent = magnitude.numerator.bit_length() - magnitude.denominator.bit_length()
    if magnitude < Fraction(2) ** exponent:
        exponent -= 1

    ulp_exponent = max(exponent, _FLOAT32_MIN_EXPONENT) - (_FLOAT32_MANTISSA_BITS - 1)
    mantissa = round(magnitude / Fraction(2) ** ulp_exponent)
    rounded = math.ldexp(mantissa, ulp_exponent)
    if rounded > _FLOAT32_MAX:
        raise OverflowError(f"{value} is out of range for float32")
    return rounded if exact > 0 else -rounded


class NumericType(str, Enum):
    """Fixed-width арифметический тип"""

    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    EXACT = "exact"

    @property
    def is_integral(self) -> bool:
        return self in _INTEGRAL_BITS

    @property
    def is_floating(self) -> bool:
        return self in (NumericType.FLOAT32, NumericType.FLOAT64)

    @property
    def is_signed(self) -> bool:
        return not self.value.startswith("uint")

    @property
    def bits(self) -> int | None:
        """Ширина в битах (None для EXACT)"""
        if self is NumericType.EXACT:
            return None
        if self.is_floating:
            return 32 if self is NumericType.FLOAT32 else 64
        return _INTEGRAL_BITS[self]

    @property
    def lowest(self) -> Number | None:
        """
        Наименьшее конечное значение типа.

        Для float это -max, а не наименьшее положительное нормализованное.
        Для EXACT — None (не ограничен).
        """
        if self is NumericType.EXACT:
            return None
        if self.is_floating:
            return -self.highest
        if self.is_signed:
            return -(1 << (_INTEGRAL_BITS[self] - 1))
        return 0

    @property
    def highest(self) -> Number | None:
        """Наибольшее конечное значение типа (None для EXACT)"""
        if self is NumericType.EXACT:
            return None
        if self is NumericType.FLOAT32:
            return _FLOAT32_MAX
        if self is NumericType.FLOAT64:
            return _FLOAT64_MAX
        bits = _INTEGRAL_BITS[self]
        if self.is_signed:
            return (1 << (bits - 1)) - 1
        return (1 << bits) - 1

    def contains(self, value: Number) -> bool:
        """
        Представимо ли значение в типе без переполнения.

        Для целых типов дробная часть не проверяется: проверяется только диапазон.
        """
        if isinstance(value, float) and not math.isfinite(value):
            return False
        if self is NumericType.EXACT:
            return True
        return self.lowest <= value <= self.highest

    def cast(self, value: Number) -> Number:
        """
        Приведение значения к типу.

        Args:
            value: int, float или Fraction

        Returns:
            - Целые типы: усечение к нулю, затем wrap по модулю 2^bits
            - FLOAT32: ближайшее IEEE single (как Python float), одно округление
            - FLOAT64: float(value)
            - EXACT: int без изменений, иначе точный Fraction

        Raises:
            OverflowError: float вне диапазона FLOAT32 или inf при приведении к целому
            ValueError: NaN при приведении к целому

        Examples:
            >>> NumericType.UINT8.cast(127.5)
            127
            >>> NumericType.INT8.cast(-0.5)
            0
            >>> NumericType.UINT8.cast(256)
            0
        """
        if self.is_integral:
            truncated = math.trunc(value)
            span = 1 << _INTEGRAL_BITS[self]
            return (truncated - self.lowest) % span + self.lowest
        if self is NumericType.FLOAT32:
            return _round_to_float32(value)
        if self is NumericType.FLOAT64:
            return float(value)
        if isinstance(value, int):
            return value
        return Fraction(value)

    def widen(self) -> "NumericType":
        """
        extent_type по умолчанию для dynamic domain с этим value_type.

        Возвращаемый тип строго шире (или другой знаковости) и вмещает
        max - min для любых двух значений типа.
        """
        return _WIDENING[self]

    @classmethod
    def infer(cls, *values: Number) -> "NumericType":
        """
        Вывод value_type по Python-значениям: int → INT64, иначе FLOAT64.

        bool отвергается: это не числовой домен.
        """
        for value in values:
            if isinstance(value, bool):
                raise TypeError(f"bool is not a numeric domain value: {value!r}")
        if all(isinstance(value, int) for value in values):
            return cls.INT64
        return cls.FLOAT64


_INTEGRAL_BITS: Final[dict[NumericType, int]] = {
    NumericType.INT8: 8,
    NumericType.UINT8: 8,
    NumericType.INT16: 16,
    NumericType.UINT16: 16,
    NumericType.INT32: 32,
    NumericType.UINT32: 32,
    NumericType.INT64: 64,
    NumericType.UINT64: 64,
}

_WIDENING: Final[dict[NumericType, NumericType]] = {
    NumericType.INT8: NumericType.INT64,
    NumericType.UINT8: NumericType.INT64,
    NumericType.INT16: NumericType.INT64,
    NumericType.UINT16: NumericType.INT64,
    NumericType.INT32: NumericType.INT64,
    NumericType.UINT32: NumericType.INT64,
    # int64: span до 2^64 - 1 помещается в беззнаковый 64-bit
    NumericType.INT64: NumericType.UINT64,
    NumericType.UINT64: NumericType.EXACT,
    NumericType.FLOAT32: NumericType.FLOAT64,
    NumericType.FLOAT64: NumericType.EXACT,
    NumericType.EXACT: NumericType.EXACT,
}
