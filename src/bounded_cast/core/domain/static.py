"""
StaticDomain — Домены с границами, зафиксированными при определении

Статический домен — неизменяемый тег: границы полностью определяются его
параметрами (value_type, литеральные Min/Max, rational scale), экземпляр не
несёт состояния. Фабрики кэшируются, поэтому одинаковые параметры дают один и
тот же объект тега: unsigned_int(12) is unsigned_int(12).

Предопределённые домены:
- Native: полный конечный диапазон каждого fixed-width типа (int8 … float64)
- unsigned_int(N): [0, 2^N - 1]
- signed_int(N): [-(2^(N-1) - 1), 2^(N-1) - 1] — симметричный, на единицу уже
  обычного two's-complement диапазона снизу
- float01 = [0, 1], float11 = [-1, 1], float_0_and_0_5 = [0, 1] * 1/2

ФОРМУЛЫ:
    min = cast(scale.numerator * Min / scale.denominator, value_type)
    max = cast(scale.numerator * Max / scale.denominator, value_type)
    (для целого value_type масштабированная граница усекается к нулю)
"""

from dataclasses import dataclass, field
from fractions import Fraction
from functools import lru_cache
from typing import Any, Final

from bounded_cast.core.contracts import validate_static_domain
from bounded_cast.core.domain.base import Domain
from bounded_cast.core.math.numeric_types import NumericType, Number
from bounded_cast.core.math.numerical_safeguards import compute_extent
from bounded_cast.errors import DomainKindError

# =============================================================================
# EXTENT ТИПЫ ПО УМОЛЧАНИЮ
# =============================================================================

# extent для native целых и unsigned_int(N): самый широкий беззнаковый тип
INTEGRAL_EXTENT_TYPE: Final[NumericType] = NumericType.UINT64

# extent для signed_int(N): самый широкий знаковый тип
SIGNED_EXTENT_TYPE: Final[NumericType] = NumericType.INT64

# value_type для float-тегов float01 / float11 / float_0_and_0_5
FLOAT_TAG_VALUE_TYPE: Final[NumericType] = NumericType.FLOAT32


# =============================================================================
# STATIC DOMAIN
# =============================================================================


@dataclass(frozen=True)
class StaticDomain(Domain):
    """
    Неизменяемый тег домена.

    Границы и extent вычисляются один раз при создании тега. Ошибки
    определения (extent не помещается в extent_type, граница не представима
    в value_type) обнаруживаются здесь же, а не во время конверсии.

    min <= max не проверяется: это контракт определения тега.
    """

    name: str
    value_type: NumericType
    extent_type: NumericType
    lower: Number
    upper: Number
    scale: Fraction = Fraction(1)

    _min: Number = field(init=False, repr=False, compare=False)
    _max: Number = field(init=False, repr=False, compare=False)
    _extent: Number = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.value_type is NumericType.EXACT:
            raise DomainKindError(
                f"Domain '{self.name}': 'exact' can only be used as an extent type"
            )
        if self.scale <= 0:
            raise ValueError(f"Domain '{self.name}': scale must be positive, got {self.scale}")

        bounds = []
        for literal in (self.lower, self.upper):
            exact = Fraction(literal) * self.scale
            if not self.value_type.contains(exact):
                raise ValueError(
                    f"Domain '{self.name}': bound {exact} is not representable "
                    f"in {self.value_type.value}"
                )
            bounds.append(self.value_type.cast(exact))

        object.__setattr__(self, "_min", bounds[0])
        object.__setattr__(self, "_max", bounds[1])
        object.__setattr__(
            self, "_extent", compute_extent(bounds[0], bounds[1], self.extent_type)
        )

    @property
    def is_static(self) -> bool:
        return True

    def min(self) -> Number:
        return self._min

    def max(self) -> Number:
        return self._max

    def extent(self) -> Number:
        return self._extent

    def __str__(self) -> str:
        return f"{self.name} (min: {self._min}, max: {self._max})"

    def to_dict(self) -> dict[str, Any]:
        """Определение тега как JSON-совместимый dict (контракт static_domain)"""
        return {
            "name": self.name,
            "value_type": self.value_type.value,
            "extent_type": self.extent_type.value,
            "lower": self.lower,
            "upper": self.upper,
            "scale_numerator": self.scale.numerator,
            "scale_denominator": self.scale.denominator,
        }


# =============================================================================
# ФАБРИКИ ТЕГОВ
# =============================================================================


def arithmetic(
    value_type: NumericType,
    lower: Number,
    upper: Number,
    extent_type: NumericType | None = None,
    scale: Fraction = Fraction(1),
    name: str | None = None,
) -> StaticDomain:
    """
    Тег для value_type, ограниченного [lower * scale, upper * scale].

    Args:
        value_type: Тип значений
        lower: Литеральная нижняя граница (до масштабирования)
        upper: Литеральная верхняя граница (до масштабирования)
        extent_type: Тип extent (default: value_type.widen())
        scale: Положительный рациональный множитель обеих границ
        name: Имя тега (default: строится из параметров)

    Returns:
        Кэшированный StaticDomain: параметры сравниваются после подстановки
        значений по умолчанию, поэтому явный extent_type, равный
        value_type.widen(), даёт тот же объект тега

    Raises:
        ExtentOverflowError: extent не помещается в extent_type
        DomainKindError: value_type == EXACT

    Examples:
        >>> arithmetic(NumericType.FLOAT32, 0, 1, scale=Fraction(1, 2)).max()
        0.5
    """
    if extent_type is None:
        extent_type = value_type.widen()
    if name is None:
        name = f"{value_type.value}[{lower}, {upper}]"
        if scale != 1:
            name += f"*{scale}"
    return _cached_tag(name, value_type, extent_type, lower, upper, Fraction(scale))


@lru_cache(maxsize=None)
def _cached_tag(
    name: str,
    value_type: NumericType,
    extent_type: NumericType,
    lower: Number,
    upper: Number,
    scale: Fraction,
) -> StaticDomain:
    return StaticDomain(
        name=name,
        value_type=value_type,
        extent_type=extent_type,
        lower=lower,
        upper=upper,
        scale=scale,
    )


def native(value_type: NumericType) -> StaticDomain:
    """
    Домен полного конечного диапазона fixed-width типа.

    Целые: extent в INTEGRAL_EXTENT_TYPE. Float: extent в value_type.widen()
    (float32 → float64, float64 → exact).
    """
    if value_type.is_integral:
        extent_type = INTEGRAL_EXTENT_TYPE
    else:
        extent_type = value_type.widen()
    return arithmetic(
        value_type,
        value_type.lowest,
        value_type.highest,
        extent_type=extent_type,
        name=value_type.value,
    )


def _smallest_type_holding(highest: int) -> NumericType:
    for candidate in (NumericType.INT32, NumericType.INT64, NumericType.UINT64):
        if candidate.contains(highest):
            return candidate
    raise ValueError(f"No fixed-width type holds {highest}")


def unsigned_int(bits: int) -> StaticDomain:
    """
    N-битное беззнаковое целое: [0, 2^N - 1].

    Например, 12-битный отсчёт АЦП переводится в float от 0 до 1 так:
    convert(value, unsigned_int(12), float01).

    Raises:
        ValueError: bits вне [1, 64]
    """
    if not 1 <= bits <= 64:
        raise ValueError(f"unsigned_int bits must be in [1, 64], got {bits}")
    highest = (1 << bits) - 1
    return arithmetic(
        _smallest_type_holding(highest),
        0,
        highest,
        extent_type=INTEGRAL_EXTENT_TYPE,
        name=f"unsigned_int<{bits}>",
    )


def signed_int(bits: int) -> StaticDomain:
    """
    N-битное знаковое целое: [-(2^(N-1) - 1), 2^(N-1) - 1].

    Диапазон симметричен: значение -2^(N-1) в домен не входит.
    Extent считается в SIGNED_EXTENT_TYPE; для N = 64 extent 2^64 - 2 в int64
    не помещается и считается в INTEGRAL_EXTENT_TYPE.

    Raises:
        ValueError: bits вне [2, 64]
    """
    if not 2 <= bits <= 64:
        raise ValueError(f"signed_int bits must be in [2, 64], got {bits}")
    highest = (1 << (bits - 1)) - 1
    return arithmetic(
        _smallest_type_holding(highest),
        -highest,
        highest,
        extent_type=SIGNED_EXTENT_TYPE if bits < 64 else INTEGRAL_EXTENT_TYPE,
        name=f"signed_int<{bits}>",
    )


def static_domain_from_dict(data: dict[str, Any]) -> StaticDomain:
    """
    Определение тега из внешних данных (контракт static_domain).

    Raises:
        jsonschema.ValidationError: Данные не соответствуют контракту
        ExtentOverflowError: extent не помещается в extent_type
    """
    validate_static_domain(data)
    extent_type = data.get("extent_type")
    return arithmetic(
        NumericType(data["value_type"]),
        data["lower"],
        data["upper"],
        extent_type=NumericType(extent_type) if extent_type is not None else None,
        scale=Fraction(data.get("scale_numerator", 1), data.get("scale_denominator", 1)),
        name=data.get("name"),
    )


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ ДОМЕНЫ
# =============================================================================

int8: Final[StaticDomain] = native(NumericType.INT8)
uint8: Final[StaticDomain] = native(NumericType.UINT8)
int16: Final[StaticDomain] = native(NumericType.INT16)
uint16: Final[StaticDomain] = native(NumericType.UINT16)
int32: Final[StaticDomain] = native(NumericType.INT32)
uint32: Final[StaticDomain] = native(NumericType.UINT32)
int64: Final[StaticDomain] = native(NumericType.INT64)
uint64: Final[StaticDomain] = native(NumericType.UINT64)
float32: Final[StaticDomain] = native(NumericType.FLOAT32)
float64: Final[StaticDomain] = native(NumericType.FLOAT64)

# float между 0 и 1
float01: Final[StaticDomain] = arithmetic(FLOAT_TAG_VALUE_TYPE, 0, 1, name="float01")

# float между -1 и 1
float11: Final[StaticDomain] = arithmetic(FLOAT_TAG_VALUE_TYPE, -1, 1, name="float11")

# float между 0 и 0.5: границы [0, 1], масштабированные на 1/2
float_0_and_0_5: Final[StaticDomain] = arithmetic(
    FLOAT_TAG_VALUE_TYPE, 0, 1, scale=Fraction(1, 2), name="float_0_and_0_5"
)
