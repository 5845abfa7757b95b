"""
DynamicDomain — Домен с границами, заданными во время выполнения

Immutable Pydantic модель: value_type, extent_type и две границы.
Границы приводятся к value_type при создании; extent вычисляется при каждом
обращении в extent_type (по умолчанию value_type.widen()).

Через make_domain(tag) границы статического домена «экспортируются» в
обычное значение, которое можно передавать в runtime-конвейеры и
сериализовать (to_dict / from_dict по контракту dynamic_domain).
"""

from typing import Any

import structlog
from pydantic import BaseModel, Field, model_validator

from bounded_cast.core.contracts import validate_dynamic_domain
from bounded_cast.core.domain.base import Domain
from bounded_cast.core.domain.static import StaticDomain
from bounded_cast.core.math.numeric_types import NumericType, Number
from bounded_cast.core.math.numerical_safeguards import compute_extent, is_valid_float
from bounded_cast.errors import DomainKindError

logger = structlog.get_logger("bounded_cast.domain")


class DynamicDomain(BaseModel, Domain):
    """
    Домен [lower, upper] с типом значений value_type.

    Immutable модель (frozen=True): изменение границ = новый экземпляр.

    lower > upper допускается (с предупреждением в лог), но конверсия через
    такой домен не определена. lower == upper допускается, но как source
    domain приводит к DegenerateDomainError.
    """

    value_type: NumericType = Field(..., description="Тип значений домена")
    extent_type: NumericType = Field(..., description="Тип, в котором считается upper - lower")
    lower: int | float = Field(..., description="Нижняя граница (в value_type)")
    upper: int | float = Field(..., description="Верхняя граница (в value_type)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def cast_bounds(cls, data: Any) -> Any:
        """
        Приведение границ к value_type и extent_type по умолчанию.

        Граница должна быть конечной и представимой в value_type:
        wraparound при создании домена не допускается.
        """
        if not isinstance(data, dict):
            return data

        data = dict(data)
        value_type = NumericType(data.get("value_type"))
        if value_type is NumericType.EXACT:
            raise ValueError("'exact' can only be used as an extent type")
        data["value_type"] = value_type
        if data.get("extent_type") is None:
            data["extent_type"] = value_type.widen()

        for key in ("lower", "upper"):
            bound = data.get(key)
            if not isinstance(bound, (int, float)) or isinstance(bound, bool):
                continue
            if not is_valid_float(bound):
                raise ValueError(f"{key} must be finite, got {bound}")
            if not value_type.contains(bound):
                raise ValueError(
                    f"{key} {bound} is not representable in {value_type.value}"
                )
            data[key] = value_type.cast(bound)
        return data

    @model_validator(mode="after")
    def check_extent(self) -> "DynamicDomain":
        """
        Проверка, что extent помещается в extent_type.

        ExtentOverflowError не перехватывается Pydantic: это дефект выбора
        extent_type, а не невалидные данные.
        """
        compute_extent(self.lower, self.upper, self.extent_type)
        if self.lower > self.upper:
            logger.warning(
                "domain.inverted",
                lower=self.lower,
                upper=self.upper,
                value_type=self.value_type.value,
            )
        return self

    def min(self) -> Number:
        return self.lower

    def max(self) -> Number:
        return self.upper

    def extent(self) -> Number:
        return compute_extent(self.lower, self.upper, self.extent_type)

    def __str__(self) -> str:
        return f"dynamic[{self.value_type.value}] (min: {self.lower}, max: {self.upper})"

    # =========================================================================
    # СЕРИАЛИЗАЦИЯ
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Дескриптор домена как JSON-совместимый dict (контракт dynamic_domain)"""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DynamicDomain":
        """
        Создание домена из внешних данных.

        Raises:
            jsonschema.ValidationError: Данные не соответствуют контракту
            pydantic.ValidationError: Граница не представима в value_type
        """
        validate_dynamic_domain(data)
        return cls.model_validate(data)


# =============================================================================
# ФАБРИКА
# =============================================================================


def make_domain(
    lower: Number | StaticDomain | DynamicDomain,
    upper: Number | None = None,
    value_type: NumericType | str | None = None,
    extent_type: NumericType | str | None = None,
) -> DynamicDomain:
    """
    Создание dynamic domain.

    Два варианта вызова:
        make_domain(lower, upper, value_type=None, extent_type=None)
        make_domain(static_tag)

    Args:
        lower: Нижняя граница, либо статический тег для reify
        upper: Верхняя граница (обязательна, если lower — число)
        value_type: Тип значений (default: int → int64, float → float64)
        extent_type: Тип extent (default: value_type.widen())

    Returns:
        DynamicDomain

    Raises:
        DomainKindError: value_type == exact
        TypeError: Не передана верхняя граница

    Examples:
        >>> make_domain(-10, 50, "int8").extent()
        60
        >>> make_domain(float01).max()
        1.0
    """
    if isinstance(lower, DynamicDomain):
        return lower

    if isinstance(lower, StaticDomain):
        return DynamicDomain(
            value_type=lower.value_type,
            extent_type=lower.extent_type,
            lower=lower.min(),
            upper=lower.max(),
        )

    if upper is None:
        raise TypeError("make_domain() requires both bounds or a static domain")

    if value_type is None:
        value_type = NumericType.infer(lower, upper)
    value_type = NumericType(value_type)
    if value_type is NumericType.EXACT:
        raise DomainKindError("'exact' can only be used as an extent type")

    return DynamicDomain(
        value_type=value_type,
        extent_type=extent_type,
        lower=lower,
        upper=upper,
    )
