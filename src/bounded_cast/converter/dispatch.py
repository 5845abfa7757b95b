"""
Converter Dispatch — Конверсия значения между любыми двумя доменами

Все варианты делегируют единственному ядру domain_convert и отличаются только
тем, откуда берутся min / max / extent:

1. static → static: из тегов; одинаковые теги → значение возвращается как есть
2. dynamic → dynamic: из value objects в момент вызова
3. static → dynamic: source из тега, target из value object
4. dynamic → static: source из value object, target из тега

convert() принимает любой Domain с каждой стороны (tagged union).
Именованные варианты проверяют, что передан домен нужного вида.
"""

import math

from bounded_cast.core.domain.base import Domain
from bounded_cast.core.domain.dynamic import DynamicDomain
from bounded_cast.core.domain.static import StaticDomain
from bounded_cast.core.math.numeric_types import NumericType, Number
from bounded_cast.core.math.numerical_safeguards import is_integral_number, is_valid_float
from bounded_cast.core.math.rescale import domain_convert
from bounded_cast.errors import DomainKindError


def _coerce_input(value: Number, value_type: NumericType) -> Number:
    """
    Приведение входа к целому value_type source domain.

    Дробная часть конечного float отбрасывается (усечение к нулю) до clamp.
    Inf/NaN не трогаются: clamp насыщает их до границ.
    """
    if value_type.is_integral and not is_integral_number(value) and is_valid_float(value):
        return math.trunc(value)
    return value


def _rescale(value: Number, source: Domain, target: Domain) -> Number:
    return domain_convert(
        _coerce_input(value, source.value_type),
        source.min(),
        source.max(),
        source.extent(),
        target.min(),
        target.extent(),
        target.value_type,
    )


def _require(domain: Domain, kind: type, role: str) -> None:
    if not isinstance(domain, kind):
        raise DomainKindError(
            f"{role} domain must be a {kind.__name__}, got {type(domain).__name__}"
        )


# =============================================================================
# TAGGED-UNION DISPATCH
# =============================================================================


def convert(value: Number, source: Domain, target: Domain) -> Number:
    """
    Конверсия значения source domain в target domain.

    Значение clamp-ится к [source.min(), source.max()] и линейно
    масштабируется в [target.min(), target.max()]. Результат имеет
    value_type target domain (целые усекаются к нулю).

    Args:
        value: Значение source domain
        source: Домен, которому принадлежит value
        target: Домен результата

    Returns:
        Значение target domain

    Raises:
        DegenerateDomainError: source.extent() == 0

    Examples:
        >>> convert(0.5, float01, uint8)  # doctest: +SKIP
        127
    """
    if source.is_static and source == target:
        return value
    return _rescale(value, source, target)


# =============================================================================
# ИМЕНОВАННЫЕ ВАРИАНТЫ
# =============================================================================


def convert_static(value: Number, source: StaticDomain, target: StaticDomain) -> Number:
    """static → static. Одинаковые теги: значение проходит без изменений."""
    _require(source, StaticDomain, "Source")
    _require(target, StaticDomain, "Target")
    return convert(value, source, target)


def convert_dynamic(value: Number, source: DynamicDomain, target: DynamicDomain) -> Number:
    """dynamic → dynamic"""
    _require(source, DynamicDomain, "Source")
    _require(target, DynamicDomain, "Target")
    return _rescale(value, source, target)


def convert_static_to_dynamic(
    value: Number, source: StaticDomain, target: DynamicDomain
) -> Number:
    """static → dynamic"""
    _require(source, StaticDomain, "Source")
    _require(target, DynamicDomain, "Target")
    return _rescale(value, source, target)


def convert_dynamic_to_static(
    value: Number, source: DynamicDomain, target: StaticDomain
) -> Number:
    """dynamic → static"""
    _require(source, DynamicDomain, "Source")
    _require(target, StaticDomain, "Target")
    return _rescale(value, source, target)
