"""
Rescale — Линейное преобразование значения между ограниченными диапазонами

Единственное ядро конверсии, которое используют все варианты dispatch
(static/dynamic в любой комбинации).

ФОРМУЛЫ:
    bounded  = clamp(value, src_min, src_max)
    scaled   = (bounded - src_min) * dst_extent
    rescaled = dst_min + scaled / src_extent
    result   = cast(rescaled, dst_type)

Целочисленный путь (bounded, src_min, src_extent и dst_extent — int):
    деление усекает к нулю, затем прибавляется dst_min.
Смешанный путь (хотя бы один операнд float/Fraction):
    все операнды точно поднимаются в Fraction, единственное округление —
    финальный cast в dst_type. Поэтому src_min → dst_min и src_max → dst_max
    отображаются точно.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Out-of-range вход clamp-ится, а не вызывает ошибку
2. src_extent == 0 → DegenerateDomainError (значение-заглушка не возвращается)
3. Преобразование строго аффинное: никаких кривых (gamma, log)
"""

import structlog

from bounded_cast.core.math.numeric_types import NumericType, Number
from bounded_cast.core.math.numerical_safeguards import (
    clamp,
    is_integral_number,
    to_exact,
    trunc_div,
)
from bounded_cast.errors import DegenerateDomainError

logger = structlog.get_logger("bounded_cast.rescale")


def domain_convert(
    value: Number,
    src_min: Number,
    src_max: Number,
    src_extent: Number,
    dst_min: Number,
    dst_extent: Number,
    dst_type: NumericType,
) -> Number:
    """
    Clamp + линейный rescale значения из [src_min, src_max] в целевой диапазон.

    Args:
        value: Значение source domain (вне диапазона — clamp)
        src_min: Нижняя граница source domain
        src_max: Верхняя граница source domain
        src_extent: src_max - src_min в extent_type source domain
        dst_min: Нижняя граница target domain
        dst_extent: dst_max - dst_min в extent_type target domain
        dst_type: value_type target domain (тип результата)

    Returns:
        Значение target domain, приведённое к dst_type

    Raises:
        DegenerateDomainError: src_extent == 0

    Examples:
        >>> domain_convert(0.5, 0.0, 1.0, 1.0, 0, 255, NumericType.UINT8)
        127
        >>> domain_convert(6000, 0, 4095, 4095, 0, 255, NumericType.UINT8)
        255
    """
    bounded = clamp(value, src_min, src_max)

    if src_extent == 0:
        logger.error(
            "convert.degenerate_domain",
            src_min=src_min,
            src_max=src_max,
            value=value,
        )
        raise DegenerateDomainError(
            f"Source domain [{src_min}, {src_max}] has zero extent: "
            f"conversion is undefined (division by zero)"
        )

    integral = all(
        is_integral_number(operand)
        for operand in (bounded, src_min, src_extent, dst_extent)
    )

    if integral:
        scaled = (bounded - src_min) * dst_extent
        quotient = trunc_div(scaled, src_extent)
    else:
        scaled = (to_exact(bounded) - to_exact(src_min)) * to_exact(dst_extent)
        quotient = scaled / to_exact(src_extent)

    if integral and is_integral_number(dst_min):
        rescaled = dst_min + quotient
    else:
        rescaled = to_exact(dst_min) + quotient

    return dst_type.cast(rescaled)
