"""
bounded_cast — конверсия значений между ограниченными числовыми доменами

Значение из [min, max] source domain clamp-ится и линейно масштабируется в
[min', max'] target domain. Домены бывают статическими (теги: uint8, float01,
unsigned_int(12), …) и динамическими (make_domain(lower, upper)), и
смешиваются в любой комбинации:

    >>> from bounded_cast import convert, float01, uint8, unsigned_int
    >>> convert(0.5, float01, uint8)
    127
    >>> convert(6000, unsigned_int(12), uint8)
    255
"""

from bounded_cast.converter import (
    convert,
    convert_dynamic,
    convert_dynamic_to_static,
    convert_static,
    convert_static_to_dynamic,
)
from bounded_cast.core.domain import (
    Domain,
    DynamicDomain,
    StaticDomain,
    arithmetic,
    extent_of,
    extent_type_of,
    float01,
    float11,
    float32,
    float64,
    float_0_and_0_5,
    int8,
    int16,
    int32,
    int64,
    make_domain,
    max_of,
    min_of,
    native,
    signed_int,
    static_domain_from_dict,
    uint8,
    uint16,
    uint32,
    uint64,
    unsigned_int,
    value_type_of,
)
from bounded_cast.core.math import NumericType, domain_convert
from bounded_cast.errors import (
    BoundedCastError,
    DegenerateDomainError,
    DomainKindError,
    ExtentOverflowError,
)

__version__ = "0.1.0"

__all__ = [
    # Conversion
    "convert",
    "convert_static",
    "convert_dynamic",
    "convert_static_to_dynamic",
    "convert_dynamic_to_static",
    "domain_convert",
    # Domains
    "Domain",
    "StaticDomain",
    "DynamicDomain",
    "NumericType",
    "make_domain",
    "arithmetic",
    "native",
    "unsigned_int",
    "signed_int",
    "static_domain_from_dict",
    "min_of",
    "max_of",
    "extent_of",
    "value_type_of",
    "extent_type_of",
    # Predefined tags
    "int8",
    "uint8",
    "int16",
    "uint16",
    "int32",
    "uint32",
    "int64",
    "uint64",
    "float32",
    "float64",
    "float01",
    "float11",
    "float_0_and_0_5",
    # Errors
    "BoundedCastError",
    "DegenerateDomainError",
    "DomainKindError",
    "ExtentOverflowError",
]
