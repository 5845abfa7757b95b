"""
Domain descriptors: статические теги и dynamic domain value objects.
"""

from bounded_cast.core.domain.base import (
    Domain,
    extent_of,
    extent_type_of,
    max_of,
    min_of,
    value_type_of,
)
from bounded_cast.core.domain.dynamic import DynamicDomain, make_domain
from bounded_cast.core.domain.static import (
    FLOAT_TAG_VALUE_TYPE,
    INTEGRAL_EXTENT_TYPE,
    SIGNED_EXTENT_TYPE,
    StaticDomain,
    arithmetic,
    float01,
    float11,
    float32,
    float64,
    float_0_and_0_5,
    int8,
    int16,
    int32,
    int64,
    native,
    signed_int,
    static_domain_from_dict,
    uint8,
    uint16,
    uint32,
    uint64,
    unsigned_int,
)

__all__ = [
    # Base
    "Domain",
    "min_of",
    "max_of",
    "extent_of",
    "value_type_of",
    "extent_type_of",
    # Static
    "StaticDomain",
    "INTEGRAL_EXTENT_TYPE",
    "SIGNED_EXTENT_TYPE",
    "FLOAT_TAG_VALUE_TYPE",
    "arithmetic",
    "native",
    "unsigned_int",
    "signed_int",
    "static_domain_from_dict",
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
    # Dynamic
    "DynamicDomain",
    "make_domain",
]
