"""
Contract Validation Module

Валидация JSON дескрипторов доменов bounded_cast.
"""

from .validators import (
    ContractValidator,
    DynamicDomainValidator,
    SchemaLoader,
    StaticDomainValidator,
    validate_dynamic_domain,
    validate_static_domain,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DynamicDomainValidator",
    "StaticDomainValidator",
    # Functions
    "validate_dynamic_domain",
    "validate_static_domain",
]
