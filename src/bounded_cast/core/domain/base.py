"""
Domain — Абстракция ограниченного числового диапазона

Domain = value_type + [min, max] + extent_type.

Два варианта:
- StaticDomain: границы зафиксированы при определении тега (static.py)
- DynamicDomain: границы заданы значениями во время выполнения (dynamic.py)

Инвариант min <= max во время выполнения не проверяется: для статических
доменов это контракт определения, для динамических — конверсия через
инвертированный домен не определена.
"""

from abc import ABC, abstractmethod

from bounded_cast.core.math.numeric_types import NumericType, Number


class Domain(ABC):
    """
    Ограниченный числовой диапазон с типом значений.

    Наследники обязаны предоставить value_type, extent_type, min(), max().
    extent() вычисляется в extent_type и не может переполниться.
    """

    # Тип значений домена и тип, в котором вычисляется max - min
    value_type: NumericType
    extent_type: NumericType

    @abstractmethod
    def min(self) -> Number:
        """Нижняя граница в value_type"""

    @abstractmethod
    def max(self) -> Number:
        """Верхняя граница в value_type"""

    @abstractmethod
    def extent(self) -> Number:
        """max - min в extent_type"""

    @property
    def is_static(self) -> bool:
        return False

    def contains(self, value: Number) -> bool:
        """Лежит ли значение в [min, max] (clamp не изменит его)"""
        return self.min() <= value <= self.max()


# =============================================================================
# ИНТРОСПЕКЦИЯ
# =============================================================================


def min_of(domain: Domain) -> Number:
    return domain.min()


def max_of(domain: Domain) -> Number:
    return domain.max()


def extent_of(domain: Domain) -> Number:
    """Extent домена: max - min, вычисленный в extent_type"""
    return domain.extent()


def value_type_of(domain: Domain) -> NumericType:
    """
    Тип значений домена.

    Нельзя считать, что тип значений совпадает с тегом: тег float01 несёт
    value_type FLOAT32, но это не «весь float32».
    """
    return domain.value_type


def extent_type_of(domain: Domain) -> NumericType:
    return domain.extent_type
