"""
Errors — Таксономия исключений bounded_cast

Out-of-range входы ошибкой НЕ являются: они clamp-ятся к границам source domain.

Исключения:
- DegenerateDomainError: extent source domain равен нулю (min == max)
- ExtentOverflowError: extent_type слишком узкий для value_type (дефект определения тега)
- DomainKindError: static/dynamic вариант домена перепутан, либо недопустимый value_type
"""


class BoundedCastError(Exception):
    """Базовое исключение пакета bounded_cast"""


class DegenerateDomainError(BoundedCastError, ZeroDivisionError):
    """
    Деление на нулевой extent source domain.

    Нарушение предусловия вызывающей стороны: домен с min == max не задаёт
    масштаба, поэтому линейное преобразование не определено. Значение-заглушка
    не возвращается.
    """


class ExtentOverflowError(BoundedCastError, OverflowError):
    """
    extent = max - min не помещается в extent_type домена.

    Ошибка определения домена (design-time), а не runtime-ситуация:
    выбран слишком узкий extent_type.
    """


class DomainKindError(BoundedCastError, TypeError):
    """Передан домен не того варианта (static/dynamic) или недопустимый тип значений"""
