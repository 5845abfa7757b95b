"""
Core — базовые блоки конверсии bounded_cast

Fixed-width числовые типы, overflow-safe арифметика, модель static/dynamic
доменов и JSON Schema контракты.
"""
