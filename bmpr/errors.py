class BmprError(Exception):
    """Базовое исключение библиотеки"""


class InvalidDimensionError(BmprError, ValueError):
    """Недопустимая ширина или высота холста"""
