"""
Float Classification — классификация IEEE-754 double

Модуль разбивает любое значение float на пять семантических категорий:
- ZERO: 0.0 (любого знака)
- INFINITE: +inf / -inf
- NAN: not-a-number
- SUB_THRESHOLD: 0 < |value| <= MIN_NORMAL (минимальный нормализованный
  double и все денормализованные значения)
- NORMAL: всё остальное, конечное и ненулевое

Только для NORMAL значений применимы логарифмические и разрядные вычисления.
Остальные категории обрабатываются через sentinel/pass-through.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Классификация детерминирована и не имеет состояния
2. Граница SUB_THRESHOLD одинакова для всех потребителей
3. Функции модуля никогда не выбрасывают исключения для float входа
"""

import math
import sys
from enum import Enum
from typing import Final, Optional

# =============================================================================
# ГРАНИЧНЫЕ КОНСТАНТЫ
# =============================================================================

# Минимальный положительный нормализованный double (2.2250738585072014e-308)
# Значения с |value| <= MIN_NORMAL считаются SUB_THRESHOLD
MIN_NORMAL: Final[float] = sys.float_info.min


# =============================================================================
# КАТЕГОРИИ
# =============================================================================


class FloatCategory(str, Enum):
    """Семантическая категория значения float."""

    ZERO = "ZERO"
    INFINITE = "INFINITE"
    NAN = "NAN"
    SUB_THRESHOLD = "SUB_THRESHOLD"
    NORMAL = "NORMAL"


def classify_float(value: float) -> FloatCategory:
    """
    Классификация значения float.

    Порядок проверок важен: NaN не сравним ни с чем, поэтому проверяется
    до сравнения с MIN_NORMAL.

    Args:
        value: Любое вещественное значение (int приводится к float)

    Returns:
        Категория значения

    Examples:
        >>> classify_float(0.0)
        <FloatCategory.ZERO: 'ZERO'>
        >>> classify_float(float('-inf'))
        <FloatCategory.INFINITE: 'INFINITE'>
        >>> classify_float(5e-324)
        <FloatCategory.SUB_THRESHOLD: 'SUB_THRESHOLD'>
        >>> classify_float(-1234.0)
        <FloatCategory.NORMAL: 'NORMAL'>
    """
    value = float(value)

    if math.isnan(value):
        return FloatCategory.NAN
    if math.isinf(value):
        return FloatCategory.INFINITE
    if value == 0.0:
        return FloatCategory.ZERO

    # Минимальный нормализованный double включается в SUB_THRESHOLD
    if abs(value) <= MIN_NORMAL:
        return FloatCategory.SUB_THRESHOLD

    return FloatCategory.NORMAL


def is_normal_float(value: float) -> bool:
    """True если значение конечное, ненулевое и выше MIN_NORMAL по модулю."""
    return classify_float(value) is FloatCategory.NORMAL


def is_sub_threshold(value: float) -> bool:
    """True для MIN_NORMAL и всех денормализованных значений (любого знака)."""
    return classify_float(value) is FloatCategory.SUB_THRESHOLD


def finite_or_none(value: float) -> Optional[float]:
    """
    Замена NaN/Inf на None.

    Используется при сериализации в JSON контракты, где NaN/Inf
    не являются допустимыми числами.

    Examples:
        >>> finite_or_none(1.5)
        1.5
        >>> finite_or_none(float('nan')) is None
        True
    """
    value = float(value)
    if math.isfinite(value):
        return value
    return None
