"""
Magnitude — порядок величины и ближайшая степень десяти

Модуль вычисляет десятичный порядок значения float и округляет значение
до ближайшей степени десяти. Используется слоем отображения для выбора
шага spin-box и формата чисел.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для NORMAL значений: 10^order <= |value| < 10^(order+1)
2. Точные степени 10 отображаются в свой порядок (10.0 → 1, 0.1 → -1)
3. ZERO/INFINITE/NAN/SUB_THRESHOLD → ORDER_UNDEFINED (исключения не бросаются)
4. closest_power_of_ten сохраняет знак, степени 10 — неподвижные точки
5. Все операции детерминированы и не имеют состояния

"10^k" везде означает double, ближайший к десятичному литералу 1e{k}.
"""

import math
from typing import Final, Optional

from src.core.math.float_classification import FloatCategory, classify_float

# =============================================================================
# SENTINEL
# =============================================================================

# Порядок не определён (минимальный 32-битный int)
ORDER_UNDEFINED: Final[int] = -(2**31)


# =============================================================================
# ТАБЛИЦЫ СТЕПЕНЕЙ 10
# =============================================================================

# Диапазон порядков NORMAL double: от 1e-308 до 1e308, плюс 1e309 (= inf)
# для верхней границы декады
_MIN_DECIMAL_EXPONENT: Final[int] = -308
_MAX_DECIMAL_EXPONENT: Final[int] = 309

# Корректно округлённые степени 10: парсинг литерала точнее, чем 10.0 ** k
_POWERS_OF_TEN: Final[tuple[float, ...]] = tuple(
    float(f"1e{k}") for k in range(_MIN_DECIMAL_EXPONENT, _MAX_DECIMAL_EXPONENT + 1)
)

# Середины декад 5·10^k (граница округления closest_power_of_ten)
_HALF_DECADES: Final[tuple[float, ...]] = tuple(
    float(f"5e{k}") for k in range(_MIN_DECIMAL_EXPONENT, _MAX_DECIMAL_EXPONENT + 1)
)


def _power_of_ten(exponent: int) -> float:
    return _POWERS_OF_TEN[exponent - _MIN_DECIMAL_EXPONENT]


def _half_decade(exponent: int) -> float:
    return _HALF_DECADES[exponent - _MIN_DECIMAL_EXPONENT]


# =============================================================================
# ПОРЯДОК ВЕЛИЧИНЫ
# =============================================================================


def order_of_magnitude(value: float) -> int:
    """
    Десятичный порядок значения.

    Возвращает целое e такое, что 10^e <= |value| < 10^(e+1).

    floor(log10(x)) может ошибиться на единицу рядом со степенями 10
    (округление log10 в последнем бите), поэтому результат сверяется
    с таблицей корректно округлённых степеней и сдвигается не более
    чем на один шаг.

    Args:
        value: Любое значение float

    Returns:
        Порядок величины или ORDER_UNDEFINED для ZERO, INFINITE, NAN
        и SUB_THRESHOLD (включая MIN_NORMAL и денормализованные значения)

    Examples:
        >>> order_of_magnitude(10.0)
        1
        >>> order_of_magnitude(0.01)
        -2
        >>> order_of_magnitude(1.7976931348623157e308)
        308
        >>> order_of_magnitude(0.0) == ORDER_UNDEFINED
        True
    """
    if classify_float(value) is not FloatCategory.NORMAL:
        return ORDER_UNDEFINED

    magnitude = abs(float(value))
    order = math.floor(math.log10(magnitude))

    if magnitude < _power_of_ten(order):
        order -= 1
    elif magnitude >= _power_of_ten(order + 1):
        order += 1

    return order


def try_order_of_magnitude(value: float) -> Optional[int]:
    """
    Порядок величины как Optional.

    None ровно в тех случаях, когда order_of_magnitude возвращает
    ORDER_UNDEFINED.
    """
    order = order_of_magnitude(value)
    if order == ORDER_UNDEFINED:
        return None
    return order


# =============================================================================
# БЛИЖАЙШАЯ СТЕПЕНЬ 10
# =============================================================================


def closest_power_of_ten(value: float) -> float:
    """
    Ближайшая к значению степень 10 с сохранением знака.

    Правило округления по мантиссе m = |value| / 10^order:
    - m > 5 → 10^(order+1)
    - m <= 5 → 10^order (ровно 5 округляется вниз)

    Сравнение выполняется с корректно округлённым 5·10^order, поэтому
    double, ближайший к 5·10^k, считается ровно серединой.

    Args:
        value: Любое значение float

    Returns:
        - value без изменений для ZERO, INFINITE, NAN (NaN → NaN)
        - value без изменений для SUB_THRESHOLD (порядок не определён)
        - sign(value) * 10^k иначе

    Examples:
        >>> closest_power_of_ten(45.0)
        10.0
        >>> closest_power_of_ten(50.0)
        10.0
        >>> closest_power_of_ten(98.0)
        100.0
        >>> closest_power_of_ten(-1234.0)
        -1000.0
    """
    value = float(value)

    if classify_float(value) in (
        FloatCategory.ZERO,
        FloatCategory.INFINITE,
        FloatCategory.NAN,
    ):
        return value

    order = order_of_magnitude(value)
    if order == ORDER_UNDEFINED:
        return value

    if abs(value) > _half_decade(order):
        power = _power_of_ten(order + 1)
    else:
        power = _power_of_ten(order)

    return math.copysign(power, value)
