"""
Significant Decimals — минимальное число знаков после запятой

Модуль определяет, сколько десятичных знаков после запятой нужно, чтобы
без потерь воспроизвести хранимое значение double. Число знаков ограничено
бюджетом точности double: 16 значащих десятичных цифр, часть которых
занимает целая часть числа.

АЛГОРИТМ (для NORMAL значений):
    order  = order_of_magnitude(value)
    budget = min(16, max(0, 16 - (order + 1)))
    для d = 0, 1, ..., budget:
        если round(value, d) "наблюдаемо равно" value → вернуть d
    вернуть budget (точность исчерпана)

"Наблюдаемо равно" на глубине d означает одно из:
1. |round(value, d) - value| <= 0.5 · 10^(order + 1 - 16 - d)
   (половина единицы 16-й значащей цифры, уменьшается с ростом d)
2. Периодическая дробь: в разложении |value| до budget знаков начиная
   с позиции d - 2 идёт серия из RECURRING_RUN_LENGTH одинаковых цифр 1-8.
   Такая дробь показывается с двумя повторами цифры (123456.3333333 → 2).
   Цифры после серии при этом не показываются: 123456.11111129 → 2.
   Серии 0 — хвостовые нули, серии 9 округляются вверх: оба случая
   покрывает проверка (1).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN → DECIMALS_UNDEFINED (-1), ZERO/INFINITE → 0, SUB_THRESHOLD → 16
2. Для NORMAL значений результат в [0, 16]
3. Результат минимален: проверка на глубине (результат - 1) не проходит
4. Все операции детерминированы и не имеют состояния
"""

from typing import Final, Optional

from src.core.math.float_classification import FloatCategory, classify_float
from src.core.math.magnitude import ORDER_UNDEFINED, order_of_magnitude

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Бюджет значащих десятичных цифр double
MAX_SIGNIFICANT_DIGITS: Final[int] = 16

# Число знаков не определено (NaN)
DECIMALS_UNDEFINED: Final[int] = -1

# Минимальная длина серии одинаковых цифр, признающей дробь периодической
RECURRING_RUN_LENGTH: Final[int] = 6

# Сколько повторов периодической цифры остаётся в отображении
RECURRING_KEPT_REPEATS: Final[int] = 2

_RECURRING_DIGITS: Final[frozenset[str]] = frozenset("12345678")


# =============================================================================
# БЮДЖЕТ И ТОЛЕРАНТНОСТЬ
# =============================================================================


def decimals_budget(order: int) -> int:
    """
    Доступное число знаков после запятой для данного порядка.

    16 значащих цифр минус цифры целой части, в пределах [0, 16].

    Examples:
        >>> decimals_budget(5)    # 123456.x
        10
        >>> decimals_budget(-1)   # 0.x
        16
        >>> decimals_budget(308)
        0
    """
    return min(
        MAX_SIGNIFICANT_DIGITS,
        max(0, MAX_SIGNIFICANT_DIGITS - (order + 1)),
    )


def round_trip_tolerance(order: int, decimals: int) -> float:
    """
    Допуск сравнения округлённого значения с исходным.

    Половина единицы 16-й значащей цифры, делённая на 10^decimals.
    Для очень малых порядков уходит в 0.0 (сравнение становится точным).
    """
    return 0.5 * 10.0 ** (order + 1 - MAX_SIGNIFICANT_DIGITS - decimals)


def _fraction_digits(value: float, places: int) -> str:
    # Форматирование 'f' корректно округляет точное двоичное значение
    return f"{abs(value):.{places}f}".partition(".")[2]


def _is_recurring(digits: str, decimals: int) -> bool:
    start = decimals - RECURRING_KEPT_REPEATS
    if start < 0:
        return False

    run = digits[start : start + RECURRING_RUN_LENGTH]
    if len(run) < RECURRING_RUN_LENGTH or run[0] not in _RECURRING_DIGITS:
        return False

    return run == run[0] * RECURRING_RUN_LENGTH


def _reproduces(value: float, decimals: int, order: int, digits: str) -> bool:
    rounded = round(value, decimals)
    if abs(rounded - value) <= round_trip_tolerance(order, decimals):
        return True

    return _is_recurring(digits, decimals)


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================


def round_trips(value: float, decimals: int) -> bool:
    """
    Проверка, что value воспроизводится с decimals знаками после запятой.

    Та же проверка, что выполняет significant_decimals на каждом шаге поиска.
    Определена только для NORMAL значений.

    Args:
        value: Проверяемое значение
        decimals: Число знаков после запятой

    Returns:
        False для не-NORMAL значений и отрицательного decimals,
        иначе результат проверки "наблюдаемого равенства"
    """
    if decimals < 0:
        return False

    value = float(value)
    order = order_of_magnitude(value)
    if order == ORDER_UNDEFINED:
        return False

    digits = _fraction_digits(value, decimals_budget(order))
    return _reproduces(value, decimals, order, digits)


def significant_decimals(
    value: float,
    default_decimals: int = DECIMALS_UNDEFINED,
) -> int:
    """
    Минимальное число знаков после запятой, воспроизводящее value.

    Args:
        value: Любое значение float
        default_decimals: Результат при исчерпании бюджета точности.
            DECIMALS_UNDEFINED (default) означает "вернуть сам бюджет".

    Returns:
        - DECIMALS_UNDEFINED (-1) для NaN
        - 0 для ZERO и INFINITE
        - MAX_SIGNIFICANT_DIGITS (16) для SUB_THRESHOLD
        - минимальное d в [0, budget] для NORMAL
        - budget (или default_decimals >= 0), если ни одно d не подошло

    Raises:
        ValueError: Если default_decimals < DECIMALS_UNDEFINED

    Examples:
        >>> significant_decimals(123456.0)
        0
        >>> significant_decimals(123456.1234)
        4
        >>> significant_decimals(float('nan'))
        -1
        >>> significant_decimals(5e-324)
        16
    """
    if default_decimals < DECIMALS_UNDEFINED:
        raise ValueError(
            f"default_decimals must be >= {DECIMALS_UNDEFINED}, got {default_decimals}"
        )

    value = float(value)
    category = classify_float(value)

    if category is FloatCategory.NAN:
        return DECIMALS_UNDEFINED
    if category in (FloatCategory.ZERO, FloatCategory.INFINITE):
        return 0

    order = order_of_magnitude(value)
    if order == ORDER_UNDEFINED:
        # SUB_THRESHOLD: порядок не определён, сообщаем максимальную точность
        return MAX_SIGNIFICANT_DIGITS

    budget = decimals_budget(order)
    digits = _fraction_digits(value, budget)

    for decimals in range(budget + 1):
        if _reproduces(value, decimals, order, digits):
            return decimals

    if default_decimals >= 0:
        return default_decimals
    return budget


def try_significant_decimals(value: float) -> Optional[int]:
    """Число знаков как Optional: None для NaN, иначе significant_decimals(value)."""
    decimals = significant_decimals(value)
    if decimals == DECIMALS_UNDEFINED:
        return None
    return decimals
