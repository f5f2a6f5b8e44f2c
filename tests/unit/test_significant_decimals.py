"""
Тесты для модуля Significant Decimals

Проверяет:
1. Полную справочную таблицу (включая периодические дроби)
2. Особые значения: NaN → -1, ZERO/INFINITE → 0, SUB_THRESHOLD → 16
3. Бюджет точности и толерантность
4. Минимальность результата (round_trips)
5. default_decimals при исчерпании бюджета
"""

import math
import sys

import pytest

from src.core.math.float_classification import MIN_NORMAL
from src.core.math.significant_decimals import (
    DECIMALS_UNDEFINED,
    MAX_SIGNIFICANT_DIGITS,
    RECURRING_RUN_LENGTH,
    decimals_budget,
    round_trip_tolerance,
    round_trips,
    significant_decimals,
    try_significant_decimals,
)

DENORM_MIN = 5e-324
DBL_MAX = sys.float_info.max

# (значение, ожидаемое число знаков)
REFERENCE_TABLE = [
    (123456.0, 0),
    (123456.1, 1),
    (123456.12, 2),
    (123456.123, 3),
    (123456.122, 3),
    (123456.1223, 4),
    (123456.1234, 4),
    (123456.0123, 4),
    (123456.0012, 4),
    (123456.001234, 6),
    (123456.000123, 6),
    (123456.0000, 0),
    (123456.0001, 4),
    (123456.3333333, 2),
    (123456.1333333, 3),
    (123456.3333334, 2),
    (123456.00122, 5),
    (123456.00123, 5),
    # хранится как 123456.001109999997425
    (123456.00111, 5),
    # хранится как 123456.270000000004075
    (123456.26999999999999996, 2),
    (123456.863899999999987, 4),
    (0.5, 1),
    (0.25, 2),
    (0.125, 3),
    (0.1234567891013151, 16),
]


# =============================================================================
# ТЕСТЫ СПРАВОЧНОЙ ТАБЛИЦЫ
# =============================================================================


class TestSignificantDecimalsReference:
    """Справочная таблица significant_decimals"""

    def test_reference_table(self) -> None:
        for value, expected in REFERENCE_TABLE:
            assert significant_decimals(value) == expected, value

    def test_negative_values_match_positive(self) -> None:
        """Знак не влияет на число знаков"""
        for value, expected in REFERENCE_TABLE:
            assert significant_decimals(-value) == expected, value

    def test_nan_returns_undefined(self) -> None:
        assert DECIMALS_UNDEFINED == -1
        assert significant_decimals(math.nan) == -1

    def test_zero_and_infinite_return_zero(self) -> None:
        assert significant_decimals(0.0) == 0
        assert significant_decimals(-0.0) == 0
        assert significant_decimals(math.inf) == 0
        assert significant_decimals(-math.inf) == 0

    def test_sub_threshold_returns_max(self) -> None:
        """MIN_NORMAL и денормализованные значения → 16"""
        assert significant_decimals(MIN_NORMAL) == 16
        assert significant_decimals(DENORM_MIN) == 16
        assert significant_decimals(-DENORM_MIN) == 16

    def test_max_value_returns_zero(self) -> None:
        """Целая часть исчерпывает бюджет"""
        assert significant_decimals(DBL_MAX) == 0
        assert significant_decimals(1e20) == 0

    def test_integers(self) -> None:
        for value in (1.0, 42.0, 1000.0, -7.0, 123456789.0):
            assert significant_decimals(value) == 0

    def test_small_exact_values(self) -> None:
        """Малые значения с коротким десятичным представлением"""
        assert significant_decimals(0.01) == 2
        assert significant_decimals(0.0000000001) == 10
        assert significant_decimals(0.0625) == 4

    def test_value_below_budget_exhausts(self) -> None:
        """Значение меньше 1e-16 не воспроизводится в бюджете → 16"""
        assert significant_decimals(1.5e-20) == 16


# =============================================================================
# ТЕСТЫ ПЕРИОДИЧЕСКИХ ДРОБЕЙ
# =============================================================================


class TestRecurringFractions:
    """Серии одинаковых цифр показываются двумя повторами"""

    def test_thirds(self) -> None:
        assert significant_decimals(1.0 / 3.0) == 2
        assert significant_decimals(2.0 / 3.0) == 2

    def test_run_after_leading_digits(self) -> None:
        assert significant_decimals(1.0 / 30.0) == 3
        assert significant_decimals(123456.1333333) == 3

    def test_short_run_is_not_recurring(self) -> None:
        """Серия короче RECURRING_RUN_LENGTH воспроизводится точно"""
        assert RECURRING_RUN_LENGTH == 6
        assert significant_decimals(123456.111) == 3
        assert significant_decimals(123456.11111) == 5

    def test_run_hides_trailing_significant_digits(self) -> None:
        """Серия из 6 цифр сворачивается даже при значащих цифрах после неё"""
        # 123456.11111129: серия "111111", затем "29" отбрасываются
        assert significant_decimals(123456.11111129) == 2
        assert round_trips(123456.11111129, 2)
        assert round(123456.11111129, 2) != 123456.11111129

        # 0.5555559: серия "555555", последняя 9 отбрасывается
        assert significant_decimals(0.5555559) == 2
        assert round(0.5555559, 2) != 0.5555559

    def test_zero_and_nine_runs_are_not_recurring(self) -> None:
        assert significant_decimals(123456.5000001) == 7
        assert significant_decimals(123456.9999991) == 7


# =============================================================================
# ТЕСТЫ БЮДЖЕТА И ТОЛЕРАНТНОСТИ
# =============================================================================


class TestBudgetAndTolerance:
    """Тесты для decimals_budget / round_trip_tolerance"""

    def test_budget(self) -> None:
        assert MAX_SIGNIFICANT_DIGITS == 16
        assert decimals_budget(0) == 15
        assert decimals_budget(5) == 10
        assert decimals_budget(14) == 1
        assert decimals_budget(15) == 0
        assert decimals_budget(308) == 0

    def test_budget_capped_for_small_orders(self) -> None:
        """Для порядков < -1 бюджет ограничен 16"""
        assert decimals_budget(-1) == 16
        assert decimals_budget(-10) == 16
        assert decimals_budget(-307) == 16

    def test_tolerance_shrinks_with_decimals(self) -> None:
        assert round_trip_tolerance(5, 0) == pytest.approx(5e-11)
        assert round_trip_tolerance(5, 3) == pytest.approx(5e-14)
        for decimals in range(10):
            assert round_trip_tolerance(5, decimals + 1) < round_trip_tolerance(5, decimals)

    def test_tolerance_underflows_to_zero(self) -> None:
        """Очень малые порядки: точное сравнение без исключений"""
        assert round_trip_tolerance(-308, 16) == 0.0

    def test_result_range_for_normal_values(self) -> None:
        """Для NORMAL значений результат в [0, 16]"""
        values = [
            1e-300, 3.3e-200, 1.5e-20, 0.3, 7.25, 1234.5678,
            9.87654321e14, 1e16, 5e200, DBL_MAX, math.pi, math.e,
        ]
        for value in values:
            assert 0 <= significant_decimals(value) <= 16, value
            assert 0 <= significant_decimals(-value) <= 16, value


# =============================================================================
# ТЕСТЫ ROUND-TRIP
# =============================================================================


class TestRoundTrips:
    """Тесты для round_trips и минимальности результата"""

    def test_result_round_trips_and_is_minimal(self) -> None:
        """round_trips(v, d) истинно, round_trips(v, d - 1) ложно"""
        for value, _ in REFERENCE_TABLE:
            decimals = significant_decimals(value)
            assert round_trips(value, decimals), value
            if decimals > 0:
                assert not round_trips(value, decimals - 1), value

    def test_recurring_round_trips(self) -> None:
        assert round_trips(123456.3333333, 2)
        assert not round_trips(123456.3333333, 1)
        assert not round_trips(123456.1333333, 2)

    def test_more_decimals_still_round_trip(self) -> None:
        assert round_trips(123456.12, 2)
        assert round_trips(123456.12, 5)

    def test_non_normal_values_do_not_round_trip(self) -> None:
        for value in (0.0, math.inf, math.nan, MIN_NORMAL, DENORM_MIN):
            assert not round_trips(value, 0)

    def test_negative_decimals_do_not_round_trip(self) -> None:
        assert not round_trips(1.0, -1)


# =============================================================================
# ТЕСТЫ ПАРАМЕТРОВ
# =============================================================================


class TestDefaultDecimals:
    """Тесты для default_decimals"""

    def test_default_used_when_budget_exhausted(self) -> None:
        assert significant_decimals(1.5e-20, default_decimals=4) == 4
        assert significant_decimals(1.5e-20, default_decimals=0) == 0

    def test_default_ignored_when_found(self) -> None:
        assert significant_decimals(123456.12, default_decimals=7) == 2
        assert significant_decimals(math.nan, default_decimals=7) == -1
        assert significant_decimals(DENORM_MIN, default_decimals=7) == 16

    def test_invalid_default_raises(self) -> None:
        with pytest.raises(ValueError, match="default_decimals must be >= -1"):
            significant_decimals(1.0, default_decimals=-2)

    def test_try_significant_decimals(self) -> None:
        assert try_significant_decimals(123456.1234) == 4
        assert try_significant_decimals(0.0) == 0
        assert try_significant_decimals(DENORM_MIN) == 16
        assert try_significant_decimals(math.nan) is None

    def test_deterministic(self) -> None:
        for value, expected in REFERENCE_TABLE:
            assert significant_decimals(value) == significant_decimals(value) == expected
