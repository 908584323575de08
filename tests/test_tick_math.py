import pytest
from hypothesis import given
from hypothesis import strategies as st

from sumtree_ticks.decimal256 import Decimal256, DecimalOverflowError
from sumtree_ticks.tick_math import (
    MAX_TICK,
    MIN_TICK,
    OrderDirection,
    PriceOverflowError,
    RoundingDirection,
    TickOutOfBoundsError,
    amount_to_value,
    divide_by_price,
    multiply_by_price,
    pow_ten,
    tick_to_price,
)


@pytest.mark.parametrize(
    "tick, expected",
    [
        (0, "1"),
        (-1500000, "0.85"),
        (40000000, "50000"),
        (-17765433, "0.012345670000000000"),
        (MIN_TICK, "0.000000000001"),
    ],
)
def test_tick_to_price_known_values(tick, expected):
    assert tick_to_price(tick) == Decimal256.parse(expected)


@pytest.mark.parametrize("tick", [MAX_TICK + 1, MIN_TICK - 1])
def test_tick_to_price_out_of_bounds(tick):
    with pytest.raises(TickOutOfBoundsError) as info:
        tick_to_price(tick)
    assert info.value.tick_id == tick


@given(st.integers(min_value=MIN_TICK, max_value=MAX_TICK - 1))
def test_tick_to_price_non_decreasing(tick):
    assert tick_to_price(tick) <= tick_to_price(tick + 1)


def test_pow_ten_round_trip():
    assert pow_ten(0) == Decimal256.one()
    for expo in range(1, 19):
        assert pow_ten(expo) * pow_ten(-expo) == Decimal256.one()


def test_pow_ten_below_precision_is_zero():
    assert pow_ten(-19).is_zero()


def test_pow_ten_overflow():
    with pytest.raises(DecimalOverflowError):
        pow_ten(78)


def test_rounding_direction():
    value = Decimal256.parse("12.34567")
    assert RoundingDirection.DOWN.round(value) == 12
    assert RoundingDirection.UP.round(value) == 13


def test_order_direction_opposite():
    assert OrderDirection.BID.opposite() is OrderDirection.ASK
    assert OrderDirection.ASK.opposite() is OrderDirection.BID


def test_multiply_by_price_source_cases():
    assert multiply_by_price(1000, tick_to_price(-1500000), RoundingDirection.DOWN) == 850
    assert multiply_by_price(1000, tick_to_price(40000000), RoundingDirection.DOWN) == 50_000_000
    assert multiply_by_price(1000, tick_to_price(-17765433), RoundingDirection.DOWN) == 12


def test_divide_by_price_source_cases():
    assert divide_by_price(100000, tick_to_price(40000000), RoundingDirection.DOWN) == 2
    assert divide_by_price(1000, tick_to_price(-17765433), RoundingDirection.DOWN) == 81_000


def test_rounding_up_never_below_down():
    price = tick_to_price(-17765433)
    down = multiply_by_price(1000, price, RoundingDirection.DOWN)
    up = multiply_by_price(1000, price, RoundingDirection.UP)
    assert up == down + 1


def test_multiply_overflow():
    with pytest.raises(PriceOverflowError) as info:
        multiply_by_price(2, Decimal256.max(), RoundingDirection.DOWN)
    assert info.value.operation == "Mul"
    assert info.value.operand1 == "2"


def test_divide_by_zero_price():
    with pytest.raises(PriceOverflowError):
        divide_by_price(10, Decimal256.zero(), RoundingDirection.DOWN)


def test_amount_out_of_range():
    with pytest.raises(ValueError):
        multiply_by_price(2**128, Decimal256.one(), RoundingDirection.DOWN)


def test_amount_to_value_zero_amount():
    assert amount_to_value(OrderDirection.ASK, 0, Decimal256.zero(), RoundingDirection.UP) == 0


def test_amount_to_value_dispatch():
    price = tick_to_price(40000000)
    assert amount_to_value(OrderDirection.BID, 1000, price, RoundingDirection.DOWN) == 50_000_000
    assert amount_to_value(OrderDirection.ASK, 100000, price, RoundingDirection.DOWN) == 2


@given(
    st.integers(min_value=1, max_value=2**100),
    st.integers(min_value=-9_000_000, max_value=40_000_000),
)
def test_bid_then_ask_never_gains(amount, tick):
    price = tick_to_price(tick)
    value = amount_to_value(OrderDirection.BID, amount, price, RoundingDirection.DOWN)
    back = amount_to_value(OrderDirection.ASK, value, price, RoundingDirection.DOWN)
    assert back <= amount


@given(st.integers(min_value=0, max_value=2**128 - 1))
def test_price_one_is_identity(amount):
    assert multiply_by_price(amount, tick_to_price(0), RoundingDirection.DOWN) == amount
    assert divide_by_price(amount, tick_to_price(0), RoundingDirection.UP) == amount