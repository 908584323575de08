"""Conversion between tick indices, prices and order amounts."""

from __future__ import annotations

from enum import Enum

from sumtree_ticks.decimal256 import Decimal256, DecimalOverflowError, UINT256_MAX

EXPONENT_AT_PRICE_ONE = -6
GEOMETRIC_EXPONENT_INCREMENT_DISTANCE_IN_TICKS = 9_000_000
MIN_TICK = -108_000_000
MAX_TICK = 182_402_823

UINT128_MAX = 2**128 - 1


class TickOutOfBoundsError(ValueError):
    """Raised when a tick lies outside MIN_TICK..MAX_TICK."""

    def __init__(self, tick_id: int) -> None:
        super().__init__(f"tick {tick_id} is out of bounds")
        self.tick_id = tick_id


class PriceOverflowError(DecimalOverflowError):
    """Raised when converting an amount by a price leaves the valid range."""

    def __init__(self, operation: str, operand1: str, operand2: str) -> None:
        super().__init__(f"cannot {operation} with {operand1} and {operand2}")
        self.operation = operation
        self.operand1 = operand1
        self.operand2 = operand2


class OrderDirection(Enum):
    BID = "bid"
    ASK = "ask"

    def opposite(self) -> OrderDirection:
        return OrderDirection.ASK if self is OrderDirection.BID else OrderDirection.BID


class RoundingDirection(Enum):
    """Which way a decimal is rounded to an integer."""

    DOWN = 0
    UP = 1

    def round(self, value: Decimal256) -> int:
        if self is RoundingDirection.DOWN:
            return value.to_uint_floor()
        return value.to_uint_ceil()


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


def pow_ten(expo: int) -> Decimal256:
    """Return 10**expo; negative exponents give fractions."""
    target = 10 ** abs(expo)
    if target > UINT256_MAX:
        raise DecimalOverflowError(f"10^{abs(expo)} overflows the 256-bit range")
    if expo < 0:
        return Decimal256.from_ratio(1, target)
    return Decimal256.from_ratio(target, 1)


def tick_to_price(tick_index: int) -> Decimal256:
    """Return the price of a tick; tick zero has price one."""
    if tick_index == 0:
        return Decimal256.one()
    if not MIN_TICK <= tick_index <= MAX_TICK:
        raise TickOutOfBoundsError(tick_index)

    distance = GEOMETRIC_EXPONENT_INCREMENT_DISTANCE_IN_TICKS
    exponent_delta = _truncating_div(tick_index, distance)

    # Below price one the precision steps up one exponent earlier.
    exponent_at_tick = EXPONENT_AT_PRICE_ONE + exponent_delta
    if tick_index < 0:
        exponent_at_tick -= 1

    additive_increment = pow_ten(exponent_at_tick)
    additive_ticks = tick_index - exponent_delta * distance

    geometric_component = pow_ten(exponent_delta)
    additive_component = Decimal256.from_ratio(abs(additive_ticks), 1) * additive_increment

    if additive_ticks < 0:
        return geometric_component - additive_component
    return geometric_component + additive_component


def _check_amount(amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError("amount must be an integer")
    if not 0 <= amount <= UINT128_MAX:
        raise ValueError(f"amount {amount} is outside the 128-bit unsigned range")


def multiply_by_price(
    amount: int, price: Decimal256, rounding_direction: RoundingDirection
) -> int:
    """Return amount * price rounded to an integer."""
    _check_amount(amount)
    try:
        value = price * Decimal256.from_ratio(amount, 1)
    except DecimalOverflowError as exc:
        raise PriceOverflowError("Mul", str(amount), str(price)) from exc
    return rounding_direction.round(value)


def divide_by_price(
    amount: int, price: Decimal256, rounding_direction: RoundingDirection
) -> int:
    """Return amount / price rounded to an integer."""
    _check_amount(amount)
    try:
        value = Decimal256.from_ratio(amount, 1) / price
    except (DecimalOverflowError, ZeroDivisionError) as exc:
        raise PriceOverflowError("Mul", str(amount), str(price)) from exc
    return rounding_direction.round(value)


def amount_to_value(
    order: OrderDirection,
    amount: int,
    price: Decimal256,
    rounding_direction: RoundingDirection,
) -> int:
    """Convert a tick amount to its value at a price for an order direction."""
    if amount == 0:
        return 0
    if order is OrderDirection.BID:
        return multiply_by_price(amount, price, rounding_direction)
    return divide_by_price(amount, price, rounding_direction)