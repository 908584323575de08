# sumtree_ticks

Tick and price arithmetic for a limit order book whose price levels are
identified by integer *tick* indices.

## Contents

### `sumtree_ticks.decimal256`

- `Decimal256`: an immutable, ordered, non-negative fixed-point decimal
  stored as an integer count of 10^-18 units (`atomics`), bounded to 256 bits.
  - Constructors: `Decimal256.zero()`, `Decimal256.one()`, `Decimal256.max()`,
    `Decimal256.percent(value)`, `Decimal256.from_ratio(numerator, denominator)`
    (truncated to 18 decimal places) and `Decimal256.parse(text)` for plain
    strings such as `"0.85"` or `"50000"`.
  - `+`, `-`, `*` and `/` between two `Decimal256` values. Multiplication and
    division truncate to 18 decimal places.
  - `to_uint_floor()`, `to_uint_ceil()`, `is_zero()`. `str()` prints the value
    without trailing zeros.
- `DecimalOverflowError` (an `ArithmeticError`): raised when a result falls
  below zero or exceeds the 256-bit range.

### `sumtree_ticks.tick_math`

- `tick_to_price(tick_index)`: the `Decimal256` price of a tick. Tick `0` is
  price `1`. Every 9,000,000 ticks the price moves by a power of ten, and each
  tick within that span adds a fixed increment. Below price one the increments
  are ten times finer. Ticks outside `MIN_TICK` (-108,000,000) to `MAX_TICK`
  (182,402,823) raise `TickOutOfBoundsError`, which carries `tick_id`.
- `pow_ten(expo)`: `10 ** expo` as a `Decimal256`. Negative exponents are
  allowed.
- `multiply_by_price(amount, price, rounding_direction)` and
  `divide_by_price(amount, price, rounding_direction)`: convert an unsigned
  128-bit integer amount by a price and round it to an integer. If the result
  cannot be represented, or the price is zero for a division, they raise
  `PriceOverflowError`, a subclass of `DecimalOverflowError`.
- `amount_to_value(order, amount, price, rounding_direction)`: returns `0` for
  a zero amount. Otherwise a `BID` amount is multiplied by the price and an
  `ASK` amount is divided by it.
- `OrderDirection` (`BID`, `ASK`) with `opposite()`.
- `RoundingDirection` (`DOWN`, `UP`) with `round(value)`, which takes the
  floor or the ceiling of a `Decimal256`.

## Installation

```
pip install .
```

## Usage

```python
from sumtree_ticks.decimal256 import Decimal256
from sumtree_ticks.tick_math import (
    OrderDirection,
    RoundingDirection,
    amount_to_value,
    tick_to_price,
)

price = tick_to_price(-1500000)
print(price)                      # 0.85

value = amount_to_value(OrderDirection.BID, 1000, price, RoundingDirection.DOWN)
print(value)                      # 850

ask_value = amount_to_value(OrderDirection.ASK, 1000, price, RoundingDirection.UP)

half = Decimal256.parse("0.5")
print(Decimal256.from_ratio(1, 3).to_uint_ceil())   # 1
```

## What this package does not do

It has only the arithmetic. It has no order book. It does not place,
cancel, match or claim orders. It keeps no tick or order state and
has no storage, no fees and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```