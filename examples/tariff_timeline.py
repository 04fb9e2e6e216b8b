"""
Tariff Timeline Example
=======================

Price changes recorded as start dates only, demonstrating:
- Chain intervals with a payload
- Turning a chain into a gapless sequence
- Looking up the tariff in effect on a date
- Enclosing intervals and Allen relations
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from allenalgebra import (
    AllenRelation,
    ChainInterval,
    Interval,
    chain_to_gapless_left_definite_sequence,
    is_chain,
    lt_compare,
    minimal_enclosing,
)


# ============================================================================
# Define the chain
# ============================================================================

@dataclass(frozen=True)
class Tariff(ChainInterval[date]):
    """Price per kWh from `start` until the next tariff starts."""
    price: Decimal


TARIFFS = [
    Tariff(date(2024, 7, 1), Decimal("0.31")),
    Tariff(date(2023, 1, 1), Decimal("0.27")),
    Tariff(date(2024, 1, 1), Decimal("0.29")),
]


def tariff_on(day: date, tariffs: list[Tariff]) -> Decimal | None:
    """The price in effect on `day`, or None before the first tariff."""
    for period in chain_to_gapless_left_definite_sequence(tariffs):
        starts_before = lt_compare(period.start, day) <= 0
        ends_after = period.end is None or lt_compare(day, period.end) < 0
        if starts_before and ends_after:
            return period.price
    return None


# ============================================================================
# Example
# ============================================================================

def main():
    assert is_chain(TARIFFS)

    print("Tariff periods:")
    for period in chain_to_gapless_left_definite_sequence(TARIFFS):
        print(f"  {period.start} .. {period.end or '...'}: {period.price}")
    print()

    for day in (date(2022, 6, 1), date(2023, 6, 1), date(2024, 3, 15), date(2030, 1, 1)):
        print(f"Price on {day}: {tariff_on(day, TARIFFS)}")
    print()

    contracts = [
        Interval(date(2023, 3, 1), date(2023, 9, 1)),
        Interval(date(2023, 9, 1), date(2024, 2, 1)),
    ]
    print(f"Contracts span: {minimal_enclosing(contracts)}")
    print(f"First vs second contract: {AllenRelation.relation(*contracts)}")


if __name__ == "__main__":
    main()
