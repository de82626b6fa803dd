"""Coffee catalog: prices decorated by condiments.

SimpleCoffee (1.0) -> Milk (+0.5) -> Whip (+0.7) = 2.2, "Coffee, Milk, Whip".
Decimal keeps prices exact.
"""

from __future__ import annotations

from decimal import Decimal

from decochain.application.catalog.registry import Catalog
from decochain.domain.model.component import BaseComponent
from decochain.domain.model.decoration import Decoration

COFFEE_SEPARATOR = ", "

SIMPLE_COFFEE = BaseComponent(name="SimpleCoffee", value=Decimal("1.0"), text="Coffee")
MILK = Decoration(name="Milk", delta=Decimal("0.5"), suffix="Milk", separator=COFFEE_SEPARATOR)
WHIP = Decoration(name="Whip", delta=Decimal("0.7"), suffix="Whip", separator=COFFEE_SEPARATOR)


def coffee() -> Catalog:
    """Build the coffee catalog with SimpleCoffee, Milk, Whip."""
    return Catalog("coffee").add_base(SIMPLE_COFFEE).add_decoration(MILK).add_decoration(WHIP)
