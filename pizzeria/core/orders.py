"""Helpers for dumping, loading and serving orders."""

import json
import logging

from pizzeria.models import Pizza, StuffedCrustPizza, SizedStuffedCrustPizza
from pizzeria.schemas import PizzaSchema, StuffedCrustPizzaSchema

log = logging.getLogger(__name__)

DEMO_VARIANTS = ('A', 'B')


def schema_for(order: Pizza):
    """Pick the schema matching the concrete order type."""
    if isinstance(order, (StuffedCrustPizza, SizedStuffedCrustPizza)):
        return StuffedCrustPizzaSchema()
    return PizzaSchema()


def dump_order(order: Pizza) -> str:
    """Serialize an order into a JSON object. Missing attributes are left out."""
    return json.dumps(schema_for(order).dump(order))


def load_order(payload: dict) -> Pizza:
    """Build an order from its JSON representation.
       Raises marshmallow.ValidationError if the payload is malformed."""
    if 'stuffing' in payload:
        return StuffedCrustPizzaSchema().load(payload)
    return PizzaSchema().load(payload)


def serve_order(order: Pizza):
    if isinstance(order, SizedStuffedCrustPizza):
        order.describe()
    else:
        order.serve()


def run_demo(variant='B'):
    """Build the two sample orders, print their state and serve them.

    Variant A orders a stuffed crust without a size and only serves the first order.
    Variant B keeps the size and additionally describes the second order."""
    variant = variant.upper()
    if variant not in DEMO_VARIANTS:
        raise ValueError(f'Unknown demo variant "{variant}".')

    order1 = Pizza('Medium', ['Tomato , Cheese'], 'Veg', 'Thin')
    if variant == 'A':
        order2 = StuffedCrustPizza(['mushrooms', 'cheese'], 'Veg', 'Thick', 'Mozarella')
    else:
        order2 = SizedStuffedCrustPizza('small', ['mushrooms', 'cheese'], 'Veg', 'Thick', 'Mozarella')
    log.debug('Demo variant %s: %r, %r', variant, order1, order2)

    print(dump_order(order1))
    print(dump_order(order2))

    order1.serve()
    if variant == 'B':
        order2.describe()
    return order1, order2
