"""Schemas for the Pizza, StuffedCrustPizza and SizedStuffedCrustPizza models."""

from marshmallow import post_load

from pizzeria.extensions import ma
from pizzeria.models import Pizza, StuffedCrustPizza, SizedStuffedCrustPizza


# pylint: disable=missing-docstring

__all__ = ('PizzaSchema', 'StuffedCrustPizzaSchema')


class PizzaSchema(ma.Schema):
    class Meta:
        ordered = True

    size = ma.Str(allow_none=True)
    toppings = ma.List(ma.Str())
    preference = ma.Str(allow_none=True)
    crust = ma.Str(allow_none=True)

    @post_load
    def make_pizza(self, data, **kwargs):  # pylint: disable=unused-argument
        return Pizza(data.get('size'),
                     data.get('toppings'),
                     data.get('preference'),
                     data.get('crust'))


class StuffedCrustPizzaSchema(PizzaSchema):
    stuffing = ma.Str(allow_none=True)

    @post_load
    def make_pizza(self, data, **kwargs):  # pylint: disable=unused-argument
        """Build the sized variant only when the payload mentions a size."""
        if 'size' not in data:
            return StuffedCrustPizza(data.get('toppings'),
                                     data.get('preference'),
                                     data.get('crust'),
                                     data.get('stuffing'))
        return SizedStuffedCrustPizza(data['size'],
                                      data.get('toppings'),
                                      data.get('preference'),
                                      data.get('crust'),
                                      data.get('stuffing'))
