"""This module contains all the order models."""

from .pizza import Pizza, SERVE_TEMPLATE
from .stuffed_crust import StuffedCrustPizza, SizedStuffedCrustPizza, TEST_LINE


__all__ = (
    'Pizza',
    'SERVE_TEMPLATE',
    'StuffedCrustPizza',
    'SizedStuffedCrustPizza',
    'TEST_LINE',
)
