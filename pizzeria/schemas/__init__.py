"""This module contains the schemas for serialization/deserialization
of the order models."""

from .pizza import *
