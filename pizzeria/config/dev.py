"""Application configuration for local development."""

from pizzeria.config.common import *


LOG_LEVEL = 'DEBUG'
LOG_FILE = None
