"""Application configuration for production."""

import os

from pizzeria.config.common import *


LOG_LEVEL = 'INFO'
LOG_FILE = os.getenv('PIZZERIA_LOG_FILE')
