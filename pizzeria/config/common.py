"""The base application configuration."""


LOG_LEVEL = 'DEBUG'
LOG_FILE = None

DEMO_VARIANT = 'B'
