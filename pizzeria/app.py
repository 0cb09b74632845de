"""Flask application factory."""

import logging
import logging.config

from flask import Flask

from pizzeria.cli import orders_cli
from pizzeria.extensions import ma

log = logging.getLogger(__name__)


def _logging_config(config):
    """Build the dictConfig for the application. The log file is only kept when configured."""
    handlers = {
        'stderr': {
            'class': 'logging.StreamHandler',
            'formatter': 'default',
            'level': 'DEBUG',
        },
    }
    if config.get('LOG_FILE'):
        handlers['logfile'] = {
            'class': 'logging.handlers.TimedRotatingFileHandler',
            'filename': config['LOG_FILE'],
            'formatter': 'default',
            'when': 'W0',  # will start a new file each Monday
            'backupCount': 5,  # will only keep the 5 latest files,
            'level': 'ERROR',
        }

    return {
        'version': 1,
        'formatters': {
            'default': {
                'datefmt': '%d/%m %H:%M:%S',
                'format': '[%(asctime)s] [%(levelname)8s] %(message)s (%(name)s:%(lineno)s)',
            }
        },
        'handlers': handlers,
        'root': {
            'level': config.get('LOG_LEVEL', 'DEBUG'),
            'handlers': list(handlers),
        },
        'disable_existing_loggers': False,
    }


def create_app(config='config/prod.py'):
    """Create Flask application with given configuration"""
    app = Flask(__name__, static_folder=None)
    app.config.from_pyfile(config)

    logging.config.dictConfig(_logging_config(app.config))

    # Initialize extensions/add-ons/plugins.
    ma.init_app(app)

    app.cli.add_command(orders_cli)
    log.debug('Application created with %s', config)
    return app
