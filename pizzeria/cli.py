"""Flask CLI commands related to orders.

- flask orders demo [--variant A|B]
- flask orders serve PAYLOAD
"""

import json
import logging

import click
from flask import current_app
from flask.cli import AppGroup
from marshmallow import ValidationError

from pizzeria.core.orders import DEMO_VARIANTS, dump_order, load_order, run_demo, serve_order

log = logging.getLogger(__name__)

orders_cli = AppGroup('orders', help='Build, print and serve pizza orders.')


@orders_cli.command('demo')
@click.option('--variant', type=click.Choice(DEMO_VARIANTS, case_sensitive=False),
              help='A drops the size of the stuffed crust order, B keeps it.')
def demo(variant):
    """Print and serve the two sample orders."""
    if variant is None:
        variant = str(current_app.config['DEMO_VARIANT'])
        if variant.upper() not in DEMO_VARIANTS:
            log.error('Unknown demo variant configured: %r', variant)
            raise click.BadParameter(f'Unknown demo variant "{variant}" in DEMO_VARIANT.',
                                     param_hint='--variant')
    run_demo(variant)


@orders_cli.command('serve')
@click.argument('payload')
def serve(payload):
    """Load an order from a JSON object, print it and serve it."""
    try:
        data = json.loads(payload)
    except ValueError as err:
        log.error('Malformed order payload: %s', err)
        raise click.BadParameter('The payload should be in JSON.', param_hint='PAYLOAD')

    if not isinstance(data, dict):
        log.error('Order payload is not an object: %r', data)
        raise click.BadParameter('The payload should be a JSON object.', param_hint='PAYLOAD')

    try:
        order = load_order(data)
    except ValidationError as err:
        log.error('Rejected order payload: %s', err.messages)
        raise click.BadParameter(json.dumps(err.messages), param_hint='PAYLOAD')

    print(dump_order(order))
    serve_order(order)
