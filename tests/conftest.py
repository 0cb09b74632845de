'''Fixtures defined for all tests.'''

from typing import Generator

from flask import Flask
from flask.testing import FlaskCliRunner
import pytest

from pizzeria.app import create_app

configs = [
    ('config/dev.py', ' dev'),
    ('config/prod.py', 'prod'),
]
params, ids = zip(*configs)


@pytest.fixture(scope='session', params=params, ids=ids)
def app(request: pytest.FixtureRequest) -> Generator[Flask, None, None]:
    '''Create a Flask app with all possible configurations.'''
    app = create_app(config=request.param)
    app.config['TESTING'] = True
    with app.app_context():
        yield app


@pytest.fixture
def runner(app: Flask) -> FlaskCliRunner:
    '''Spin up a CLI runner for the current Flask app.'''
    return app.test_cli_runner()
