"""The run script.

May be executed directly to print and serve the sample orders
or fed to the Flask CLI using `flask --app run orders demo`."""

import os

from pizzeria.app import create_app
from pizzeria.core.orders import run_demo


if __name__ == '__main__':
    app = create_app('config/dev.py')
    with app.app_context():
        run_demo(app.config['DEMO_VARIANT'])
else:
    if os.environ.get('FLASK_ENV') == 'development':
        config = 'config/dev.py'
    else:
        config = 'config/prod.py'
    app = create_app(config)
