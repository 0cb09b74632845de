"""The Pizza model."""

import logging

log = logging.getLogger(__name__)

SERVE_TEMPLATE = 'This is a {size} Pizza from parent '


class Pizza:
    """Pizza describes a single order: its size, toppings, dietary preference and crust.

    Nothing is validated, every attribute may be reassigned freely after construction."""

    def __init__(self, size, toppings, preference, crust):
        self.size = size
        self.toppings = toppings
        self.preference = preference
        self.crust = crust

    @property
    def serving_line(self):
        """The message printed when the pizza is served.
           A size that is undefined or was removed from the instance renders as an empty token."""
        size = getattr(self, 'size', None)
        return SERVE_TEMPLATE.format(size='' if size is None else size)

    def serve(self):
        """Print the serving message."""
        log.debug('Serving %r', self)
        print(self.serving_line)

    def __repr__(self):
        """Debug representation listing only the attributes the instance carries."""
        fields = ', '.join(f'{name}={value!r}' for name, value in vars(self).items())
        return f'{type(self).__name__}({fields})'
