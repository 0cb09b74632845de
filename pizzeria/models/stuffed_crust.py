"""The stuffed-crust variants of the Pizza model."""

from pizzeria.models.pizza import Pizza

TEST_LINE = 'This is a test method from child'


class StuffedCrustPizza(Pizza):
    """A stuffed-crust pizza ordered without a size.

    The parent is constructed with an undefined size, which is then
    deleted from the instance, so the object carries no `size` at all."""

    def __init__(self, toppings, preference, crust, stuffing):
        super().__init__(None, toppings, preference, crust)
        self.stuffing = stuffing
        del self.size


class SizedStuffedCrustPizza(Pizza):
    """A stuffed-crust pizza that keeps the size it was ordered with."""

    def __init__(self, size, toppings, preference, crust, stuffing):
        super().__init__(size, toppings, preference, crust)
        self.stuffing = stuffing

    def test(self):
        print(TEST_LINE)

    def describe(self):
        """Serve the pizza the way the parent does."""
        super().serve()
