"""pizzactl — direct-dough pizza calculator."""

__version__ = "0.1.0"
