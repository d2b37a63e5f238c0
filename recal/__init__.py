"""Elementary calculus from first principles, with simple PNG plotting."""

__version__ = "0.1.0"