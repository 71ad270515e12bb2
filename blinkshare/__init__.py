"""BlinkShare guild, role and payment records."""

__version__ = "0.1.0"
