"""Casino Hub: static casino content served over REST and browsed in a single page."""

__version__ = "0.1.0"
