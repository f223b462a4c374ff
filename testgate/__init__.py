"""testgate: checks that CI-enabled repositories also have a local test path."""

__version__ = "0.1.0"
