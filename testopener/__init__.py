"""testopener - find or generate the test file for an implementation file."""

__version__ = "0.1.0"
