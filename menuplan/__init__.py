"""Weekly dinner planning from a personal recipe collection."""
__version__ = "0.1.0"
