"""Reference-guided DNA read assembly with FM-index and linear read mapping, plus test data generation."""

__version__ = "0.1.0"