"""MedLens - medical document normalization, lab trends and health alerts."""

__version__ = "0.1.0"
