"""Super Trunfo card model and three terminal card comparison games."""

__version__ = "0.1.0"