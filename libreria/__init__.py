"""Bookshop building blocks: strings, dates, articles, payment cards and users."""

__version__ = "0.1.0"