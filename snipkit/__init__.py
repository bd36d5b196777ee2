"""
snipkit - Small Independent Collection, Text and Deferred Utilities

A library of self-contained helpers: string case formatting, rating
filters, sequence concatenation, a composed vehicle model, a tagged
value dispatcher, a most-expensive-item scan, a weekday classifier and
a deferred squaring computation built on asyncio futures.
"""

__version__ = "0.1.0"
__author__ = "snipkit Team"
