"""
Type aliases for the memspace library.

Addresses and lengths are plain integers in a simulated word-addressed space.
"""

from typing import NewType

Address = NewType('Address', int)
WordCount = NewType('WordCount', int)
