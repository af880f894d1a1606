"""
File-system integration layer
"""

from .ipl_loader import load_ipl, read_cic

__all__ = [
    "load_ipl",
    "read_cic",
]
