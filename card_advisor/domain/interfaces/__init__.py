"""
Domain Interfaces (Ports)
"""

from .repositories import CardRepository

__all__ = [
    "CardRepository",
]
