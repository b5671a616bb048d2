"""
Data Access Layer Module Initialization
"""

from crudmount.repositories.base import Storer
from crudmount.repositories.filter import Filter

__all__ = [
    "Storer",
    "Filter",
]
