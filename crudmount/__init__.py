"""
crudmount

Generic CRUD-over-HTTP service for organizations, users and tags.
"""

__version__ = "0.1.0"
