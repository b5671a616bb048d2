"""
Middleware Package

Contains application middleware components.
"""

from crudmount.middleware.request_log import RequestLogMiddleware

__all__ = ["RequestLogMiddleware"]
