# File: app/core/exceptions.py

"""
Failures raised by the service layer.

Routers catch these and turn them into HTTP responses; nothing below the
API layer knows about status codes.
"""


class ServiceError(Exception):
    """Base class for every failure a service function can raise."""


class NotFoundError(ServiceError):
    def __init__(self, entity: str, key: object):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found with id: {key}")


class PersistenceError(ServiceError):
    """The storage layer rejected a write (constraint violation, lost connection, ...)."""
