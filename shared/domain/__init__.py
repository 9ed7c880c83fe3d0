# Shared domain module
from .base_entity import BaseEntity, AggregateRoot, utcnow
from .base_value_object import ValueObject
from .exceptions import (
    DomainException,
    NotFoundError,
    ValidationError,
    UnauthenticatedError,
    DependencyError,
)

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'utcnow',
    'ValueObject',
    'DomainException',
    'NotFoundError',
    'ValidationError',
    'UnauthenticatedError',
    'DependencyError',
]
