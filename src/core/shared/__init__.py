"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Classes base Entity e ValueObject
"""

from .exceptions import (
    DomainException,
    ValidationError,
)
from .primitives import Entity, ValueObject

__all__ = [
    "DomainException",
    "ValidationError",
    "Entity",
    "ValueObject",
]
