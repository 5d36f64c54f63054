"""Generic repository interface (Dependency Inversion Principle).

Service-layer code depends on these abstractions, never on the Django
ORM directly.  The storefront only ever reads the catalog, so the base
contract is read-only and keyed by the public slug.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IReadRepository(ABC, Generic[T]):
    """Base read-only repository contract.

    Type parameter ``T`` is the entity managed by the repository
    (e.g. ``Product``).
    """

    @abstractmethod
    def get_by_slug(self, slug: str) -> Optional[T]:
        """Retrieve an entity by its public slug, or ``None``."""
