"""Reference-data repository interface (schools, school years, descriptors)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from src.domain.models.enums import DescriptorKind
from src.domain.models.resources import Descriptor


class ReferenceRepository(ABC):
    """Existence checks and explicit lookups for foreign-key targets.

    Resource services call these instead of navigating lazy relationships,
    so every reference query is visible at the call site.
    """

    @abstractmethod
    async def school_exists(self, school_id: int) -> bool:
        """True when the school exists."""

    @abstractmethod
    async def school_year_exists(self, school_year: int) -> bool:
        """True when the school year type exists."""

    @abstractmethod
    async def descriptor_exists(self, kind: DescriptorKind, descriptor_id: int) -> bool:
        """True when descriptor_id is a descriptor of the given kind."""

    @abstractmethod
    async def get_descriptors(self, descriptor_ids: Iterable[int]) -> dict[int, Descriptor]:
        """Return the descriptors with the given ids, keyed by id (missing ids omitted)."""
