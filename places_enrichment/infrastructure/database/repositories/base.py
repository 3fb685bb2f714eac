"""Base repository interface for places enrichment.

Implements Repository pattern with Dependency Inversion principle.
All concrete repositories inherit from BaseRepository.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from supabase import Client

from places_enrichment.infrastructure.database.client import SupabaseClient

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository for database operations.

    Provides dependency inversion - depend on repository interface, not concrete tables.
    """

    def __init__(self, client: Optional[Client] = None):
        """Initialize repository with Supabase client.

        Args:
            client: Explicit Supabase client (defaults to the shared singleton)
        """
        self._override = client
        self._client: SupabaseClient = SupabaseClient()

    @property
    def db(self) -> Client:
        """Get Supabase client instance."""
        if self._override is not None:
            return self._override
        return self._client.client

    @abstractmethod
    def table_name(self) -> str:
        """Return the table name this repository manages."""
        pass
