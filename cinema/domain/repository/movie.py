"""Movie repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from cinema.domain.model.movie import Movie
from cinema.domain.value import MovieId


class MovieRepository(ABC):
    """Repository for Movie entity."""

    @abstractmethod
    async def find_by_id(self, movie_id: MovieId) -> Optional[Movie]:
        """Find a movie by ID.

        Args:
            movie_id: The movie's unique identifier

        Returns:
            The movie if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, movie_ids: List[MovieId]) -> List[Movie]:
        """Find several movies at once. Unknown IDs are skipped."""
        pass

    @abstractmethod
    async def save(self, movie: Movie) -> Movie:
        """Save a movie (create or update)."""
        pass
