"""Movie domain service."""

import logfire

from cinema.domain.model import Movie
from cinema.domain.repository import MovieRepository
from cinema.domain.value import MovieId

from .base import Service


class MovieService(Service):
    """Read access to the movie catalog for comment validation and reporting."""

    def __init__(self, movie_repository: MovieRepository) -> None:
        """Initialize movie service.

        Args:
            movie_repository: Movie repository
        """
        self.movie_repository = movie_repository

    async def get_movie(self, movie_id: MovieId) -> Movie | None:
        """Get a movie by ID.

        Args:
            movie_id: Movie ID

        Returns:
            Movie if found, None otherwise
        """
        with logfire.span("movie_service.get_movie", movie_id=str(movie_id)):
            movie = await self.movie_repository.find_by_id(movie_id)
            if not movie:
                logfire.warn("Movie not found", movie_id=str(movie_id))
            return movie

    async def get_movies(self, movie_ids: list[MovieId]) -> dict[MovieId, Movie]:
        """Batch load movies keyed by ID."""
        if not movie_ids:
            return {}
        movies = await self.movie_repository.find_by_ids(list(set(movie_ids)))
        return {movie.id: movie for movie in movies}
