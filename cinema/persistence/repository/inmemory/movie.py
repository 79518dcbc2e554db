"""In-memory movie repository for testing."""

from typing import Optional

from cinema.domain.model.movie import Movie
from cinema.domain.repository.movie import MovieRepository
from cinema.domain.value import MovieId


class InMemoryMovieRepository(MovieRepository):
    """In-memory implementation of MovieRepository for testing."""

    def __init__(self) -> None:
        self._movies: dict[MovieId, Movie] = {}

    async def find_by_id(self, movie_id: MovieId) -> Optional[Movie]:
        return self._movies.get(movie_id)

    async def find_by_ids(self, movie_ids: list[MovieId]) -> list[Movie]:
        return [self._movies[m] for m in movie_ids if m in self._movies]

    async def save(self, movie: Movie) -> Movie:
        self._movies[movie.id] = movie
        return movie
