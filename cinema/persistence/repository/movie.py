"""PostgreSQL implementation of Movie repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinema.domain.model import Movie
from cinema.domain.repository import MovieRepository
from cinema.domain.value import MovieId
from cinema.persistence.mappers import movie_to_dict, row_to_movie
from cinema.persistence.tables import movies_table


class PostgresMovieRepository(MovieRepository):
    """PostgreSQL implementation of MovieRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, movie_id: MovieId) -> Optional[Movie]:
        stmt = select(movies_table).where(movies_table.c.id == movie_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_movie(dict(row)) if row else None

    async def find_by_ids(self, movie_ids: List[MovieId]) -> List[Movie]:
        if not movie_ids:
            return []
        stmt = select(movies_table).where(movies_table.c.id.in_(movie_ids))
        result = await self.session.execute(stmt)
        return [row_to_movie(dict(row)) for row in result.mappings().all()]

    async def save(self, movie: Movie) -> Movie:
        existing = await self.find_by_id(movie.id)
        movie_dict = movie_to_dict(movie)

        if existing:
            stmt = (
                movies_table.update()
                .where(movies_table.c.id == movie.id)
                .values(**movie_dict)
            )
        else:
            stmt = movies_table.insert().values(**movie_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return movie
