"""Movie entity (read-only collaborator of the comment engine)."""

from datetime import datetime

from pydantic import Field

from cinema.domain.model.common import DomainModel
from cinema.domain.value import MovieId


class Movie(DomainModel):
    """Catalog movie that comments are attached to."""

    id: MovieId
    name: str = Field(min_length=1, max_length=500)
    slug: str = Field(min_length=1, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
