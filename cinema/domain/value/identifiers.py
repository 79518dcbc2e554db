"""Typed identifiers for users, movies and comments.

All three are UUIDs assigned by the store; the NewTypes only keep them
from being passed in each other's place.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
MovieId = NewType("MovieId", UUID)
# Also used for parent and root references inside the comment tree.
CommentId = NewType("CommentId", UUID)
