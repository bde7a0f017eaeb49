"""Strongly typed identifiers for Dev Connector domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ProfileId = NewType("ProfileId", UUID)
ExperienceId = NewType("ExperienceId", UUID)
EducationId = NewType("EducationId", UUID)
PostId = NewType("PostId", UUID)
LikeId = NewType("LikeId", UUID)
CommentId = NewType("CommentId", UUID)


def parse_id(value: str) -> UUID:
    """Parse an identifier supplied by a client.

    Args:
        value: Identifier string from a path or payload

    Returns:
        Parsed UUID

    Raises:
        ValueError: If the value is not a well-formed identifier
    """
    return UUID(value)
