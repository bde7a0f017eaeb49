"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Embedded documents
are dumped in JSON mode for their JSONB columns.
"""

from typing import Any, Dict

from connector.domain.model import Post, Profile, User

PROFILE_DOCUMENT_FIELDS = ("skills", "social", "experience", "education")
POST_DOCUMENT_FIELDS = ("likes", "comments")


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User.model_validate(row)


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict, with JSONB columns already decoded

    Returns:
        Profile domain model
    """
    return Profile.model_validate(row)


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    data = profile.model_dump(exclude=set(PROFILE_DOCUMENT_FIELDS))
    documents = profile.model_dump(mode="json", include=set(PROFILE_DOCUMENT_FIELDS))
    return {**data, **documents}


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post.model_validate(row)


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    data = post.model_dump(exclude=set(POST_DOCUMENT_FIELDS))
    documents = post.model_dump(mode="json", include=set(POST_DOCUMENT_FIELDS))
    return {**data, **documents}
