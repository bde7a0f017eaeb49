"""Unit tests for row/model mappers."""

from datetime import date, datetime
from uuid import UUID, uuid4

from connector.domain.model import Comment, Experience, Like, Post, Profile
from connector.domain.value import CommentId, Handle, PostId, ProfileId, UserId
from connector.persistence.mappers import post_to_dict, profile_to_dict, row_to_profile


def test_profile_documents_are_json_ready():
    """Embedded lists are plain JSON while key columns keep their types."""
    profile = Profile(
        id=ProfileId(uuid4()),
        user_id=UserId(uuid4()),
        handle=Handle("ann"),
        status="Developer",
        skills=["go"],
        experience=[
            Experience(title="Engineer", company="Acme", from_date=date(2020, 1, 1))
        ],
    )

    data = profile_to_dict(profile)

    assert isinstance(data["user_id"], UUID)
    assert data["handle"] == "ann"
    assert isinstance(data["experience"][0]["id"], str)
    assert data["experience"][0]["from_date"] == "2020-01-01"
    assert data["social"]["twitter"] is None

    assert row_to_profile(data) == profile


def test_post_documents_are_json_ready():
    user_id = UserId(uuid4())
    post = Post(
        id=PostId(uuid4()),
        user_id=user_id,
        text="Hello",
        name="Ann",
        avatar=None,
        likes=[Like(user_id=user_id)],
        comments=[
            Comment(
                id=CommentId(uuid4()),
                user_id=user_id,
                text="Nice",
                name="Ann",
                avatar=None,
                created_at=datetime(2024, 1, 1, 12, 0),
            )
        ],
        created_at=datetime(2024, 1, 1, 11, 0),
    )

    data = post_to_dict(post)

    assert isinstance(data["id"], UUID)
    assert data["likes"][0]["user_id"] == str(user_id)
    assert data["comments"][0]["created_at"] == "2024-01-01T12:00:00"
