"""E2E tests for posts, likes and comments."""

from uuid import uuid4

import pytest

from tests.harness import auth, create_client_fixture, register

client = create_client_fixture()


@pytest.fixture
def tokens(client):
    ann = register(client)
    bob = register(client, name="Bob", email="bob@x.com")
    return ann, bob


def _post(client, token, text="Hello"):
    response = client.post("/api/posts", json={"text": text}, headers=auth(token))
    assert response.status_code == 200, response.text
    return response.json()


class TestPosts:
    def test_create(self, client, tokens):
        ann, _ = tokens

        post = _post(client, ann)

        assert post["text"] == "Hello"
        assert post["name"] == "Ann"
        assert post["likes"] == []
        assert post["comments"] == []
        assert "date" in post

    def test_text_required(self, client, tokens):
        ann, _ = tokens

        response = client.post("/api/posts", json={"text": "  "}, headers=auth(ann))

        assert response.status_code == 400
        assert response.json()["errors"][0] == {
            "msg": "Text is required",
            "param": "text",
            "location": "body",
        }

    def test_list_newest_first(self, client, tokens):
        ann, bob = tokens
        _post(client, ann, "first")
        _post(client, bob, "second")

        response = client.get("/api/posts", headers=auth(ann))

        assert response.status_code == 200
        assert [p["text"] for p in response.json()] == ["second", "first"]

    def test_list_requires_token(self, client):
        assert client.get("/api/posts").status_code == 401

    def test_get_by_id(self, client, tokens):
        ann, _ = tokens
        post = _post(client, ann)

        response = client.get(f"/api/posts/{post['id']}", headers=auth(ann))

        assert response.status_code == 200
        assert response.json()["id"] == post["id"]

    @pytest.mark.parametrize("post_id", ["malformed", str(uuid4())])
    def test_get_missing(self, client, tokens, post_id):
        ann, _ = tokens

        response = client.get(f"/api/posts/{post_id}", headers=auth(ann))

        assert response.status_code == 404
        assert response.json() == {"msg": "Post not found"}


class TestDeletePost:
    def test_author_deletes(self, client, tokens):
        ann, _ = tokens
        post = _post(client, ann)

        response = client.delete(f"/api/posts/{post['id']}", headers=auth(ann))

        assert response.status_code == 200
        assert response.json() == {"msg": "Post removed"}
        assert client.get(f"/api/posts/{post['id']}", headers=auth(ann)).status_code == 404

    def test_other_user_rejected(self, client, tokens):
        ann, bob = tokens
        post = _post(client, ann)

        response = client.delete(f"/api/posts/{post['id']}", headers=auth(bob))

        assert response.status_code == 401
        assert response.json() == {"msg": "User is not authorised"}


class TestLikes:
    def test_like_then_unlike(self, client, tokens):
        ann, bob = tokens
        post = _post(client, ann)

        client.put(f"/api/posts/like/{post['id']}", headers=auth(ann))
        liked = client.put(f"/api/posts/like/{post['id']}", headers=auth(bob))
        assert liked.status_code == 200
        assert len(liked.json()) == 2

        unliked = client.put(f"/api/posts/unlike/{post['id']}", headers=auth(bob))
        assert unliked.status_code == 200
        assert len(unliked.json()) == 1

    def test_like_twice(self, client, tokens):
        ann, _ = tokens
        post = _post(client, ann)
        client.put(f"/api/posts/like/{post['id']}", headers=auth(ann))

        response = client.put(f"/api/posts/like/{post['id']}", headers=auth(ann))

        assert response.status_code == 400
        assert response.json() == {"msg": "Post already liked"}
        likes = client.get(f"/api/posts/{post['id']}", headers=auth(ann)).json()["likes"]
        assert len(likes) == 1

    def test_unlike_without_like(self, client, tokens):
        ann, bob = tokens
        post = _post(client, ann)
        client.put(f"/api/posts/like/{post['id']}", headers=auth(bob))

        response = client.put(f"/api/posts/unlike/{post['id']}", headers=auth(ann))

        assert response.status_code == 400
        assert response.json() == {"msg": "Post has not been liked"}
        likes = client.get(f"/api/posts/{post['id']}", headers=auth(ann)).json()["likes"]
        assert len(likes) == 1

    def test_like_missing_post(self, client, tokens):
        ann, _ = tokens

        response = client.put("/api/posts/like/malformed", headers=auth(ann))

        assert response.status_code == 404


class TestComments:
    def test_add_and_remove(self, client, tokens):
        ann, bob = tokens
        post = _post(client, ann)

        added = client.post(
            f"/api/posts/comment/{post['id']}",
            json={"text": "Nice"},
            headers=auth(bob),
        )
        assert added.status_code == 200
        comment = added.json()[0]
        assert comment["text"] == "Nice"
        assert comment["name"] == "Bob"

        removed = client.delete(
            f"/api/posts/comment/{post['id']}/{comment['id']}", headers=auth(bob)
        )
        assert removed.status_code == 200
        assert removed.json() == []

    def test_newest_comment_first(self, client, tokens):
        ann, bob = tokens
        post = _post(client, ann)
        client.post(
            f"/api/posts/comment/{post['id']}", json={"text": "one"}, headers=auth(ann)
        )

        response = client.post(
            f"/api/posts/comment/{post['id']}", json={"text": "two"}, headers=auth(bob)
        )

        assert [c["text"] for c in response.json()] == ["two", "one"]

    def test_remove_second_of_two_by_same_author(self, client, tokens):
        ann, bob = tokens
        post = _post(client, ann)
        url = f"/api/posts/comment/{post['id']}"
        client.post(url, json={"text": "first"}, headers=auth(bob))
        second = client.post(url, json={"text": "second"}, headers=auth(bob)).json()[0]

        response = client.delete(f"{url}/{second['id']}", headers=auth(bob))

        assert response.status_code == 200
        assert [c["text"] for c in response.json()] == ["first"]

    def test_other_user_cannot_remove(self, client, tokens):
        ann, bob = tokens
        post = _post(client, ann)
        comment = client.post(
            f"/api/posts/comment/{post['id']}", json={"text": "Nice"}, headers=auth(bob)
        ).json()[0]

        response = client.delete(
            f"/api/posts/comment/{post['id']}/{comment['id']}", headers=auth(ann)
        )

        assert response.status_code == 401
        assert response.json() == {"msg": "User not authorised"}

    def test_unknown_comment(self, client, tokens):
        ann, _ = tokens
        post = _post(client, ann)

        response = client.delete(
            f"/api/posts/comment/{post['id']}/{uuid4()}", headers=auth(ann)
        )

        assert response.status_code == 404
        assert response.json() == {"msg": "Comment does not exist"}

    def test_comment_on_missing_post(self, client, tokens):
        ann, _ = tokens

        response = client.post(
            f"/api/posts/comment/{uuid4()}", json={"text": "Nice"}, headers=auth(ann)
        )

        assert response.status_code == 404
        assert response.json() == {"msg": "Post not found"}
