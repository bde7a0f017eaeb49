"""Unit tests for password hashing and avatar derivation."""

import hashlib

from connector.util.avatar import gravatar_url
from connector.util.password import hash_password, verify_password


class TestPasswordHashing:
    def test_hash_verifies_against_original(self):
        hashed = hash_password("longenough", rounds=4)

        assert hashed != "longenough"
        assert verify_password("longenough", hashed)

    def test_wrong_password_does_not_verify(self):
        hashed = hash_password("longenough", rounds=4)

        assert not verify_password("longenougH", hashed)

    def test_same_password_hashes_differently(self):
        first = hash_password("longenough", rounds=4)
        second = hash_password("longenough", rounds=4)

        assert first != second

    def test_cost_factor_is_recorded_in_hash(self):
        assert hash_password("longenough", rounds=5).startswith("$2b$05$")

    def test_overlong_password_still_hashes(self):
        password = "x" * 100

        assert verify_password(password, hash_password(password, rounds=4))

    def test_non_bcrypt_hash_does_not_verify(self):
        assert not verify_password("longenough", "plaintext")


class TestGravatarUrl:
    def test_url_format(self):
        digest = hashlib.md5(b"ann@x.com").hexdigest()

        assert gravatar_url("ann@x.com") == (
            f"//www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"
        )

    def test_email_is_normalized_before_hashing(self):
        assert gravatar_url("  Ann@X.com ") == gravatar_url("ann@x.com")

    def test_different_emails_differ(self):
        assert gravatar_url("ann@x.com") != gravatar_url("bob@x.com")
