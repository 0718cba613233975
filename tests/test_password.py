"""
Tests for argon2 password hashing.
"""

import pytest

from auth.errors import HashingError
from auth.password import check_password_hash, hash_password


class TestHashPassword:
    def test_hash_is_argon2id(self):
        hashed = hash_password("correct horse battery staple")
        assert hashed.startswith("$argon2id$")
        assert "correct horse" not in hashed

    def test_same_password_hashes_differ(self):
        assert hash_password("hunter2") != hash_password("hunter2")

    def test_empty_password_rejected(self):
        with pytest.raises(HashingError):
            hash_password("")


class TestCheckPasswordHash:
    def test_correct_password(self):
        hashed = hash_password("04234")
        assert check_password_hash("04234", hashed) is True

    def test_wrong_password(self):
        hashed = hash_password("04234")
        assert check_password_hash("04235", hashed) is False

    def test_password_of_other_hash(self):
        first = hash_password("password-one")
        second = hash_password("password-two")
        assert check_password_hash("password-one", second) is False
        assert check_password_hash("password-two", first) is False

    def test_empty_password_does_not_match(self):
        hashed = hash_password("not empty")
        assert check_password_hash("", hashed) is False

    def test_garbage_hash_raises(self):
        with pytest.raises(HashingError):
            check_password_hash("whatever", "not-a-hash")

    def test_foreign_algorithm_hash_raises(self):
        bcrypt_hash = "$2b$12$KIXQJ0Fz5bPq1m1vO3n0UeY3o8q7h6b3Hn7Y2lN5sTq1Jv0yQm5bW"
        with pytest.raises(HashingError):
            check_password_hash("whatever", bcrypt_hash)

    def test_corrupted_parameters_raise(self):
        parts = hash_password("secret").split("$")
        parts[3] = "m=lots,t=many,p=some"
        with pytest.raises(HashingError):
            check_password_hash("secret", "$".join(parts))
