"""Unit tests for product_api.core.security: bcrypt hashing and JWT issue/verify."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from product_api.core.config import Settings
from product_api.core.security import (
    ACCESS_TOKEN_LIFETIME,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from product_api.models import Role, User

SECRET = "unit-test-secret-0123456789abcdef0123"


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {"JWT_SECRET": SECRET, "DATABASE_URL": "sqlite://", "BCRYPT_ROUNDS": 4}
    values.update(overrides)
    return Settings(**values)


def _user(role: Role = Role.ADMIN) -> User:
    return User(id=7, username="alice", email="alice@example.com", role=role.value, password_hash="x")


class TestPasswordHashing(unittest.TestCase):
    """bcrypt hashes are salted and verify only the original password."""

    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("correct horse", rounds=4)
        self.assertNotEqual(hashed, "correct horse")
        self.assertTrue(verify_password("correct horse", hashed))
        self.assertFalse(verify_password("wrong horse", hashed))

    def test_same_password_gets_different_salt(self) -> None:
        self.assertNotEqual(hash_password("pw-12345", rounds=4), hash_password("pw-12345", rounds=4))

    def test_malformed_hash_is_rejected_not_raised(self) -> None:
        self.assertFalse(verify_password("anything", "not-a-bcrypt-hash"))


class TestAccessToken(unittest.TestCase):
    """Token claims, fixed lifetime and signature checks."""

    def test_claims(self) -> None:
        settings = _settings()
        token, _ = create_access_token(_user(), settings)
        payload = decode_access_token(token, settings)
        self.assertEqual(payload["sub"], "7")
        self.assertEqual(payload["unique_name"], "alice")
        self.assertEqual(payload["email"], "alice@example.com")
        self.assertEqual(payload["role"], "Admin")
        self.assertTrue(payload["jti"])

    def test_expires_exactly_one_hour_after_issue(self) -> None:
        settings = _settings()
        now = datetime.now(UTC).replace(microsecond=0)
        token, expires_at = create_access_token(_user(), settings, now=now)
        self.assertEqual(expires_at - now, timedelta(hours=1))
        self.assertEqual(ACCESS_TOKEN_LIFETIME, timedelta(hours=1))
        payload = decode_access_token(token, settings)
        self.assertEqual(payload["exp"] - payload["iat"], 3600)

    def test_each_token_has_unique_id(self) -> None:
        settings = _settings()
        first, _ = create_access_token(_user(), settings)
        second, _ = create_access_token(_user(), settings)
        self.assertNotEqual(
            decode_access_token(first, settings)["jti"],
            decode_access_token(second, settings)["jti"],
        )

    def test_expired_token_rejected(self) -> None:
        settings = _settings()
        token, _ = create_access_token(_user(), settings, now=datetime.now(UTC) - timedelta(hours=2))
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token, settings)

    def test_wrong_secret_rejected(self) -> None:
        token, _ = create_access_token(_user(), _settings())
        other = _settings(JWT_SECRET="another-secret-0123456789abcdef0123")
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(token, other)

    def test_issuer_and_audience_enforced_when_configured(self) -> None:
        settings = _settings(JWT_ISSUER="product-api", JWT_AUDIENCE="product-clients")
        token, _ = create_access_token(_user(), settings)
        payload = decode_access_token(token, settings)
        self.assertEqual(payload["iss"], "product-api")
        self.assertEqual(payload["aud"], "product-clients")
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token(
                token, _settings(JWT_ISSUER="someone-else", JWT_AUDIENCE="product-clients")
            )


if __name__ == "__main__":
    unittest.main()
