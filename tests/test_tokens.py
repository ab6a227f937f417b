import jwt
import pytest

from jobboard.core.auth.passwords import PasswordHasher
from jobboard.core.auth.tokens import JwtConfig, TokenService, extract_bearer
from jobboard.core.errors import BadRequestError

SECRET = "jobboard-test-secret-key-0123456789abcdef"


def test_roundtrip_claims():
    svc = TokenService(JwtConfig(signing_key=SECRET))
    token = svc.create({"username": "testAdmin", "isAdmin": True})

    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert claims["username"] == "testAdmin"
    assert claims["isAdmin"] is True
    assert isinstance(claims["iat"], int)
    assert "exp" not in claims

    p = svc.verify(token)
    assert p.username == "testAdmin"
    assert p.is_admin is True
    assert p.issued_at == claims["iat"]


def test_wrong_signature_is_anonymous():
    bad = jwt.encode({"username": "test", "isAdmin": False}, "wrong-secret-wrong-secret-wrong-secret", algorithm="HS256")
    svc = TokenService(JwtConfig(signing_key=SECRET))
    assert svc.verify(bad) is None


def test_garbage_and_missing_tokens_are_anonymous():
    svc = TokenService(JwtConfig(signing_key=SECRET))
    assert svc.verify(None) is None
    assert svc.verify("not-a-jwt") is None


def test_expired_token_is_anonymous():
    expired = jwt.encode({"username": "u1", "isAdmin": False, "iat": 1, "exp": 2}, SECRET, algorithm="HS256")
    svc = TokenService(JwtConfig(signing_key=SECRET))
    assert svc.verify(expired) is None


def test_ttl_adds_exp():
    svc = TokenService(JwtConfig(signing_key=SECRET, ttl_seconds=60))
    claims = jwt.decode(svc.create({"username": "u1"}), SECRET, algorithms=["HS256"])
    assert claims["exp"] == claims["iat"] + 60


def test_extract_bearer():
    assert extract_bearer("Bearer abc") == "abc"
    assert extract_bearer("bearer abc ") == "abc"
    assert extract_bearer("abc") is None
    assert extract_bearer("Basic abc") is None
    assert extract_bearer(None) is None


def test_password_hash_and_verify():
    h = PasswordHasher(work_factor=4)
    hashed = h.hash("password1")
    assert hashed != "password1"
    assert h.verify("password1", hashed)
    assert not h.verify("password2", hashed)
    assert not h.verify("password1", "not-a-bcrypt-hash")


def test_password_over_72_bytes_is_rejected_not_truncated():
    h = PasswordHasher(work_factor=4)
    with pytest.raises(BadRequestError):
        h.hash("\U0001F600" * 19)
    assert h.verify("\U0001F600" * 19, h.hash("\U0001F600" * 18)) is False
