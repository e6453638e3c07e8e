from uuid import uuid4

from jose import jwt

from homestock.core.config import settings
from homestock.core.security import hash_password, verify_password
from homestock.services import auth_service


def test_password_hash_is_salted():
    first = hash_password("password123")
    second = hash_password("password123")

    assert first != second
    assert first.startswith("$2b$04$")
    assert verify_password("password123", first)
    assert not verify_password("password124", first)


def test_token_carries_only_subject_and_nonce():
    user_id = uuid4()

    token = auth_service.create_access_token(user_id)
    claims = jwt.get_unverified_claims(token)

    assert set(claims) == {"sub", "jti"}
    assert claims["sub"] == str(user_id)
    assert auth_service.create_access_token(user_id) != token


def test_token_expiry_when_configured(mocker):
    mocker.patch.object(settings, "JWT_EXPIRATION", 3600)

    token = auth_service.create_access_token(uuid4())

    assert "exp" in jwt.get_unverified_claims(token)
    assert auth_service.decode_token(token).exp is not None


def test_decode_rejects_foreign_signature():
    token = jwt.encode({"sub": str(uuid4())}, "another-secret", algorithm="HS256")
    assert auth_service.decode_token(token) is None


def test_decode_rejects_missing_subject():
    token = jwt.encode({"jti": "x"}, settings.JWT_SECRET, algorithm="HS256")
    assert auth_service.decode_token(token) is None


def test_resolve_rejects_non_uuid_subject(db):
    token = jwt.encode({"sub": "42"}, settings.JWT_SECRET, algorithm="HS256")
    assert auth_service.resolve_token(db, token) is None


def test_revoke_token(db, make_account):
    account = make_account("carol@example.com")
    user = auth_service.get_user_by_id(db, account.id)

    assert auth_service.resolve_token(db, account.token).id == account.id
    assert auth_service.revoke_token(db, user, account.token) is True
    assert auth_service.resolve_token(db, account.token) is None
    assert auth_service.revoke_token(db, user, account.token) is False


def test_revoke_all_tokens(db, make_account):
    account = make_account("dave@example.com")
    user = auth_service.get_user_by_id(db, account.id)
    auth_service.issue_token(db, user)

    assert auth_service.revoke_all_tokens(db, user) == 2
    assert auth_service.resolve_token(db, account.token) is None


def test_authenticate_user(db, make_account):
    account = make_account("erin@example.com", password="correct-horse")

    assert auth_service.authenticate_user(db, "erin@example.com", "correct-horse").id == account.id
    assert auth_service.authenticate_user(db, "erin@example.com", "wrong") is None
    assert auth_service.authenticate_user(db, "nobody@example.com", "correct-horse") is None
