"""
Tests for services/auth.py - register, login and authorize.
"""
import jwt
import pytest

from jobboard import config
from jobboard.errors import AuthError, ConflictError, ValidationError
from jobboard.models import User
from jobboard.security import create_access_token, decode_token, verify_password
from jobboard.services import auth


def _register(db, email="neha@mail.com", password="pw-123456"):
    return auth.register(db, name="Neha", email=email, mobile="12345", password=password)


class TestRegister:

    def test_creates_user_with_hashed_password(self, db_session):
        result = _register(db_session)

        user = db_session.query(User).one()
        assert result.name == "Neha"
        assert user.password_hash != "pw-123456"
        assert verify_password("pw-123456", user.password_hash)

    def test_token_is_bound_to_new_user(self, db_session):
        result = _register(db_session)
        user = db_session.query(User).one()

        claims = decode_token(result.token)
        assert claims["sub"] == str(user.id)
        assert claims["exp"] - claims["iat"] == config.REGISTER_TOKEN_TTL_SECONDS

    @pytest.mark.parametrize("missing", ["name", "email", "mobile", "password"])
    def test_missing_field(self, db_session, missing):
        fields = dict(name="Neha", email="neha@mail.com", mobile="1", password="pw")
        fields[missing] = None
        with pytest.raises(ValidationError):
            auth.register(db_session, **fields)
        assert db_session.query(User).count() == 0

    def test_blank_field(self, db_session):
        with pytest.raises(ValidationError):
            auth.register(db_session, name="  ", email="neha@mail.com", mobile="1", password="pw")

    def test_duplicate_email_conflicts(self, db_session):
        _register(db_session)
        with pytest.raises(ConflictError):
            _register(db_session)
        assert db_session.query(User).count() == 1

    def test_duplicate_email_is_case_insensitive(self, db_session):
        _register(db_session, email="Neha@Mail.com")
        with pytest.raises(ConflictError):
            _register(db_session, email="neha@mail.com ")

    def test_register_ttl_is_configurable(self, db_session, monkeypatch):
        monkeypatch.setattr(config, "REGISTER_TOKEN_TTL_SECONDS", 77)
        claims = decode_token(_register(db_session).token)
        assert claims["exp"] - claims["iat"] == 77


class TestLogin:

    def test_success(self, db_session):
        _register(db_session)
        result = auth.login(db_session, "neha@mail.com", "pw-123456")
        assert result.name == "Neha"
        claims = decode_token(result.token)
        assert claims["exp"] - claims["iat"] == config.LOGIN_TOKEN_TTL_SECONDS

    def test_email_lookup_ignores_case(self, db_session):
        _register(db_session)
        assert auth.login(db_session, "NEHA@mail.com", "pw-123456").name == "Neha"

    def test_wrong_password_and_unknown_email_look_the_same(self, db_session):
        _register(db_session)
        with pytest.raises(AuthError) as wrong_pw:
            auth.login(db_session, "neha@mail.com", "nope")
        with pytest.raises(AuthError) as unknown:
            auth.login(db_session, "ghost@mail.com", "pw-123456")
        assert wrong_pw.value.message == unknown.value.message == "Invalid credentials"
        assert wrong_pw.value.status_code == unknown.value.status_code == 401

    @pytest.mark.parametrize("email,password", [(None, "pw"), ("neha@mail.com", None), ("", "")])
    def test_missing_fields(self, db_session, email, password):
        with pytest.raises(ValidationError):
            auth.login(db_session, email, password)


class TestAuthorize:

    def test_accepts_fresh_token(self):
        token = create_access_token(sub="7", seconds=60)
        assert auth.authorize(f"Bearer {token}") == "7"

    def test_rejects_other_secret(self):
        token = create_access_token(sub="7", seconds=60, secret="not-ours")
        with pytest.raises(AuthError):
            auth.authorize(f"Bearer {token}")

    def test_rejects_expired(self):
        token = create_access_token(sub="7", seconds=-1)
        with pytest.raises(AuthError) as exc:
            auth.authorize(f"Bearer {token}")
        assert exc.value.message == "Token expired"

    def test_rejects_missing_header(self):
        with pytest.raises(AuthError):
            auth.authorize(None)

    def test_rejects_token_without_subject(self):
        token = jwt.encode({"typ": "access"}, config.JWT_SECRET, algorithm=config.JWT_ALGO)
        with pytest.raises(AuthError) as exc:
            auth.authorize(f"Bearer {token}")
        assert exc.value.message == "Invalid token subject"
