"""
Unit tests for backend/auth.py
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi import HTTPException

from backend.auth import AuthenticatedUser, ensure_admin, ensure_staff, validate_jwt
from backend.settings import Settings
from domain.models import Role

SECRET = "unit-test-secret-at-least-32-bytes-long"


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", jwt_secret=SECRET, _env_file=None)


def _token(payload, secret=SECRET) -> str:
    return "Bearer " + jwt.encode(payload, secret, algorithm="HS256")


@pytest.mark.unit
class TestValidateJwt:
    def test_user_id_claim(self, settings):
        user = validate_jwt(_token({"userId": "u1", "role": "ADMIN"}), settings)
        assert user == AuthenticatedUser("u1", Role.ADMIN)

    def test_sub_claim_and_default_role(self, settings):
        user = validate_jwt(_token({"sub": "u2"}), settings)
        assert user.user_id == "u2"
        assert user.role == Role.USER

    def test_role_is_case_insensitive(self, settings):
        assert validate_jwt(_token({"sub": "u2", "role": "coach"}), settings).role == Role.COACH

    def test_missing_bearer_prefix(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            validate_jwt("Token abc", settings)
        assert exc_info.value.status_code == 401

    def test_wrong_secret(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            validate_jwt(_token({"sub": "u1"}, secret="another-secret-at-least-32-bytes-long"), settings)
        assert exc_info.value.status_code == 401

    def test_expired(self, settings):
        expired = datetime.now(timezone.utc) - timedelta(minutes=5)
        with pytest.raises(HTTPException) as exc_info:
            validate_jwt(_token({"sub": "u1", "exp": expired}), settings)
        assert exc_info.value.detail == "Token expired"

    def test_missing_user_id(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            validate_jwt(_token({"role": "USER"}), settings)
        assert exc_info.value.detail == "Token missing user ID"

    def test_unknown_role(self, settings):
        with pytest.raises(HTTPException):
            validate_jwt(_token({"sub": "u1", "role": "OWNER"}), settings)


@pytest.mark.unit
class TestRoleChecks:
    @pytest.mark.parametrize("role", [Role.COACH, Role.ADMIN])
    def test_staff_allowed(self, role):
        user = AuthenticatedUser("u1", role)
        assert ensure_staff(user) is user

    def test_member_is_not_staff(self):
        with pytest.raises(HTTPException) as exc_info:
            ensure_staff(AuthenticatedUser("u1"))
        assert exc_info.value.status_code == 403

    def test_coach_is_not_admin(self):
        with pytest.raises(HTTPException) as exc_info:
            ensure_admin(AuthenticatedUser("u1", Role.COACH))
        assert exc_info.value.status_code == 403

    def test_admin(self):
        user = AuthenticatedUser("u1", Role.ADMIN)
        assert ensure_admin(user) is user
