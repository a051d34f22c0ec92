from datetime import timedelta

import pytest

from dormitory.core.exceptions import InvalidTokenError, TokenExpiredError
from dormitory.core.logging import redact
from dormitory.core.permissions import (
    PermissionDenied,
    Principal,
    has_minimum_role,
    has_permission,
    require_role,
    require_self_or_role,
    require_staff_or_owner,
)
from dormitory.core.security import JWTManager, PasswordHasher
from dormitory.models.operations.emergency import normalize_phone

SECRET = "unit-test-secret-0123456789abcdef0123"


class TestPasswordHasher:

    def test_hash_and_verify(self):
        hasher = PasswordHasher(rounds=4)
        hashed = hasher.hash("Mengistu1234abcd#")

        assert hashed != "Mengistu1234abcd#"
        assert hasher.verify("Mengistu1234abcd#", hashed)
        assert not hasher.verify("wrong", hashed)
        assert not hasher.verify("Mengistu1234abcd#", None)
        assert not hasher.verify("Mengistu1234abcd#", "not-a-bcrypt-hash")

    def test_rejects_bad_input(self):
        with pytest.raises(ValueError):
            PasswordHasher(rounds=3)
        with pytest.raises(ValueError):
            PasswordHasher(rounds=4).hash("")
        with pytest.raises(TypeError):
            PasswordHasher(rounds=4).hash(None)

    def test_default_password(self):
        assert PasswordHasher(rounds=4).default_password("Tesfaye") == "Tesfaye1234abcd#"
        assert PasswordHasher(rounds=4, default_suffix="!").default_password("Tesfaye") == "Tesfaye!"


class TestJWTManager:

    principal = Principal(user_id="PRO001", role="proctor", name="Yonas Alemu", email="pro001@dorm.test")

    def test_round_trip(self):
        manager = JWTManager(SECRET)
        restored = manager.principal_from_token(manager.create_session_token(self.principal))

        assert restored == self.principal

    def test_expired_token(self):
        manager = JWTManager(SECRET)
        token = manager.create_session_token(self.principal, expires_delta=timedelta(seconds=-10))

        with pytest.raises(TokenExpiredError):
            manager.verify_token(token)

    def test_foreign_signature(self):
        token = JWTManager("another-secret-0123456789abcdef0123").create_session_token(self.principal)

        with pytest.raises(InvalidTokenError):
            JWTManager(SECRET).verify_token(token)


class TestPermissions:

    def test_admin_passes_every_role_check(self):
        assert has_permission("admin", ["registrar"])
        assert has_permission("registrar", ["admin", "registrar"])
        assert not has_permission("proctor", ["registrar"])

    def test_minimum_role(self):
        assert has_minimum_role("directorate", "coordinator")
        assert has_minimum_role("proctor", "proctor_manager")
        assert not has_minimum_role("student", "security_guard")

    def test_require_role(self):
        proctor = Principal(user_id="PRO001", role="proctor")
        require_role(proctor, ["proctor"])

        with pytest.raises(PermissionDenied) as exc:
            require_role(proctor, ["registrar"])
        assert exc.value.status_code == 403
        assert exc.value.details == {"required_roles": ["registrar"]}

    def test_ownership_checks(self):
        student = Principal(user_id="STU001", role="student", user_type="student")

        require_staff_or_owner(student, "STU001")
        require_staff_or_owner(Principal(user_id="SEC001", role="security_guard"), "STU001")
        require_self_or_role(student, "STU001", "student", ["registrar"])
        with pytest.raises(PermissionDenied):
            require_staff_or_owner(student, "STU002")
        with pytest.raises(PermissionDenied):
            require_self_or_role(student, "STU002", "student", ["registrar"])
        with pytest.raises(PermissionDenied):
            require_self_or_role(student, "STU001", "employee", ["registrar"])
        assert not Principal(user_id="STU001", role="maintainer").owns("STU001", "student")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0911223344", "+251911223344"),
        ("0711223344", "+251711223344"),
        (" +251911223344 ", "+251911223344"),
    ],
)
def test_normalize_phone(raw, expected):
    assert normalize_phone(raw) == expected


@pytest.mark.parametrize("raw", ["", "12345", "0811223344", "+25191122"])
def test_normalize_phone_rejects(raw):
    with pytest.raises(ValueError):
        normalize_phone(raw)


def test_redact_masks_nested_secrets():
    data = {"user": "STU001", "password": "x", "headers": {"Authorization": "Bearer y", "host": "api"}}

    redact(data)

    assert data == {"user": "STU001", "password": "[REDACTED]", "headers": {"Authorization": "[REDACTED]", "host": "api"}}
