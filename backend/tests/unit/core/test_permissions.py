import pytest
from leavedesk.core.config import settings
from leavedesk.core.exceptions import Unauthenticated, InvalidToken, Forbidden
from leavedesk.core.permissions import guards_for, run_guards, require_configured_level
from leavedesk.core.security import create_user_token, create_access_token

def bearer(token):
    return f"Bearer {token}"

def test_none_level_lets_anonymous_through():
    assert run_guards(guards_for("none"), None) is None

def test_identity_requires_header():
    with pytest.raises(Unauthenticated) as exc:
        run_guards(guards_for("identity"), None)
    assert exc.value.status_code == 401

def test_identity_rejects_bad_token():
    with pytest.raises(InvalidToken) as exc:
        run_guards(guards_for("identity"), bearer("garbage"))
    assert exc.value.status_code == 403

@pytest.mark.parametrize("header", ["Token abc", "Bearer", "Bearer   ", "Basic dXNlcjpwdw=="])
def test_identity_treats_malformed_header_as_invalid_token(header):
    with pytest.raises(InvalidToken) as exc:
        run_guards(guards_for("identity"), header)
    assert exc.value.status_code == 403

def test_identity_accepts_lowercase_scheme():
    claims = run_guards(guards_for("identity"), f"bearer {create_user_token('u1', False)}")
    assert claims["user_id"] == "u1"

def test_invalid_token_status_is_configurable(monkeypatch):
    monkeypatch.setattr(settings, "INVALID_TOKEN_STATUS", 401)
    with pytest.raises(InvalidToken) as exc:
        run_guards(guards_for("identity"), bearer("garbage"))
    assert exc.value.status_code == 401

def test_identity_rejects_token_without_user_id():
    token = create_access_token({"is_admin": True})
    with pytest.raises(InvalidToken):
        run_guards(guards_for("identity"), bearer(token))

def test_identity_returns_claims():
    claims = run_guards(guards_for("identity"), bearer(create_user_token("u1", False)))
    assert claims["user_id"] == "u1"

def test_admin_rejects_non_admin():
    with pytest.raises(Forbidden) as exc:
        run_guards(guards_for("admin"), bearer(create_user_token("u1", False)))
    assert exc.value.status_code == 403

def test_admin_checks_identity_first():
    with pytest.raises(Unauthenticated):
        run_guards(guards_for("admin"), None)

def test_admin_accepts_admin():
    claims = run_guards(guards_for("admin"), bearer(create_user_token("boss", True)))
    assert claims["is_admin"] is True

def test_admin_requires_literal_true():
    token = create_access_token({"user_id": "u1", "is_admin": "true"})
    with pytest.raises(Forbidden):
        run_guards(guards_for("admin"), bearer(token))

def test_level_names_are_case_insensitive():
    assert guards_for(" Admin ") == guards_for("admin")

def test_unknown_level():
    with pytest.raises(ValueError):
        guards_for("superuser")

def test_configured_level_is_read_per_call(monkeypatch):
    checker = require_configured_level("STATISTICS_GUARD")
    monkeypatch.setattr(settings, "STATISTICS_GUARD", "none")
    assert checker(None) is None

    monkeypatch.setattr(settings, "STATISTICS_GUARD", "identity")
    with pytest.raises(Unauthenticated):
        checker(None)
