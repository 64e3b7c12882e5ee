"""Account seeding and password rotation."""

import pytest

from models import User
from modules.auth.passwords import verify_password
from modules.auth.users import create_user, ensure_admin, get_user_by_username, set_password


def test_admin_is_seeded_from_config(app_ctx, admin_password) -> None:
    admin = get_user_by_username("admin")

    assert admin is not None
    assert admin.password != admin_password
    assert verify_password(admin_password, admin.password)


def test_ensure_admin_does_not_duplicate(app_ctx) -> None:
    ensure_admin()
    ensure_admin()
    assert User.query.filter_by(username="admin").count() == 1


def test_create_user_rejects_duplicates_and_blank_names(app_ctx) -> None:
    create_user("reader", "pw-1")

    with pytest.raises(ValueError):
        create_user("reader", "pw-2")
    with pytest.raises(ValueError):
        create_user("   ", "pw-3")


def test_set_password_rotates_hash(app_ctx, admin_password) -> None:
    set_password("admin", "rotated")
    admin = get_user_by_username("admin")

    assert verify_password("rotated", admin.password)
    assert not verify_password(admin_password, admin.password)


def test_set_password_for_unknown_user(app_ctx) -> None:
    with pytest.raises(LookupError):
        set_password("ghost", "pw")


def test_no_seed_without_admin_password(app_ctx) -> None:
    User.query.delete()
    app_ctx.config["ADMIN_PASSWORD"] = None

    assert ensure_admin() is None
    assert get_user_by_username("admin") is None


def test_create_user_script(app_ctx, monkeypatch, capsys) -> None:
    import create_user as script

    monkeypatch.setattr(script, "create_app", lambda: app_ctx)

    assert script.main(["reader", "pw-1"]) == 0
    assert script.main(["reader", "pw-1"]) == 1
    assert "already exists" in capsys.readouterr().out

    assert script.main(["reader", "pw-2", "--rotate"]) == 0
    assert verify_password("pw-2", get_user_by_username("reader").password)
    assert script.main(["ghost", "pw", "--rotate"]) == 1
