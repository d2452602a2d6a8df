import json
from unittest.mock import MagicMock

from beautiful_dogs.core.locator import ServiceLocator, sl
from beautiful_dogs.services import supabase_manager


def test_locator_is_singleton():
    assert ServiceLocator() is sl


def test_init_loads_catalog_and_cart(app_session):
    assert app_session.is_ready
    assert len(app_session.catalog) == 5
    assert app_session.cart.count == 0
    assert app_session.supabase is None


def test_init_twice_keeps_session(app_session, config_file):
    cart = app_session.cart
    cart.add("Rex", 10)

    app_session.init(str(config_file))

    assert app_session.cart is cart
    assert app_session.cart.count == 1


def test_catalog_rescanned_on_media_dir_change(app_session, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    (other / "Luna.png").write_bytes(b"\x00")

    app_session.config.update("catalog", "media_dir", str(other))

    assert [item.identifier for item in app_session.catalog] == ["Luna"]


def test_supabase_configured(tmp_path, media_dir, monkeypatch):
    monkeypatch.setattr(supabase_manager, "create_client", MagicMock())
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "catalog": {"media_dir": str(media_dir)},
        "supabase": {"url": "https://x.supabase.co", "key": "anon"},
    }), encoding="utf-8")

    sl.reset()
    try:
        sl.init(str(path))
        assert sl.supabase is not None
        assert sl.supabase.url == "https://x.supabase.co"
        assert not sl.supabase.connected

        sl.config.update("supabase", "key", "")
        assert sl.supabase is None
    finally:
        sl.reset()
