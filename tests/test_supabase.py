from unittest.mock import MagicMock

import pytest

from beautiful_dogs.services import supabase_manager
from beautiful_dogs.services.supabase_manager import SupabaseManager


def test_requires_credentials():
    with pytest.raises(ValueError):
        SupabaseManager("", "key")
    with pytest.raises(ValueError):
        SupabaseManager("https://x.supabase.co", "")


def test_client_created_lazily_once(monkeypatch):
    fake_create = MagicMock(return_value="client")
    monkeypatch.setattr(supabase_manager, "create_client", fake_create)

    manager = SupabaseManager("https://x.supabase.co", "anon-key")
    assert not manager.connected
    fake_create.assert_not_called()

    assert manager.client == "client"
    assert manager.client == "client"
    assert manager.connected
    fake_create.assert_called_once_with("https://x.supabase.co", "anon-key")
