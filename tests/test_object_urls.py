import pytest

from remote_data.adapters import object_urls
from remote_data.adapters.object_urls import ObjectUrlRegistry, get_object_url_registry
from remote_data.core.domain.models import Blob


def test_create_resolve_revoke():
    registry = ObjectUrlRegistry(origin="https://app.test")
    blob = Blob(content=b"img", content_type="image/webp")

    url = registry.create(blob)

    assert url.startswith("blob:https://app.test/")
    assert url in registry
    assert len(registry) == 1
    assert registry.resolve(url) is blob

    registry.revoke(url)
    assert url not in registry
    with pytest.raises(KeyError):
        registry.resolve(url)


def test_urls_are_unique_per_blob():
    registry = ObjectUrlRegistry()
    blob = Blob(content=b"same")

    assert registry.create(blob) != registry.create(blob)
    assert len(registry) == 2


def test_default_registry_uses_configured_origin(monkeypatch):
    monkeypatch.setattr(object_urls, "_default_registry", None)
    monkeypatch.setenv("REMOTE_DATA_OBJECT_URL_ORIGIN", "http://localhost:5173")

    registry = get_object_url_registry()

    assert registry.create(Blob(content=b"x")).startswith("blob:http://localhost:5173/")
    assert get_object_url_registry() is registry
