import pytest

from folderdeck.resources.exceptions import ResourceNotFoundError
from folderdeck.resources.registry import ResourceRegistry


class TestCreateAndResolve:
    def test_create_returns_memory_reference(self) -> None:
        registry = ResourceRegistry()

        url = registry.create(b"data", "text/plain")

        assert url.startswith("memory://")
        assert url in registry

    def test_references_are_unique(self) -> None:
        registry = ResourceRegistry()

        first = registry.create(b"same", "text/plain")
        second = registry.create(b"same", "text/plain")

        assert first != second
        assert len(registry) == 2

    def test_resolve_returns_registered_resource(self) -> None:
        registry = ResourceRegistry()
        url = registry.create(b"data", "image/png", filename="a.png")

        resource = registry.resolve(url)

        assert resource.url == url
        assert resource.content == b"data"
        assert resource.media_type == "image/png"
        assert resource.filename == "a.png"

    def test_resolve_unknown_raises(self) -> None:
        with pytest.raises(ResourceNotFoundError):
            ResourceRegistry().resolve("memory://missing")


class TestRelease:
    def test_release_drops_reference(self) -> None:
        registry = ResourceRegistry()
        url = registry.create(b"data", "text/plain")

        assert registry.release(url) is True
        assert url not in registry
        with pytest.raises(ResourceNotFoundError):
            registry.resolve(url)

    def test_release_unknown_returns_false(self) -> None:
        assert ResourceRegistry().release("memory://missing") is False

    def test_release_all_returns_count(self) -> None:
        registry = ResourceRegistry()
        registry.create(b"1", "text/plain")
        registry.create(b"2", "text/plain")

        assert registry.release_all() == 2
        assert len(registry) == 0
