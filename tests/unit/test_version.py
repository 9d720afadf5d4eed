"""Tests for version lookup."""

from importlib.metadata import PackageNotFoundError

from guardspec import _version


class TestGetVersion:
    """Version comes from installed metadata only."""

    def test_installed(self, monkeypatch) -> None:
        monkeypatch.setattr(_version, "_metadata_version", lambda name: "1.2.3")
        assert _version.get_version() == "1.2.3"

    def test_not_installed(self, monkeypatch) -> None:
        def missing(name: str) -> str:
            raise PackageNotFoundError(name)

        monkeypatch.setattr(_version, "_metadata_version", missing)
        assert _version.get_version() == "0.0.0"
