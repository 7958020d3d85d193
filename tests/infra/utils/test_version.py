from importlib.metadata import PackageNotFoundError

import infra.utils.version as version_module


def test_get_version_falls_back_when_distribution_is_not_installed(monkeypatch) -> None:
    def missing(_: str) -> str:
        raise PackageNotFoundError(version_module.DISTRIBUTION_NAME)

    monkeypatch.setattr(version_module, "version", missing)

    assert version_module.get_version() == "1.0.0"


def test_get_version_reads_installed_distribution(monkeypatch) -> None:
    monkeypatch.setattr(version_module, "version", lambda _: "2.3.4")

    assert version_module.get_version() == "2.3.4"
