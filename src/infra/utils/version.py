from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "server-status-monitor"


def get_version() -> str:
    default_version = "1.0.0"

    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return default_version
