__version__ = "1.1.0"


def get_version() -> str:
    return __version__
