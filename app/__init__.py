from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("berthcare-backend")
except PackageNotFoundError:
    # Code source non installe (ex: checkout sans `pip install -e .`)
    __version__ = "0.0.0"
