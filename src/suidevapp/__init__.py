"""sui-dev-app: scaffold Sui dApps from starter templates."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sui-dev-app")
except PackageNotFoundError:
    __version__ = "0.0.0"
