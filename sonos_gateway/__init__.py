"""Sonos Gateway API App"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sonos-gateway")
except PackageNotFoundError:
    __version__ = "dev"
