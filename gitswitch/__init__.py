"""gitswitch - Switch the global Git identity between registered users."""

from gitswitch.cli import cli
from gitswitch.identity import Identity, IdentityStore
from gitswitch.version import __version__

__all__ = ["Identity", "IdentityStore", "__version__", "cli"]
