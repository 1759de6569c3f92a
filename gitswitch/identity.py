"""Identity registry for gitswitch."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .config import DEFAULT_KEY_LENGTH
from .exceptions import IdentityError, StoreError
from .ui_common import print_warning

logger = logging.getLogger(__name__)

FIELDS = ("initials", "name", "email")


@dataclass
class Identity:
    """A registered git identity."""
    initials: str
    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        """Convert identity to dictionary for serialization."""
        return {
            "initials": self.initials,
            "name": self.name,
            "email": self.email,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Identity":
        """Create identity from dictionary."""
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        values = [data[field] for field in FIELDS]
        if not all(isinstance(value, str) for value in values):
            raise TypeError("identity fields must be strings")
        return cls(*values)

    def matches(self, name: Optional[str], email: Optional[str]) -> bool:
        """Check whether a git name/email pair is this identity."""
        return self.name == name and self.email == email


def normalize_key(initials: str, key_length: int = DEFAULT_KEY_LENGTH) -> str:
    """Validate initials and return them in lookup form.

    Args:
        initials: Raw key from the command line
        key_length: Required number of characters, 0 for any length

    Returns:
        Lower-cased initials

    Raises:
        IdentityError: If the key is empty, has whitespace or the wrong length
    """
    key = initials.strip().lower()
    if not key or any(char.isspace() for char in key):
        raise IdentityError(f"Invalid initials: {initials!r}", initials=initials)
    if key_length and len(key) != key_length:
        raise IdentityError(
            f"Invalid initials: {initials!r}. Initials must be exactly {key_length} characters",
            initials=initials,
        )
    return key


class IdentityStore:
    """Flat-file store of registered identities.

    The whole list is read on every lookup and written back in full on
    every change.
    """

    def __init__(self, path: Path, key_length: int = DEFAULT_KEY_LENGTH) -> None:
        self.path = path
        self.key_length = key_length

    def _read(self) -> list[Identity]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, list):
                raise TypeError(f"expected a list, got {type(data).__name__}")
            return [Identity.from_dict(item) for item in data]
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise StoreError(
                f"Error reading data file: {self.path}",
                details=str(e),
            ) from e

    def load(self) -> list[Identity]:
        """Load identities, treating a missing or unreadable file as empty."""
        if not self.path.exists():
            logger.debug(f"No data file at {self.path}")
            return []
        try:
            identities = self._read()
        except StoreError as e:
            logger.debug(f"{e.message}: {e.details}")
            print_warning(e.message)
            return []
        logger.debug(f"Loaded {len(identities)} identities from {self.path}")
        return identities

    def save(self, identities: list[Identity]) -> None:
        """Write the full identity list to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            data = [identity.to_dict() for identity in identities]
            self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Failed to write data file: {self.path}", details=str(e)) from e
        logger.debug(f"Saved {len(identities)} identities to {self.path}")

    def normalize(self, initials: str) -> str:
        return normalize_key(initials, self.key_length)

    def register(self, initials: str, name: str, email: str) -> Identity:
        """Register a new identity.

        Raises:
            IdentityError: If the initials are invalid or already registered
        """
        key = self.normalize(initials)
        name = name.strip()
        email = email.strip()
        if not name or not email:
            raise IdentityError("Name and email cannot be empty", initials=key)

        identities = self.load()
        if any(identity.initials == key for identity in identities):
            raise IdentityError(f"{key} already registered", initials=key)

        identity = Identity(initials=key, name=name, email=email)
        identities.append(identity)
        self.save(identities)
        logger.debug(f"Registered {key}")
        return identity

    def find(self, initials: str) -> Optional[Identity]:
        """Find an identity by initials."""
        key = self.normalize(initials)
        for identity in self.load():
            if identity.initials == key:
                return identity
        return None

    def get(self, initials: str) -> Identity:
        """Get an identity by initials.

        Raises:
            IdentityError: If no identity has these initials
        """
        identity = self.find(initials)
        if identity is None:
            key = initials.strip().lower()
            raise IdentityError(f"{key} not registered", initials=key)
        return identity

    def list_identities(self) -> list[Identity]:
        return self.load()

    def remove(self, initials: str) -> Identity:
        """Remove an identity and persist the remaining list."""
        key = self.normalize(initials)
        identities = self.load()
        for index, identity in enumerate(identities):
            if identity.initials == key:
                del identities[index]
                self.save(identities)
                logger.debug(f"Removed {key}")
                return identity
        raise IdentityError(f"{key} not registered", initials=key)

    def find_by_config(self, name: Optional[str], email: Optional[str]) -> Optional[Identity]:
        """Find the identity matching a git user.name/user.email pair."""
        for identity in self.load():
            if identity.matches(name, email):
                return identity
        return None
