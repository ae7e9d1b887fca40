"""
Feature Profile Store

Named feature selections saved between runs, stored as one pretty-printed
JSON object mapping profile name to a list of attribute labels.
"""

import json
import logging
from typing import Dict, List

from .blob_store import BlobStore

logger = logging.getLogger(__name__)


class ProfileStore:
    """Read/write access to saved feature profiles."""

    def __init__(self, store: BlobStore, key: str = "profiles.json"):
        self.store = store
        self.key = key

        if not self.store.exists(self.key):
            self._write({})

    def all(self) -> Dict[str, List[str]]:
        """Return every saved profile."""
        try:
            profiles = json.loads(self.store.read_text(self.key))
        except (OSError, ValueError) as e:
            logger.warning("Could not read profiles from %s: %s", self.key, e)
            return {}

        if not isinstance(profiles, dict):
            return {}
        return profiles

    def get(self, name: str) -> List[str]:
        """Return the labels saved under name (empty list if unknown)."""
        return list(self.all().get(name, []))

    def set(self, name: str, labels: List[str]) -> bool:
        """
        Save or replace a profile.

        Raises:
            ValueError: If the profile name is blank
        """
        name = name.strip() if name else ""
        if not name:
            raise ValueError("Profile name is required")

        profiles = self.all()
        profiles[name] = list(labels)
        return self._write(profiles)

    def delete(self, name: str) -> bool:
        """Delete a profile. Returns False if it doesn't exist or the write failed."""
        profiles = self.all()
        if name not in profiles:
            return False

        del profiles[name]
        return self._write(profiles)

    def _write(self, profiles: Dict[str, List[str]]) -> bool:
        try:
            self.store.write_text(self.key, json.dumps(profiles, indent=4, ensure_ascii=False))
        except OSError as e:
            logger.error("Could not save profiles to %s: %s", self.key, e)
            return False
        return True
