"""
Profile store: load a user's preference profile at session start, save it after
build_profile / record_interaction. Implementations: in-memory (tests, harness)
and a JSON file. Swap via PROFILE_STORE for local vs file-backed runs.

Stores are not synchronized; callers keep one writer per user.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

from pydantic import ValidationError

from ..models.profile import UserPreferenceProfile

logger = logging.getLogger(__name__)


class ProfileStore(Protocol):
    """Protocol for profile persistence. Implement for memory, JSON file, or a hosted backend."""

    def get(self, user_id: str) -> Optional[UserPreferenceProfile]:
        """Return the user's profile if one exists, else None."""
        ...

    def save(self, user_id: str, profile: UserPreferenceProfile) -> None:
        """Create or replace the user's profile."""
        ...

    def delete(self, user_id: str) -> bool:
        """Delete the user's profile (account deletion). Return True if one existed."""
        ...


class InMemoryProfileStore:
    """Profile store kept in a dict. Used for local testing and evaluation."""

    def __init__(self) -> None:
        self._profiles: Dict[str, UserPreferenceProfile] = {}

    def get(self, user_id: str) -> Optional[UserPreferenceProfile]:
        return self._profiles.get(user_id)

    def save(self, user_id: str, profile: UserPreferenceProfile) -> None:
        self._profiles[user_id] = profile

    def delete(self, user_id: str) -> bool:
        return self._profiles.pop(user_id, None) is not None

    def __len__(self) -> int:
        return len(self._profiles)


class JsonProfileStore:
    """
    Profile store backed by a JSON file (e.g. data/profiles.json).

    A record that no longer validates is skipped on load but kept verbatim, so
    later saves write it back unchanged. A file that cannot be parsed at all is
    moved aside to <name>.bak before the store starts empty.
    """

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._profiles: Dict[str, UserPreferenceProfile] = {}
        self._invalid: Dict[str, Any] = {}
        self._load()

    @property
    def backup_path(self) -> Path:
        return self._path.with_name(self._path.name + ".bak")

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            self._move_aside(str(exc))
            return
        raw = data.get("profiles", {}) if isinstance(data, dict) else None
        if not isinstance(raw, dict):
            self._move_aside("expected an object with a 'profiles' mapping")
            return
        for uid, p in raw.items():
            try:
                self._profiles[uid] = UserPreferenceProfile.model_validate(p)
            except ValidationError as exc:
                self._invalid[uid] = p
                logger.warning(
                    "[store] PROFILE_INVALID user_id=%s errors=%s, skipped",
                    uid, exc.error_count(),
                )

    def _move_aside(self, error: str) -> None:
        self._path.replace(self.backup_path)
        logger.warning(
            "[store] PROFILE_FILE_UNREADABLE path=%s backup=%s error=%s, starting empty",
            self._path, self.backup_path, error,
        )

    def _save(self) -> None:
        profiles: Dict[str, Any] = dict(self._invalid)
        profiles.update(
            (uid, p.model_dump(mode="json")) for uid, p in self._profiles.items()
        )
        with open(self._path, "w") as f:
            json.dump({"profiles": profiles}, f, indent=2)

    def get(self, user_id: str) -> Optional[UserPreferenceProfile]:
        return self._profiles.get(user_id)

    def save(self, user_id: str, profile: UserPreferenceProfile) -> None:
        if not user_id.strip():
            raise ValueError("user_id cannot be empty")
        self._invalid.pop(user_id, None)
        self._profiles[user_id] = profile
        self._save()

    def delete(self, user_id: str) -> bool:
        existed = self._profiles.pop(user_id, None) is not None
        existed = self._invalid.pop(user_id, None) is not None or existed
        if existed:
            self._save()
        return existed
