"""Candidate profiles stored as JSON files, one per profile id."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pydantic

from resume_generator.errors import NotFoundError, ValidationError
from resume_generator.models.profile import Profile

logger = logging.getLogger(__name__)


class ProfileStore:
    """Reads ``{profile_id}.json`` files from a directory."""

    def __init__(self, profiles_dir: str | Path):
        self.profiles_dir = Path(profiles_dir)

    def path_for(self, profile_id: str) -> Path:
        if not profile_id or Path(profile_id).name != profile_id or profile_id.startswith("."):
            raise NotFoundError("profile", profile_id)
        return self.profiles_dir / f"{profile_id}.json"

    def exists(self, profile_id: str) -> bool:
        try:
            return self.path_for(profile_id).is_file()
        except NotFoundError:
            return False

    def load(self, profile_id: str) -> Profile:
        """Load a profile by id.

        Raises NotFoundError when there is no such file, and ValidationError on
        field ``profile`` when the file is not a valid profile document.
        """
        path = self.path_for(profile_id)
        if not path.is_file():
            raise NotFoundError("profile", profile_id)
        logger.info("Loading profile: %s", profile_id)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.error("Profile %s is not valid JSON: %s", profile_id, exc)
            raise ValidationError("profile", f'Profile "{profile_id}" is not valid JSON: {exc}') from exc
        if not isinstance(data, dict):
            raise ValidationError("profile", f'Profile "{profile_id}" must be a JSON object')
        try:
            return Profile(**data)
        except pydantic.ValidationError as exc:
            logger.error("Profile %s has an invalid shape: %s", profile_id, exc)
            raise ValidationError(
                "profile", f'Profile "{profile_id}" is malformed: {exc.error_count()} invalid field(s)'
            ) from exc

    def list(self) -> list[str]:
        """List available profile ids."""
        if not self.profiles_dir.is_dir():
            return []
        return sorted(p.stem for p in self.profiles_dir.glob("*.json"))
