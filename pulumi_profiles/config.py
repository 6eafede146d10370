"""Storage of named Pulumi backend profiles in ``~/.pulumi/profiles.json``."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any


@dataclass
class Profile:
    """A named Pulumi backend URL."""

    name: str
    backend: str


def pulumi_profiles_path() -> Path:
    """Return the location of the profiles file in the user's home directory."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise RuntimeError("Unable to determine home directory") from exc
    return home / ".pulumi" / "profiles.json"


def _profile_from_json(item: Any) -> Profile:
    if not isinstance(item, dict):
        raise TypeError("profile entry is not an object")
    name = item["name"]
    backend = item["backend"]
    if not isinstance(name, str) or not isinstance(backend, str):
        raise TypeError("profile fields must be strings")
    return Profile(name, backend)


def read_pulumi_profiles() -> list[Profile]:
    """Load all profiles, creating an empty profiles file if there is none."""
    path = pulumi_profiles_path()
    if not path.exists():
        save_pulumi_profiles([])
        return []

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Failed to read Pulumi profiles file: {path}") from exc

    try:
        data = json.loads(content)
        if not isinstance(data, list):
            raise TypeError("profiles file does not hold a list")
        return [_profile_from_json(item) for item in data]
    except (ValueError, TypeError, KeyError) as exc:
        raise ValueError("Failed to parse Pulumi profiles JSON") from exc


def save_pulumi_profiles(profiles: Iterable[Profile]) -> None:
    """Write the given profiles to the profiles file as pretty-printed JSON."""
    path = pulumi_profiles_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps([asdict(profile) for profile in profiles], indent=2, ensure_ascii=False)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Failed to write Pulumi profiles file: {path}") from exc


def add_profile(name: str, backend: str) -> None:
    """Add a new profile; raise ValueError if the name is already taken."""
    profiles = read_pulumi_profiles()
    if any(profile.name == name for profile in profiles):
        raise ValueError(f"Profile '{name}' already exists")
    profiles.append(Profile(name, backend))
    save_pulumi_profiles(profiles)


def edit_profile(name: str, new_backend: str) -> None:
    """Change the backend URL of an existing profile."""
    profiles = read_pulumi_profiles()
    for profile in profiles:
        if profile.name == name:
            profile.backend = new_backend
            save_pulumi_profiles(profiles)
            return
    raise LookupError(f"Profile '{name}' not found")


def delete_profile(name: str) -> None:
    """Remove the profile with the given name."""
    profiles = read_pulumi_profiles()
    remaining = [profile for profile in profiles if profile.name != name]
    if len(remaining) == len(profiles):
        raise LookupError(f"Profile '{name}' not found")
    save_pulumi_profiles(remaining)