"""Reusable mapping profiles.

A profile bundles mapping definitions and naming-convention policy under a
name. Subclasses set `profile_name`, optionally the two naming conventions,
and override `configure()` to stage definitions with `self.create_map(...)`.

Definitions created from inside a profile are registered under
profile-qualified keys (`"<profile_name>=><key>"`) so they never collide with
live definitions. They are merged into a live definition when that definition
calls `with_profile(profile_name)`.

Example:
    class ApiProfile(Profile):
        profile_name = "Api"

        def configure(self) -> None:
            self.source_member_naming_convention = SnakeCaseNamingConvention()
            self.destination_member_naming_convention = CamelCaseNamingConvention()
            self.create_map("User", "UserDto").for_member("password", lambda o: o.ignore())
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Optional

from .curry import curried
from .naming import NamingConvention

if TYPE_CHECKING:
    from .configuration import CreateMapExpression

__all__ = ["Profile", "PROFILE_KEY_SEPARATOR", "key_name", "profile_key"]

PROFILE_KEY_SEPARATOR = "=>"


def key_name(key: Hashable) -> str:
    """Render a mapping key as text; classes use their qualified name."""
    if isinstance(key, type):
        return f"{key.__module__}.{key.__qualname__}"
    return str(key)


def profile_key(profile_name: str, key: Hashable) -> str:
    return f"{profile_name}{PROFILE_KEY_SEPARATOR}{key_name(key)}"


class Profile:
    profile_name: str = ""
    source_member_naming_convention: Optional[NamingConvention] = None
    destination_member_naming_convention: Optional[NamingConvention] = None

    def configure(self) -> None:
        """Stage this profile's mappings. Called once, when the profile is added."""

    @curried
    def create_map(self, source_key: Hashable, destination_key: Hashable) -> "CreateMapExpression":
        from .engine import automapper

        return automapper.create_map(
            profile_key(self.profile_name, source_key),
            profile_key(self.profile_name, destination_key),
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} profile_name={self.profile_name!r}>"
