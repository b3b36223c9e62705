"""Language profile registry — language identifier to comment grammar."""

from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import Mapping

from locstat.engine.models import LanguageProfile
from locstat.exceptions import UnknownLanguage

# Every non-blank line is code under this profile.
GENERIC_PROFILE = LanguageProfile(name="Generic")


class ProfileRegistry:
    """Profile registration center.

    Populated once at import time, then frozen; lookups are read-only and
    safe from any number of worker threads.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, LanguageProfile] = {}
        self._frozen = False

    def register(self, profile: LanguageProfile) -> None:
        if self._frozen:
            raise RuntimeError(
                f"registry is frozen; cannot register '{profile.name}'"
            )
        if profile.name in self._profiles:
            raise ValueError(f"language '{profile.name}' is already registered")
        self._profiles[profile.name] = profile

    def register_data_format(self, name: str) -> None:
        """Register a comment-free format backed by the generic profile."""
        self.register(replace(GENERIC_PROFILE, name=name))

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def profiles(self) -> Mapping[str, LanguageProfile]:
        return MappingProxyType(self._profiles)

    def get(self, language_id: str) -> LanguageProfile:
        try:
            return self._profiles[language_id]
        except KeyError:
            raise UnknownLanguage(language_id) from None

    def __contains__(self, language_id: object) -> bool:
        return language_id in self._profiles

    def list_all(self) -> list[LanguageProfile]:
        return sorted(self._profiles.values(), key=lambda p: p.name.lower())


PROFILE_REGISTRY = ProfileRegistry()


def register_profile(profile: LanguageProfile) -> None:
    """Register a profile in the default registry."""
    PROFILE_REGISTRY.register(profile)


def register_data_format(name: str) -> None:
    """Register a comment-free data format in the default registry."""
    PROFILE_REGISTRY.register_data_format(name)


def get_profile(language_id: str) -> LanguageProfile:
    """Look up a profile in the default registry.

    Raises :class:`UnknownLanguage` for identifiers that were never
    registered.
    """
    return PROFILE_REGISTRY.get(language_id)
