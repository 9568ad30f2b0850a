"""Name-based lookup of strategy profiles."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .base import StrategyProfile
from .profiles import BUILTIN_PROFILES, DEFAULT_STRATEGY, RENDERER_ALIASES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategyResolution:
    """Outcome of resolving a requested strategy name.

    Attributes:
        requested: The name as the caller gave it (None if omitted).
        profile: The profile that will run.
        warning: Set when the name was unknown and the default was used.
    """

    requested: str | None
    profile: StrategyProfile
    warning: str | None = None

    @property
    def used_fallback(self) -> bool:
        return self.warning is not None


class StrategyRegistry:
    """Registry of strategy profiles and aliases, keyed by lowercase name.

    Example:
        ```python
        registry = StrategyRegistry.with_builtins()
        resolution = registry.resolve("binpacking")
        engine = resolution.profile.build_engine(sheet_size)
        ```
    """

    def __init__(self, default: str = DEFAULT_STRATEGY) -> None:
        self._profiles: dict[str, StrategyProfile] = {}
        self._aliases: dict[str, str] = {}
        self._default = default

    @classmethod
    def with_builtins(cls) -> "StrategyRegistry":
        """Registry holding the built-in profiles and renderer aliases."""
        registry = cls()
        for profile in BUILTIN_PROFILES:
            registry.register(profile)
        for alias in RENDERER_ALIASES:
            registry.register_alias(alias, DEFAULT_STRATEGY)
        return registry

    def register(self, profile: StrategyProfile) -> None:
        """Add a profile, replacing any profile with the same key."""
        self._profiles[profile.key] = profile
        self._aliases.pop(profile.key, None)

    def register_alias(self, alias: str, target: str) -> None:
        """Make ``alias`` select the profile registered as ``target``.

        Raises:
            KeyError: If ``target`` is not a registered profile.
        """
        if target not in self._profiles:
            raise KeyError(f"Unknown strategy '{target}'")
        self._aliases[_normalize(alias)] = target

    def get(self, name: str) -> StrategyProfile:
        """Look up a profile by key or alias.

        Raises:
            KeyError: If the name is not registered.
        """
        key = _normalize(name)
        key = self._aliases.get(key, key)
        try:
            return self._profiles[key]
        except KeyError:
            raise KeyError(f"Unknown strategy '{name}'") from None

    def resolve(self, name: str | None) -> StrategyResolution:
        """Look up a profile, falling back to the default for unknown names.

        The fallback is reported on the resolution instead of raising so a
        misspelled name still yields a layout.
        """
        if name is None or not name.strip():
            return StrategyResolution(requested=name, profile=self.default)

        try:
            return StrategyResolution(requested=name, profile=self.get(name))
        except KeyError:
            warning = (
                f"Unknown strategy '{name}', using '{self._default}' instead"
            )
            logger.warning(warning)
            return StrategyResolution(
                requested=name, profile=self.default, warning=warning
            )

    @property
    def default(self) -> StrategyProfile:
        return self._profiles[self._default]

    def names(self) -> list[str]:
        """Profile keys followed by aliases, each in registration order."""
        return list(self._profiles) + list(self._aliases)

    def profiles(self) -> list[StrategyProfile]:
        return list(self._profiles.values())

    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        key = _normalize(name)
        return key in self._profiles or key in self._aliases


def _normalize(name: str) -> str:
    return name.strip().lower()
