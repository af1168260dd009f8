"""Registry of supported launchers and detection of launcher installs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Protocol


class LauncherInstall(Protocol):
    def is_valid(self) -> bool: ...


@dataclass(frozen=True)
class LauncherEntry:
    """A registered launcher type."""

    name: str
    make: Callable[[str], LauncherInstall]
    icon_path: str
    help_url: str


class Registry:
    """Launcher types, kept in order of name."""

    def __init__(self) -> None:
        self._entries: dict[str, LauncherEntry] = {}

    def register(
        self,
        name: str,
        make: Callable[[str], LauncherInstall],
        icon_path: str,
        help_url: str,
    ) -> LauncherEntry:
        """Add a launcher type; each name may be registered once."""
        if name in self._entries:
            raise ValueError(f"launcher {name!r} is already registered")
        entry = LauncherEntry(name, make, icon_path, help_url)
        self._entries[name] = entry
        return entry

    def acquire_match(self, install_path: str) -> Optional[LauncherInstall]:
        """Return the first valid install found at ``install_path``, or None."""
        for entry in self.entries():
            candidate = entry.make(install_path)
            if candidate.is_valid():
                return candidate
        return None

    def help_url(self, name: str) -> str:
        """Return the help URL of a launcher, or an empty string if unknown."""
        entry = self._entries.get(name)
        return entry.help_url if entry else ""

    def entries(self) -> Iterator[LauncherEntry]:
        """Iterate over registered launchers in name order."""
        return iter([self._entries[name] for name in sorted(self._entries)])