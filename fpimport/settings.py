"""Import selections, options and image path settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class Install(Enum):
    """Which of the two installs a path refers to."""

    LAUNCHER = auto()
    FLASHPOINT = auto()


class UpdateMode(Enum):
    """How entries that already exist in the launcher are treated."""

    ONLY_NEW = auto()
    NEW_AND_EXISTING = auto()


class ImageMode(Enum):
    """How game images are made available to the launcher."""

    COPY = auto()
    REFERENCE = auto()
    LINK = auto()


class PlaylistGameMode(Enum):
    """Which games of selected playlists are imported."""

    SELECTED_PLATFORM = auto()
    FORCE_ALL = auto()


@dataclass
class Importee:
    """A platform or playlist that can be imported."""

    name: str
    existing: bool = False


@dataclass
class Selections:
    """The platforms and playlists chosen for import."""

    platforms: list[str] = field(default_factory=list)
    playlists: list[str] = field(default_factory=list)


@dataclass
class UpdateOptions:
    """Options controlling how an existing launcher library is updated."""

    import_mode: UpdateMode
    remove_obsolete: bool


@dataclass
class OptionSet:
    """The full set of options for an import."""

    update_options: UpdateOptions
    image_mode: ImageMode
    download_images: bool
    playlist_mode: PlaylistGameMode
    inclusion_options: Any = None


@dataclass
class ImagePaths:
    """Logo and screenshot paths for a single title."""

    logo_path: str = ""
    screenshot_path: str = ""

    def is_null(self) -> bool:
        """Return True when neither path is set."""
        return not self.logo_path and not self.screenshot_path