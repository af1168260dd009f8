"""Weighted progress tracking for the stages of an import."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Optional, Union

from fpimport.settings import ImageMode

PROGRESS_RANGE = 100


class ProgressGroupName(str, Enum):
    """The stages of an import that report progress."""

    ADD_APP_PRELOAD = "AddAppPreload"
    IMAGE_DOWNLOAD = "ImageDownload"
    IMAGE_TRANSFER = "ImageTransfer"
    ICON_TRANSFER = "IconTransfer"
    GAME_IMPORT = "GameImport"
    PLAYLIST_IMPORT = "PlaylistImport"


GroupKey = Union[ProgressGroupName, str]


def _key(name: GroupKey) -> str:
    return name.value if isinstance(name, ProgressGroupName) else str(name)


class ProgressGroup:
    """A counted stage whose share of overall progress is set by its weight."""

    def __init__(
        self, name: str, weight: int, on_change: Optional[Callable[[], None]] = None
    ) -> None:
        if weight < 0:
            raise ValueError("weight must not be negative")
        self.name = name
        self.weight = weight
        self._value = 0
        self._maximum = 0
        self._on_change = on_change

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = max(0, min(value, self._maximum))
        self._changed()

    @property
    def maximum(self) -> int:
        return self._maximum

    @maximum.setter
    def maximum(self, maximum: int) -> None:
        self._maximum = max(0, maximum)
        self._value = min(self._value, self._maximum)
        self._changed()

    @property
    def fraction(self) -> float:
        """Completed share of this group, from 0 to 1."""
        return self._value / self._maximum if self._maximum else 0.0

    def increment_value(self) -> None:
        """Record one more completed step, never passing the maximum."""
        self.value = self._value + 1

    def decrement_maximum(self) -> None:
        """Remove one step that turned out not to be needed."""
        self.maximum = self._maximum - 1

    def increase_maximum(self, amount: int) -> None:
        """Add ``amount`` steps to this group."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        self.maximum = self._maximum + amount


class ProgressManager:
    """Combines weighted groups into one progress value from 0 to 100.

    ``on_progress`` is called with the overall value whenever it changes.
    """

    def __init__(self, on_progress: Optional[Callable[[int], None]] = None) -> None:
        self._groups: dict[str, ProgressGroup] = {}
        self.on_progress = on_progress
        self._last = 0

    def _notify(self) -> None:
        current = self.value()
        if current != self._last:
            self._last = current
            if self.on_progress is not None:
                self.on_progress(current)

    def add_group(self, name: GroupKey, weight: int) -> ProgressGroup:
        """Create an empty group; each name may be added once."""
        key = _key(name)
        if key in self._groups:
            raise ValueError(f"progress group {key!r} already exists")
        group = ProgressGroup(key, weight, self._notify)
        self._groups[key] = group
        self._notify()
        return group

    def group(self, name: GroupKey) -> ProgressGroup:
        """Return the group called ``name``; KeyError if there is none."""
        return self._groups[_key(name)]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (str, ProgressGroupName)):
            return False
        return _key(name) in self._groups

    def groups(self) -> Iterable[ProgressGroup]:
        return iter(list(self._groups.values()))

    def value(self) -> int:
        """Return overall progress; groups without steps do not count."""
        counted = [g for g in self._groups.values() if g.maximum > 0 and g.weight > 0]
        total_weight = sum(g.weight for g in counted)
        if not total_weight:
            return 0
        weighted = sum(g.weight * g.fraction for g in counted)
        return int(weighted / total_weight * PROGRESS_RANGE)

    def maximum(self) -> int:
        """Return the upper end of the overall progress range."""
        return PROGRESS_RANGE


def count_icons(
    has_category_icon: bool,
    has_platform_icons: bool,
    has_playlist_icons: bool,
    platform_count: int,
    playlist_count: int,
) -> int:
    """Return how many icon transfers an import will attempt."""
    count = 0
    if has_category_icon:
        count += 1
    if has_platform_icons:
        count += platform_count
    if has_playlist_icons:
        count += playlist_count
    return count


def plan_workload(
    manager: ProgressManager,
    add_app_count: int,
    game_counts: Iterable[int],
    download_images: bool,
    image_mode: ImageMode,
    icon_count: int,
    playlist_count: int,
) -> int:
    """Create the progress groups for an import and return its game total."""
    add_apps = manager.add_group(ProgressGroupName.ADD_APP_PRELOAD, 2)
    add_apps.maximum = add_app_count

    # There is always at least one game to import when this is reached
    games = manager.add_group(ProgressGroupName.GAME_IMPORT, 2)
    total_games = 0
    for count in game_counts:
        games.increase_maximum(count)
        total_games += count

    if download_images:
        manager.add_group(ProgressGroupName.IMAGE_DOWNLOAD, 3).maximum = total_games * 2

    if image_mode is not ImageMode.REFERENCE:
        manager.add_group(ProgressGroupName.IMAGE_TRANSFER, 3).maximum = total_games * 2

    if icon_count > 0:
        manager.add_group(ProgressGroupName.ICON_TRANSFER, 3).increase_maximum(icon_count)

    if playlist_count > 0:
        manager.add_group(ProgressGroupName.PLAYLIST_IMPORT, 4).increase_maximum(
            playlist_count
        )

    return total_games