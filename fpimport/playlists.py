"""Playlist selection and the records that link playlists and games."""

from __future__ import annotations

import re
import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Optional

# Library name Flashpoint gives to animation entries
ANIMATION_LIBRARY = "theatre"

_LINE_BREAKS = re.compile(r"\r\n|\r|\n")


@dataclass
class PlaylistGame:
    """A game's membership in a playlist."""

    game_id: uuid.UUID
    order: int = 0
    notes: str = ""


@dataclass
class Playlist:
    """A Flashpoint playlist and the games it holds."""

    title: str
    library: str = ""
    playlist_games: list[PlaylistGame] = field(default_factory=list)
    id: Optional[uuid.UUID] = None
    description: str = ""
    author: str = ""
    icon: Optional[bytes] = None


@dataclass(frozen=True)
class AddApp:
    """An additional application belonging to a game."""

    id: uuid.UUID
    parent_id: uuid.UUID
    name: str = ""
    app_path: str = ""
    launch_command: str = ""
    autorun_before: bool = False
    wait_exit: bool = False


def strip_line_breaks(text: str) -> str:
    """Return ``text`` with every line break removed."""
    return _LINE_BREAKS.sub("", text)


def filter_target_playlists(
    playlists: Iterable[Playlist],
    selected_titles: Iterable[str],
    include_animations: bool,
    animation_library: str = ANIMATION_LIBRARY,
) -> list[Playlist]:
    """Return the selected playlists, dropping animation ones unless included."""
    titles = set(selected_titles)
    return [
        playlist
        for playlist in playlists
        if playlist.title in titles
        and (include_animations or playlist.library != animation_library)
    ]


def playlist_specific_game_ids(playlists: Iterable[Playlist]) -> list[uuid.UUID]:
    """Return the ids of every game in the playlists, in playlist order."""
    return [
        entry.game_id for playlist in playlists for entry in playlist.playlist_games
    ]


def cull_unimported_games(
    playlists: Iterable[Playlist], imported_ids: Iterable[uuid.UUID]
) -> None:
    """Remove, in place, playlist entries for games that were not imported."""
    imported = set(imported_ids)
    for playlist in playlists:
        playlist.playlist_games[:] = [
            entry for entry in playlist.playlist_games if entry.game_id in imported
        ]


def unselected_platforms(
    available: Iterable[str], selected: Iterable[str]
) -> list[str]:
    """Return the available platforms that were not selected, in order."""
    chosen = set(selected)
    return [platform for platform in available if platform not in chosen]


def group_add_apps(add_apps: Iterable[AddApp]) -> dict[uuid.UUID, list[AddApp]]:
    """Group additional apps by the id of the game they belong to."""
    groups: defaultdict[uuid.UUID, list[AddApp]] = defaultdict(list)
    for add_app in add_apps:
        groups[add_app.parent_id].append(add_app)
    return dict(groups)