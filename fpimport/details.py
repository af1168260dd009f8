"""Import details shared with launcher installs while an import runs."""

from __future__ import annotations

from dataclasses import dataclass, field

from fpimport.settings import ImageMode, UpdateOptions


@dataclass(frozen=True)
class Details:
    """Information about the import currently in progress."""

    update_options: UpdateOptions
    image_mode: ImageMode
    clifp_path: str
    involved_platforms: list[str] = field(default_factory=list)
    involved_playlists: list[str] = field(default_factory=list)


_current: Details | None = None


def current() -> Details:
    """Return the details of the running import."""
    if _current is None:
        raise RuntimeError("no import details are set")
    return _current


def set_current(details: Details) -> None:
    """Record the details of a starting import."""
    global _current
    if _current is not None:
        raise RuntimeError("import details are already set")
    _current = details


def clear_current() -> None:
    """Forget the details of the current import."""
    global _current
    _current = None