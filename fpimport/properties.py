"""Version checks and capability probes that drive import options."""

from __future__ import annotations

import os
import re
import tempfile
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from fpimport.settings import ImageMode

DEFAULT_IMAGE_MODE_ORDER = (ImageMode.LINK, ImageMode.REFERENCE, ImageMode.COPY)

_LEADING_VERSION = re.compile(r"\d+(?:\.\d+)*")


@dataclass(frozen=True, order=True)
class VersionNumber:
    """A dotted version made of non-negative integer segments."""

    segments: tuple[int, ...] = ()

    @property
    def is_null(self) -> bool:
        return not self.segments

    def normalized(self) -> "VersionNumber":
        """Return this version without trailing zero segments."""
        segments = list(self.segments)
        while len(segments) > 1 and segments[-1] == 0:
            segments.pop()
        return VersionNumber(tuple(segments))

    def is_prefix_of(self, other: "VersionNumber") -> bool:
        """Return True if every segment of this version starts ``other``."""
        return other.segments[: len(self.segments)] == self.segments

    def __str__(self) -> str:
        return ".".join(str(s) for s in self.segments)


def parse_version(text: str) -> VersionNumber:
    """Parse the leading dotted-number part of ``text``.

    Text that does not start with a number gives a null version.
    """
    match = _LEADING_VERSION.match(text.strip())
    if not match:
        return VersionNumber()
    return VersionNumber(tuple(int(s) for s in match.group().split(".")))


def install_matches_target_series(
    version: Union[VersionNumber, str], prefix: Union[VersionNumber, str]
) -> bool:
    """Return True if a Flashpoint ``version`` belongs to the series ``prefix``."""
    if isinstance(version, str):
        version = parse_version(version)
    if isinstance(prefix, str):
        prefix = parse_version(prefix)
    # Major releases may omit their trailing zero
    return prefix.is_prefix_of(version) or prefix.normalized() == version


def test_for_link_permissions() -> bool:
    """Return True if this process is able to create symbolic links."""
    try:
        with tempfile.TemporaryDirectory() as link_dir:
            target = os.path.join(link_dir, "linktarget.tmp")
            with open(target, "wb"):
                pass
            os.symlink(target, os.path.join(link_dir, "testlink.tmp"))
    except (OSError, NotImplementedError):
        return False
    return True


test_for_link_permissions.__test__ = False  # not a pytest test


def image_mode_order(
    preferred: Optional[Iterable[ImageMode]], has_link_perms: bool
) -> list[ImageMode]:
    """Return the image modes to offer, best first.

    ``preferred`` is the launcher's order, or None while it is unknown.
    Linking is dropped when symbolic links cannot be made.
    """
    order = list(DEFAULT_IMAGE_MODE_ORDER if preferred is None else preferred)
    if not has_link_perms:
        order = [mode for mode in order if mode is not ImageMode.LINK]
    return order