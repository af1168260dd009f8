"""Backups of files touched during an import, with the means to revert them."""

from __future__ import annotations

import logging
import os
import shutil
from enum import IntEnum
from typing import Callable

log = logging.getLogger(__name__)

BACKUP_FILE_EXT = "fbk"
CAPTION_REVERT_ERR = "Error managing backups"


class BackupErrorType(IntEnum):
    NO_ERROR = 0
    FILE_WONT_DELETE = 1
    FILE_WONT_RESTORE = 2
    FILE_WONT_BACKUP = 3
    FILE_WONT_REPLACE = 4


_ERR_STRINGS = {
    BackupErrorType.NO_ERROR: "",
    BackupErrorType.FILE_WONT_DELETE: "Cannot remove a file. It may need to be deleted manually.",
    BackupErrorType.FILE_WONT_RESTORE: "Cannot restore a file backup. It may need to be renamed manually..",
    BackupErrorType.FILE_WONT_BACKUP: "Cannot backup file.",
    BackupErrorType.FILE_WONT_REPLACE: "A file that was part of a safe replace operation could not be transfered.",
}


class BackupError(Exception):
    """A failure while backing up, replacing or restoring a file."""

    caption = CAPTION_REVERT_ERR

    def __init__(self, error_type: BackupErrorType, specific: str = ""):
        self.type = error_type
        self.specific = specific
        super().__init__(f"{self.primary} {specific}".strip())

    @property
    def primary(self) -> str:
        return _ERR_STRINGS[self.type]

    @property
    def secondary(self) -> str:
        return self.specific

    @property
    def value(self) -> int:
        return int(self.type)


def backup_path_for(file_path: str) -> str:
    """Return the path of the backup for ``file_path``."""
    return f"{file_path}.{BACKUP_FILE_EXT}"


def _rename(src: str, dst: str) -> None:
    if os.path.lexists(dst):
        raise FileExistsError(dst)
    os.rename(src, dst)


def _copy(src: str, dst: str) -> None:
    if os.path.lexists(dst):
        raise FileExistsError(dst)
    shutil.copy(src, dst)


class BackupManager:
    """Tracks paths that can be reverted to their state before an import."""

    def __init__(self) -> None:
        self._revertable: set[str] = set()

    def _backup(self, path: str, transfer: Callable[[str, str], None]) -> None:
        # Never back a path up twice, or the original would be lost
        if path in self._revertable:
            return
        self._revertable.add(path)

        if os.path.exists(path):
            backup = backup_path_for(path)
            if os.path.isfile(backup):
                try:
                    os.remove(backup)
                except OSError:
                    raise BackupError(BackupErrorType.FILE_WONT_DELETE, backup) from None
            try:
                transfer(path, backup)
            except OSError:
                raise BackupError(BackupErrorType.FILE_WONT_BACKUP, path) from None

    def _restore(self, path: str) -> None:
        self._revertable.discard(path)
        backup = backup_path_for(path)

        if os.path.exists(path):
            try:
                os.remove(path)
            except OSError:
                raise BackupError(BackupErrorType.FILE_WONT_DELETE, path) from None

        if not os.path.exists(path) and os.path.exists(backup):
            try:
                _rename(backup, path)
            except OSError:
                raise BackupError(BackupErrorType.FILE_WONT_RESTORE, backup) from None

    def backup_copy(self, path: str) -> None:
        """Mark ``path`` revertable, keeping a copy of it if it exists."""
        self._backup(path, _copy)

    def backup_rename(self, path: str) -> None:
        """Mark ``path`` revertable, moving it aside if it exists."""
        self._backup(path, _rename)

    def restore(self, path: str) -> None:
        """Revert ``path`` if it is tracked; otherwise do nothing."""
        if path in self._revertable:
            self._restore(path)

    def safe_replace(self, src: str, dst: str, symlink: bool) -> None:
        """Replace ``dst`` with a copy of or a link to ``src``.

        An existing destination is kept only until the replacement succeeds.
        New destinations are tracked so a revert removes them.
        """
        backup = backup_path_for(dst)
        occupied = os.path.exists(dst)
        if occupied:
            try:
                _rename(dst, backup)
            except OSError:
                raise BackupError(BackupErrorType.FILE_WONT_BACKUP, dst) from None

        try:
            if symlink:
                os.symlink(src, dst)
            else:
                _copy(src, dst)
        except OSError:
            if occupied:
                try:
                    _rename(backup, dst)
                except OSError:
                    pass
            raise BackupError(BackupErrorType.FILE_WONT_REPLACE, src) from None

        if occupied:
            try:
                os.remove(backup)
            except OSError:
                pass
        else:
            self._revertable.add(dst)

    def revert_queue_count(self) -> int:
        """Return the number of changes still to revert."""
        return len(self._revertable)

    def revert_next_change(self, skip_on_fail: bool) -> int:
        """Revert one tracked change and return how many remain.

        A failure raises BackupError unless ``skip_on_fail`` is set; the
        change is dropped from the queue either way.
        """
        if not self._revertable:
            log.warning("Reversion function called with no reverts left!")
            return 0
        path = next(iter(self._revertable))
        try:
            self._restore(path)
        except BackupError:
            if not skip_on_fail:
                raise
        return len(self._revertable)


_instance = BackupManager()


def instance() -> BackupManager:
    """Return the shared backup manager."""
    return _instance