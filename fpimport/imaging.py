"""Transfer of game images into a launcher install, with retry handling."""

from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Callable, Iterable, Optional

from fpimport.backup import BackupError, BackupErrorType, BackupManager, instance

CAPTION_IMAGE_ERR = "Error importing game image(s)"
IMAGE_RETRY_PROMPT = "Retry?"
SRC_PATH_TEMPLATE = "Source: {}"
DEST_PATH_TEMPLATE = "Destination: {}"


class ImageTransferErrorType(IntEnum):
    NO_ERROR = 0
    IMAGE_SOURCE_UNAVAILABLE = 1
    IMAGE_WONT_BACKUP = 2
    IMAGE_WONT_COPY = 3
    IMAGE_WONT_LINK = 4
    CANT_CREATE_DIRECTORY = 5


_ERR_STRINGS = {
    ImageTransferErrorType.NO_ERROR: "",
    ImageTransferErrorType.IMAGE_SOURCE_UNAVAILABLE: "An Expected source image does not exist.",
    ImageTransferErrorType.IMAGE_WONT_BACKUP: "Cannot rename an existing image for backup.",
    ImageTransferErrorType.IMAGE_WONT_COPY: "Cannot copy an image to its destination.",
    ImageTransferErrorType.IMAGE_WONT_LINK: "Cannot create a symbolic link for an image.",
    ImageTransferErrorType.CANT_CREATE_DIRECTORY: "Could not create a directory for an image destination.",
}


class ImageTransferError(Exception):
    """An image could not be moved into place."""

    caption = CAPTION_IMAGE_ERR
    secondary = IMAGE_RETRY_PROMPT

    def __init__(
        self,
        error_type: ImageTransferErrorType,
        source_path: str = "",
        destination_path: str = "",
    ):
        self.type = error_type
        self.source_path = source_path
        self.destination_path = destination_path
        super().__init__(self.primary)

    @property
    def primary(self) -> str:
        return _ERR_STRINGS[self.type]

    @property
    def value(self) -> int:
        return int(self.type)

    def details(self) -> str:
        """Return the paths involved, one block each."""
        text = ""
        if self.source_path:
            text += SRC_PATH_TEMPLATE.format(self.source_path) + "\n"
        if self.destination_path:
            if text:
                text += "\n"
            text += DEST_PATH_TEMPLATE.format(self.destination_path) + "\n"
        return text


@dataclass(frozen=True)
class ImageMap:
    """Where an image comes from and where it must end up."""

    source_path: str
    dest_path: str


class ImportResult(Enum):
    """Outcome of an import."""

    FAILED = auto()
    CANCELED = auto()
    TASKLESS = auto()
    SUCCESSFUL = auto()


class ErrorResponse(Enum):
    """A user's answer to a blocking error."""

    YES = auto()
    NO = auto()
    NO_TO_ALL = auto()
    ABORT = auto()
    IGNORE = auto()


def _md5(path: str) -> Optional[str]:
    digest = hashlib.md5()
    try:
        with open(path, "rb") as handle:
            for chunk in iter(lambda: handle.read(65536), b""):
                digest.update(chunk)
    except OSError:
        return None
    return digest.hexdigest()


def transfer_image(
    symlink: bool,
    source_path: str,
    destination_path: str,
    manager: Optional[BackupManager] = None,
) -> None:
    """Copy or link ``source_path`` to ``destination_path``.

    Destinations that are already up to date are left alone. Failures raise
    ImageTransferError.
    """
    manager = instance() if manager is None else manager
    is_link = os.path.islink(destination_path)
    occupied = os.path.exists(destination_path) and (
        os.path.isfile(destination_path) or is_link
    )

    if not os.path.exists(source_path):
        raise ImageTransferError(
            ImageTransferErrorType.IMAGE_SOURCE_UNAVAILABLE, source_path
        )

    if occupied:
        if is_link and symlink:
            return
        if not is_link and not symlink:
            src_sum = _md5(source_path)
            dst_sum = _md5(destination_path)
            if src_sum is not None and dst_sum is not None and src_sum == dst_sum:
                return
        # Switching between link and copy always updates the image

    dest_dir = os.path.dirname(os.path.abspath(destination_path))
    try:
        os.makedirs(dest_dir, exist_ok=True)
    except OSError:
        raise ImageTransferError(
            ImageTransferErrorType.CANT_CREATE_DIRECTORY, "", dest_dir
        ) from None

    try:
        manager.safe_replace(source_path, destination_path, symlink)
    except BackupError as err:
        if err.type is BackupErrorType.FILE_WONT_BACKUP:
            raise ImageTransferError(
                ImageTransferErrorType.IMAGE_WONT_BACKUP, "", destination_path
            ) from err
        if err.type is BackupErrorType.FILE_WONT_REPLACE:
            kind = (
                ImageTransferErrorType.IMAGE_WONT_LINK
                if symlink
                else ImageTransferErrorType.IMAGE_WONT_COPY
            )
            raise ImageTransferError(kind, "", destination_path) from err
        raise RuntimeError("Unhandled image transfer error type.") from err


def perform_image_jobs(
    jobs: Iterable[ImageMap],
    symlink: bool,
    manager: Optional[BackupManager] = None,
    on_error: Optional[Callable[[ImageTransferError], ErrorResponse]] = None,
    on_progress: Optional[Callable[[], None]] = None,
    is_canceled: Optional[Callable[[], bool]] = None,
) -> bool:
    """Run image transfers, asking ``on_error`` whether to retry failures.

    Without an error handler every failure is treated as "no to all".
    Returns False if the work was canceled, True otherwise.
    """
    ignore_all = False
    for job in jobs:
        while not ignore_all:
            try:
                transfer_image(symlink, job.source_path, job.dest_path, manager)
            except ImageTransferError as err:
                response = ErrorResponse.NO_TO_ALL if on_error is None else on_error(err)
                if response is ErrorResponse.NO:
                    break
                if response is ErrorResponse.NO_TO_ALL:
                    ignore_all = True
                continue
            break
        else:
            # Errors are being ignored: still attempt the transfer once
            try:
                transfer_image(symlink, job.source_path, job.dest_path, manager)
            except ImageTransferError:
                pass

        if is_canceled is not None and is_canceled():
            return False
        if on_progress is not None:
            on_progress()

    return True