"""Locating, deploying and building command lines for the CLIFp helper."""

from __future__ import annotations

import os
import shutil
import stat
import sys
import uuid
from typing import Optional, Union

NAME = "CLIFp"
WINDOWS_EXE_NAME = NAME + ".exe"
POSIX_EXE_NAME = "clifp"

PLAY_COMMAND = "play"
RUN_COMMAND = "run"
SHOW_COMMAND = "show"
ID_ARG = '--id="{}"'
APP_ARG = '--app="{}"'
PARAM_ARG = '--param="{}"'
MSG_ARG = '--msg="{}"'
EXTRA_ARG = '--extra="{}"'

QUIET_SWITCH = "-q"

# Special application paths used by additional apps in the Flashpoint database
ENTRY_MESSAGE = ":message:"
ENTRY_EXTRAS = ":extras:"

ERR_FP_CANT_DEPLOY_CLIFP = (
    "Failed to deploy {exe} to the selected Flashpoint install.\n"
    "\n"
    "{reason}\n"
    "\n"
    "If you choose to ignore this you will have to place CLIFp in your "
    "Flashpoint install directory manually."
)


class DeployError(Exception):
    """CLIFp could not be placed into a Flashpoint install."""

    def __init__(self, reason: str, exe: str = NAME):
        self.reason = reason
        super().__init__(ERR_FP_CANT_DEPLOY_CLIFP.format(exe=exe, reason=reason))


def exe_name(platform: Optional[str] = None) -> str:
    """Return the CLIFp executable name used on ``platform`` (default: this one)."""
    platform = sys.platform if platform is None else platform
    return WINDOWS_EXE_NAME if platform.startswith("win") else POSIX_EXE_NAME


def standard_clifp_path(install_dir: Union[str, os.PathLike]) -> str:
    """Return where CLIFp lives inside a Flashpoint install."""
    return os.path.join(os.path.abspath(os.fspath(install_dir)), exe_name())


def has_clifp(install_dir: Union[str, os.PathLike]) -> bool:
    """Return True if the install already holds a CLIFp file."""
    return os.path.isfile(standard_clifp_path(install_dir))


def deploy_clifp(
    install_dir: Union[str, os.PathLike], bundled_path: Union[str, os.PathLike]
) -> str:
    """Copy the bundled CLIFp into the install, replacing any existing copy.

    Returns the path it was deployed to; raises DeployError on failure.
    """
    target = standard_clifp_path(install_dir)
    exe = os.path.basename(target)

    if os.path.isfile(target):
        try:
            os.remove(target)
        except OSError as err:
            raise DeployError(err.strerror or str(err), exe) from err

    try:
        shutil.copyfile(os.fspath(bundled_path), target)
    except OSError as err:
        raise DeployError(err.strerror or str(err), exe) from err

    # Drop any read-only state inherited from the bundled copy
    mode = os.stat(target).st_mode
    os.chmod(target, stat.S_IMODE(mode) | stat.S_IWUSR | stat.S_IROTH | stat.S_IWOTH)

    return target


def parameters_for_app(app_path: str, app_params: str) -> str:
    """Return CLIFp arguments standing in for a direct application launch."""
    if app_path == ENTRY_MESSAGE:
        command = f"{SHOW_COMMAND} {MSG_ARG.format(app_params)}"
    elif app_path == ENTRY_EXTRAS:
        command = f"{SHOW_COMMAND} {EXTRA_ARG.format(app_params)}"
    else:
        command = f"{RUN_COMMAND} {APP_ARG.format(app_path)} {PARAM_ARG.format(app_params)}"
    return f"{QUIET_SWITCH} {command}"


def parameters_for_title(title_id: Union[uuid.UUID, str]) -> str:
    """Return CLIFp arguments that play the title with ``title_id``."""
    title = title_id if isinstance(title_id, uuid.UUID) else uuid.UUID(str(title_id))
    return f"{QUIET_SWITCH} {PLAY_COMMAND} {ID_ARG.format(title)}"