# fpimport

`fpimport` provides the building blocks for importing a Flashpoint collection into a game launcher. It covers the steps that every import needs: choosing what to import, backing up and reverting files, placing images, sizing progress, and building command lines for the CLIFp helper. Each piece is a plain Python function or class that you can use and test on its own.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Modules

| Module | Contents |
| --- | --- |
| `fpimport.settings` | Enums: `Install`, `UpdateMode`, `ImageMode`, `PlaylistGameMode`. Dataclasses: `Importee`, `Selections`, `UpdateOptions`, `OptionSet`, `ImagePaths` (`is_null()` is true when neither path is set). |
| `fpimport.details` | `Details`, a frozen record of the running import. `set_current()` stores it and raises `RuntimeError` if one is already stored. `current()` returns it and raises `RuntimeError` if none is stored. `clear_current()` forgets it. |
| `fpimport.backup` | `BackupManager` with `backup_copy`, `backup_rename`, `restore`, `safe_replace`, `revert_queue_count` and `revert_next_change`. Also `backup_path_for()`, the shared `instance()`, and `BackupError` / `BackupErrorType`. |
| `fpimport.registration` | `Registry` of launcher types (`LauncherEntry`). `register()` rejects duplicate names with `ValueError`. `entries()` yields entries in name order. `acquire_match()` returns the first install that reports itself valid, or `None`. `help_url()` returns `""` for unknown names. |
| `fpimport.clifp` | `exe_name()`, `standard_clifp_path()`, `has_clifp()`, and `deploy_clifp()`, which raises `DeployError`. Launch arguments come from `parameters_for_app()` and `parameters_for_title()`. |
| `fpimport.properties` | `VersionNumber`, `parse_version()`, `install_matches_target_series()`, `test_for_link_permissions()` and `image_mode_order()`. |
| `fpimport.imaging` | `transfer_image()` and `perform_image_jobs()`, with `ImageMap`, `ImageTransferError`, `ImageTransferErrorType`, `ErrorResponse` and the `ImportResult` enum. |
| `fpimport.progress` | `ProgressGroup` and `ProgressManager`, which gives a weighted overall value from 0 to 100. Also `ProgressGroupName`, `count_icons()` and `plan_workload()`. |
| `fpimport.playlists` | `Playlist`, `PlaylistGame` and `AddApp`. Functions: `strip_line_breaks()`, `filter_target_playlists()`, `playlist_specific_game_ids()`, `cull_unimported_games()`, `unselected_platforms()` and `group_add_apps()`. |

## Reverting changes

A backup is written next to its file with the extension `.fbk`. Each path is backed up only once, so the original survives repeated writes. `safe_replace()` keeps an existing destination only until the replacement succeeds. It marks brand-new destinations so that a revert removes them.

```python
from fpimport.backup import BackupError, instance

manager = instance()
manager.backup_copy("/launcher/Data/Platforms/Flash.xml")
# ... write the new file ...

while manager.revert_queue_count():
    try:
        manager.revert_next_change(skip_on_fail=False)
    except BackupError as err:
        print(err)
```

A change that fails to revert is still removed from the queue. With `skip_on_fail=True` the failure is not raised.

## Transferring images

```python
from fpimport.imaging import ErrorResponse, ImageMap, perform_image_jobs

jobs = [ImageMap("/fp/Data/Images/Logos/a.png", "/launcher/Images/a.png")]
done = perform_image_jobs(jobs, symlink=False, on_error=lambda err: ErrorResponse.NO)
```

If a destination already holds the same content, it is left alone. Content is compared by MD5 for copies, and an existing link counts as current for links. When a transfer fails, `on_error` is asked what to do. `YES` retries, `NO` skips this image, and `NO_TO_ALL` stops asking for the rest. With no handler, every failure counts as `NO_TO_ALL`. The function returns `False` only when `is_canceled()` reports a cancellation.

## Version checks and launch parameters

```python
from fpimport.properties import install_matches_target_series
from fpimport.clifp import parameters_for_app, parameters_for_title

install_matches_target_series("14.0.3", "14.0")   # True
install_matches_target_series("14", "14.0")       # True
parameters_for_app(":message:", "Hello")           # '-q show --msg="Hello"'
parameters_for_title(game_id)                      # '-q play --id="<uuid>"'
```

## Sizing progress

```python
from fpimport.progress import ProgressManager, count_icons, plan_workload
from fpimport.settings import ImageMode

manager = ProgressManager(on_progress=print)
icons = count_icons(True, True, False, platform_count=2, playlist_count=1)
total_games = plan_workload(manager, 10, [5, 3], False, ImageMode.COPY, icons, 1)
```

## What this package does not do

The package has no user interface and installs no command. It does not read or write any launcher's own data files, and it does not query the Flashpoint database. It does not download images. A caller supplies these parts: registered launcher types, the game and playlist records, and the install paths. `fpimport` provides the steps in between.

## Running the tests

```
pytest
```