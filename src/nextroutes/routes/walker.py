"""Directory walker — enumerate page files under a directory.

Returns leaf files only, depth first, in the order the operating system
lists each directory.  No sorting is applied.
"""

import os
from pathlib import Path


def find_files(
    entry: str | Path,
    *,
    ignore: tuple[str, ...] = ("node_modules",),
) -> list[str]:
    """Recursively list every file under *entry*.

    Paths are joined onto *entry* as given, so a relative *entry* yields
    relative paths.  Directories named after one of the *ignore* entries
    are not descended into; *entry* itself and its ancestors are never
    checked.

    Raises:
        OSError: If *entry* (or a nested directory) cannot be listed.

    """
    files: list[str] = []
    for name in os.listdir(entry):
        filepath = os.path.join(entry, name)
        if os.path.isdir(filepath):
            if name in ignore:
                continue
            files.extend(find_files(filepath, ignore=ignore))
        else:
            files.append(filepath)
    return files
