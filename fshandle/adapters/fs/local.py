"""Local file system adapter.

Implements the FileSystem port on top of os, os.path and shutil.
This is the default adapter for file system operations.
"""

import os
import shutil
from types import ModuleType


class LocalFileSystem:
    """Local file system implementation.

    Path manipulation goes through ``pathmod`` (``os.path`` unless told
    otherwise), so separator and parent queries match the host platform.
    Passing ``ntpath`` or ``posixpath`` lets path arithmetic be exercised for
    another platform; the I/O methods still act on the local disk.
    """

    def __init__(self, pathmod: ModuleType = os.path) -> None:
        self._pathmod = pathmod

    @property
    def sep(self) -> str:
        return self._pathmod.sep

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def make_dirs(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)

    def touch(self, path: str) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "ab"):
            pass

    def remove_file(self, path: str) -> None:
        os.remove(path)

    def remove_tree(self, path: str) -> None:
        shutil.rmtree(path)

    def walk_files(self, path: str) -> list[str]:
        if not os.path.isdir(path):
            raise FileNotFoundError(f"No such directory: '{path}'")
        found = []
        for dirpath, _dirnames, filenames in os.walk(path):
            found.extend(os.path.join(dirpath, name) for name in filenames)
        return found

    def walk_dirs(self, path: str) -> list[str]:
        if not os.path.isdir(path):
            raise FileNotFoundError(f"No such directory: '{path}'")
        found = []
        for dirpath, dirnames, _filenames in os.walk(path):
            found.extend(os.path.join(dirpath, name) for name in dirnames)
        return found

    def list_dirs(self, path: str) -> list[str]:
        with os.scandir(path) as entries:
            return [entry.path for entry in entries if entry.is_dir()]

    def copy_file(self, source: str, destination: str) -> None:
        shutil.copy2(source, destination)

    def move(self, source: str, destination: str) -> None:
        # A plain rename; shutil.move would fall back to copy+delete across devices
        os.rename(source, destination)

    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def write_bytes(self, path: str, content: bytes) -> None:
        with open(path, "wb") as f:
            f.write(content)

    def full_path(self, path: str) -> str:
        return self._pathmod.abspath(path)

    def parent(self, path: str) -> str | None:
        parent = self._pathmod.dirname(path)
        if not parent or parent == path:
            return None
        return parent

    def join(self, *parts: str) -> str:
        return self._pathmod.join(*parts)

    def basename(self, path: str) -> str:
        return self._pathmod.basename(path)

    def normcase(self, path: str) -> str:
        return self._pathmod.normcase(path)
