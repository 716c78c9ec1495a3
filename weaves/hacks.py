"""Weaves and the hack scripts they contain."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterator

__all__ = [
    "Hack",
    "NoHackDirError",
    "MissingWeavesHomeError",
    "Weave",
    "is_hack",
    "weaves_home",
]

DEFAULT_RUNTIME = "/bin/sh"
WEAVES_HOME_ENV = "WEAVES_HOME"
HACK_DIR_NAME = "hack"


class NoHackDirError(LookupError):
    """Raised when a weave has no hack directory."""

    def __init__(self, project: str) -> None:
        super().__init__(f"{project} doesnt have a hack dir")
        self.project = project


class MissingWeavesHomeError(LookupError):
    """Raised when the WEAVES_HOME environment variable is not set."""

    def __init__(self) -> None:
        super().__init__(f"env {WEAVES_HOME_ENV} not defined, exiting")


def is_hack(dir_name: str) -> bool:
    """Return whether a directory name marks a hack directory."""
    return dir_name == HACK_DIR_NAME


def weaves_home() -> str:
    """Return the value of WEAVES_HOME."""
    try:
        return os.environ[WEAVES_HOME_ENV]
    except KeyError:
        raise MissingWeavesHomeError() from None


@dataclass
class Hack:
    """A script that automates some task of a project."""

    name: str
    path: str
    _runtime: str = field(default="", init=False, repr=False, compare=False)

    def runtime(self) -> str:
        """Return the interpreter named by the script's shebang line.

        Files with no lines run under /bin/sh.
        """
        if self._runtime:
            return self._runtime
        with open(self.path, encoding="utf-8", errors="surrogateescape") as script:
            first_line = script.readline()
        if not first_line:
            return DEFAULT_RUNTIME
        shebang = first_line.removesuffix("\n").removesuffix("\r")
        return shebang.replace("#!", "")


def _walk_regular_files(directory: str) -> Iterator[os.DirEntry]:
    """Yield regular files below ``directory`` depth first in name order."""
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        if entry.is_file(follow_symlinks=False):
            yield entry
        elif entry.is_dir(follow_symlinks=False):
            yield from _walk_regular_files(entry.path)


@dataclass
class Weave:
    """A project extended with hack scripts."""

    project: str
    _hacks: list[Hack] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def root(self) -> str:
        """Return the directory of this weave."""
        return f"{weaves_home()}/{self.project}"

    def files(self) -> list[os.DirEntry]:
        """Return the entries directly under the weave, sorted by name."""
        with os.scandir(self.root()) as it:
            return sorted(it, key=lambda e: e.name)

    def hack_dir(self) -> os.DirEntry:
        """Return the hack directory entry of this weave."""
        for entry in self.files():
            if entry.is_dir(follow_symlinks=False) and is_hack(entry.name):
                return entry
        raise NoHackDirError(self.project)

    def hacks(self) -> list[Hack]:
        """Return every hack script of this weave, loading them once."""
        if self._hacks is not None:
            return self._hacks
        directory = f"{self.root()}/{self.hack_dir().name}"
        hacks = []
        for entry in _walk_regular_files(directory):
            hack = Hack(name=entry.name, path=entry.path)
            hack._runtime = hack.runtime()
            hacks.append(hack)
        self._hacks = hacks
        return hacks