"""Reading the expression description from a file."""

from __future__ import annotations

import os
from typing import Union

DEFAULT_PATH = "TREE_INITIAL_DATA.txt"


class ReaderError(Exception):
    """Raised when the expression file cannot be read."""


def read_commands(path: Union[str, os.PathLike] = DEFAULT_PATH) -> str:
    """Return the whole text of the expression file at ``path``."""
    try:
        with open(path, "rb") as handle:
            expected = os.fstat(handle.fileno()).st_size
            raw = handle.read()
    except OSError as exc:
        raise ReaderError(f"The file {os.fspath(path)} does not open") from exc

    if len(raw) != expected:
        raise ReaderError(
            f"read {len(raw)} bytes from {os.fspath(path)}, expected {expected}"
        )
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ReaderError(f"{os.fspath(path)} is not valid UTF-8 text") from exc