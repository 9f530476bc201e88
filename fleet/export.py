"""Write raw routing payloads to disk."""

from pathlib import Path
from typing import Union

from .errors import OutputWriteFailed


def write_route(filename: Union[str, Path], payload: Union[str, bytes]) -> None:
    """
    Write a route payload verbatim, replacing any existing file.

    Bytes are written unchanged; text payloads are written as UTF-8 with
    no newline translation.
    """
    try:
        if isinstance(payload, bytes):
            with open(filename, "wb") as fp:
                fp.write(payload)
        else:
            with open(filename, "w", encoding="utf-8", newline="") as fp:
                fp.write(payload)
    except OSError as err:
        raise OutputWriteFailed(f"Failed to write route to {filename}: {err}") from err
