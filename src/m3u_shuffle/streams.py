from __future__ import annotations

import os
import random
import shutil
import sys
import tempfile
from typing import Optional

from m3u_shuffle import config
from m3u_shuffle import logger as logger_mod
from m3u_shuffle.errors import InputReadError, OutputWriteError
from m3u_shuffle.m3u import parse, serialize

log = logger_mod.get_logger()

STDIO = "-"


def _is_stdio(path: Optional[str]) -> bool:
    return path is None or path == STDIO


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def read_input(path: Optional[str] = None, *, encoding: Optional[str] = None) -> str:
    """Read the whole input (file, or stdin when `path` is None / "-") and decode it.

    Undecodable bytes are kept as surrogates so they are written back unchanged.
    """
    encoding = encoding or config.ENCODING
    try:
        if _is_stdio(path):
            data = sys.stdin.buffer.read()
        else:
            with open(path, "rb") as f:
                data = f.read()
    except OSError as e:
        where = "standard input" if _is_stdio(path) else f"'{path}'"
        raise InputReadError(f"Unable to read from {where}: {e}") from e

    log.debug(f"Read {len(data)} bytes from {path or 'stdin'}")
    try:
        return data.decode(encoding, errors="surrogateescape")
    except LookupError as e:
        raise InputReadError(f"Unknown encoding {encoding!r}") from e


def write_output(
    text: str, path: Optional[str] = None, *, encoding: Optional[str] = None
) -> None:
    """Write `text` to stdout (None / "-") or replace the file at `path`.

    Files are written to a temporary sibling and moved into place, so the
    target is either the old content or the complete new content.
    """
    encoding = encoding or config.ENCODING
    try:
        data = text.encode(encoding, errors="surrogateescape")
    except (LookupError, UnicodeEncodeError) as e:
        raise OutputWriteError(f"Unable to encode output as {encoding!r}: {e}") from e

    if _is_stdio(path):
        try:
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
        except OSError as e:
            raise OutputWriteError(f"Unable to write to standard output: {e}") from e
        return

    # A symlinked output updates the file it points to
    target = os.path.realpath(path)
    directory = os.path.dirname(target)
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb", dir=directory, prefix=".m3u-shuffle-", suffix=".tmp", delete=False
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        if os.path.exists(target):
            shutil.copymode(target, tmp_path)
        else:
            os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, target)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise OutputWriteError(f"Unable to write to '{path}': {e}") from e

    log.info(f"Wrote {len(data)} bytes to {path}")


def shuffle_text(
    text: str,
    *,
    rng: Optional[random.Random] = None,
    require_header: bool = True,
) -> str:
    """Parse, shuffle and render playlist text in one call."""
    playlist = parse(text, require_header=require_header)
    return serialize(playlist.shuffled(rng))
