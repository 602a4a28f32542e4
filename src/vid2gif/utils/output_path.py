"""Work out where the animation is written."""

from __future__ import annotations

import os
from pathlib import Path

_SEPARATORS = tuple(sep for sep in {"/", os.sep, os.altsep} if sep)


def has_separator(specifier: str) -> bool:
    return any(sep in specifier for sep in _SEPARATORS)


def resolve_output_path(
    source_path: Path,
    output: str | None = None,
    file_stem: str | None = None,
    suffix: str = "gifski",
    extension: str = ".gif",
) -> Path:
    """Resolve the output path from the user's specifier.

    Rules, first match wins:
      1. no specifier        -> <source dir>/<stem>-<suffix><extension>
      2. contains separator  -> the specifier verbatim (relative to cwd or absolute)
      3. bare name with ext  -> <source dir>/<specifier>
      4. bare name, no ext   -> <source dir>/<specifier><extension>

    Rule 2 never adds an extension. For bare names, trailing dots are dropped
    ("out." -> out.gif) and a name that is only an extension (".gif") is
    appended to the source stem. Pure: nothing is checked on disk.
    """
    source_path = Path(source_path)
    stem = file_stem if file_stem is not None else source_path.stem
    parent = source_path.parent

    if output and has_separator(output):
        return Path(output)

    name = (output or "").rstrip(".")
    if not name:
        return parent / f"{stem}-{suffix}{extension}"
    dot = name.rfind(".")
    if dot == 0:
        return parent / f"{stem}{name}"
    if dot > 0:
        return parent / name
    return parent / f"{name}{extension}"
