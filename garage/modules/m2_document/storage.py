"""File-system boundary for blueprints: directory search, read and write.

Everything here is caller-side glue around the pure document codec; the
codec itself never touches the disk.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from garage.shared.constants import BLUEPRINT_EXTENSION
from .document import Document, decode_document, dumps

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def normalize_blueprint_name(name: str) -> str:
    """``garage`` and ``garage.zeeplevel`` both become ``garage.zeeplevel``."""
    return name.replace(BLUEPRINT_EXTENSION, "") + BLUEPRINT_EXTENSION


def find_blueprint(directory: PathLike, name: str) -> Path:
    """Search *directory* recursively for the blueprint called *name*.

    The first match in sorted path order wins.
    """
    root = Path(directory)
    file_name = normalize_blueprint_name(name)
    if not root.is_dir():
        raise FileNotFoundError(f"Blueprint directory not found: {root}")
    # Compare names literally; the user name is not a glob pattern.
    candidates = root.rglob("*" + BLUEPRINT_EXTENSION)
    matches = sorted(p for p in candidates if p.name == file_name and p.is_file())
    if not matches:
        raise FileNotFoundError(f"Blueprint not found: {file_name} in {root}")
    if len(matches) > 1:
        log.warning("%d blueprints named %s, using %s", len(matches), file_name, matches[0])
    return matches[0]


def read_blueprint(path: PathLike, strict: bool = False) -> Document:
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except OSError as exc:
        log.error("Could not read blueprint '%s': %s", path, exc)
        raise
    document = decode_document(text, strict=strict)
    document.set_path(path)
    log.info("Loaded blueprint '%s' (%d blocks)", document.file_name, len(document.blocks))
    return document


def write_blueprint(document: Document, path: PathLike) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(dumps(document), encoding="utf-8")
    document.set_path(target)
    log.info("Blueprint saved: %s (%d blocks)", target, len(document.blocks))
    return target
