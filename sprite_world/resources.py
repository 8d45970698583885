"""Sprite resource loading.

Sprite definitions live in JSON files, one sprite per file, keyed in the
catalog by file stem (``TestEntity.json`` -> ``"TestEntity"``). A file holds
either ``{"pixels": [...]}`` or a bare list of pixel records::

    {"pixels": [{"color": [0.2, 0.6, 1.0, 1.0], "offset": [0, 0]}]}

Loading happens once, before the first tick. Any failure is a
:class:`~sprite_world.errors.StartupResourceError`.
"""

import glob
import json
import logging
import os
from typing import Any, Dict

from pyrsistent import pmap
from pyrsistent.typing import PMap

from sprite_world.components import Sprite
from sprite_world.errors import StartupResourceError

logger = logging.getLogger(__name__)


def parse_sprite(text: str) -> Sprite:
    """Parse one sprite resource document.

    Raises:
        StartupResourceError: If the text is not valid JSON or does not
            describe a sprite.
    """
    try:
        document: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StartupResourceError(f"Invalid sprite JSON: {exc}") from exc
    if isinstance(document, dict):
        if "pixels" not in document:
            raise StartupResourceError("Sprite document has no 'pixels' field")
        document = document["pixels"]
    return Sprite.from_records(document)


def _resolve_pattern(source: str) -> str:
    if os.path.isdir(source):
        return os.path.join(source, "*.json")
    return source


def load_catalog(source: str) -> PMap[str, Sprite]:
    """Load every sprite matched by ``source`` into a catalog.

    Args:
        source (str): Directory of ``*.json`` files or a glob pattern.

    Returns:
        PMap[str, Sprite]: Sprite name (file stem) to sprite.

    Raises:
        StartupResourceError: If nothing matches, a file cannot be read or
            parsed, or two files share a stem.
    """
    pattern = _resolve_pattern(source)
    files = sorted(path for path in glob.glob(pattern) if os.path.isfile(path))
    if not files:
        raise StartupResourceError(f"No sprite resources found for {pattern!r}")

    catalog: Dict[str, Sprite] = {}
    for path in files:
        logger.info("Resource loading from: %s", path)
        name = os.path.splitext(os.path.basename(path))[0]
        if name in catalog:
            raise StartupResourceError(f"Duplicate sprite name {name!r} ({path})")
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except OSError as exc:
            raise StartupResourceError(f"Cannot read sprite resource {path}: {exc}") from exc
        try:
            catalog[name] = parse_sprite(text)
        except StartupResourceError as exc:
            raise StartupResourceError(f"{path}: {exc}") from exc

    logger.info("Loaded %d sprite(s): %s", len(catalog), ", ".join(catalog))
    return pmap(catalog)
