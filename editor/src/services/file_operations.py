"""
Sprite Compose Editor - File Operations Service

This module handles file I/O for the editor's plain-data boundaries:
- Reading sprite import records produced by the import step
- Writing the export request for the external composer

Separates file operations from UI logic.
"""

import json
import logging
import os

from models.sprite import Sprite

_logger = logging.getLogger('FileOperations')


def load_sprite_records(filename):
    """Load sprite import records from a JSON file

    The file holds either a list of {id, name, path, width, height} records
    or an object with a "sprites" list. Relative asset paths are resolved
    against the file's directory.

    Args:
        filename: Path to the JSON file

    Returns:
        List of Sprite objects

    Raises:
        ValueError: If the file is not a list of valid records
        OSError: If the file cannot be read
    """
    with open(filename, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get('sprites')
    if not isinstance(data, list):
        raise ValueError("Sprite file must contain a list of sprite records")

    base_dir = os.path.dirname(os.path.abspath(filename))
    sprites = []
    for record in data:
        if not isinstance(record, dict):
            raise ValueError(f"Invalid sprite record: {record!r}")
        path = record.get('path', '')
        if path and not os.path.isabs(path):
            record = dict(record, path=os.path.join(base_dir, path))
        sprites.append(Sprite.from_dict(record))

    _logger.info(f"Loaded {len(sprites)} sprite records from {filename}")
    return sprites


def save_export_request(request, filename):
    """Write a composer request to a JSON file

    Args:
        request: Dict from build_export_request
        filename: Destination path

    Returns:
        The filename written
    """
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(request, f, indent=2)

    _logger.info(f"Export request saved to {filename}")
    return filename
