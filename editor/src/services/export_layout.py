"""
Sprite Compose Editor - Export Layout Service

Builds the plain-data hand-off for the external atlas composer:
one record per placed sprite with integer pixel coordinates, plus the
composer options. Positions are not validated; negative coordinates and
overlaps are passed through for the composer to handle.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional, Sequence

from constants import DEFAULT_OUTPUT_NAME, DEFAULT_EXPORT_PADDING, DEFAULT_TRIM_TO_BOUNDS
from models.placement import PlacementState, PlacementStore
from utils.geometry import round_half_up

_logger = logging.getLogger('ExportLayout')


@dataclass(frozen=True)
class ExportSprite:
    """One sprite as seen by the composer (integer coordinates)"""
    id: str
    name: str
    path: str
    width: int
    height: int
    x: int
    y: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ComposeConfig:
    """Composer options

    Attributes:
        output_dir: Directory the composer writes into
        output_name: Base file name for the atlas image and manifest
        padding: Extra border around the composed image, in pixels
        trim_to_bounds: Crop the atlas to the sprites' bounding box
    """
    output_dir: str
    output_name: str = DEFAULT_OUTPUT_NAME
    padding: int = DEFAULT_EXPORT_PADDING
    trim_to_bounds: bool = DEFAULT_TRIM_TO_BOUNDS

    def to_payload(self) -> Dict[str, Any]:
        """Composer-facing form (camelCase keys)"""
        return {
            'outputDir': self.output_dir,
            'outputName': self.output_name,
            'padding': self.padding,
            'trimToBounds': self.trim_to_bounds,
        }


@dataclass(frozen=True)
class ComposeBounds:
    """Extent of an export layout, all zeros when it is empty"""
    min_x: int = 0
    min_y: int = 0
    max_x: int = 0
    max_y: int = 0
    width: int = 0
    height: int = 0
    sprite_count: int = 0


def build_export_layout(state: PlacementState) -> List[ExportSprite]:
    """Snapshot every placed sprite for export

    Args:
        state: Placement snapshot

    Returns:
        ExportSprite list in store order, coordinates rounded half up
    """
    return [
        ExportSprite(
            id=placed.id,
            name=placed.name,
            path=placed.path,
            width=placed.width,
            height=placed.height,
            x=round_half_up(placed.x),
            y=round_half_up(placed.y),
        )
        for placed in state.sprites
    ]


def preview_compose_bounds(sprites: Sequence[ExportSprite]) -> ComposeBounds:
    """Size the composer would produce without trimming or padding"""
    if not sprites:
        return ComposeBounds()
    min_x = min(s.x for s in sprites)
    min_y = min(s.y for s in sprites)
    max_x = max(s.x + s.width for s in sprites)
    max_y = max(s.y + s.height for s in sprites)
    return ComposeBounds(
        min_x=min_x,
        min_y=min_y,
        max_x=max_x,
        max_y=max_y,
        width=max_x - min_x,
        height=max_y - min_y,
        sprite_count=len(sprites),
    )


def build_export_request(state: PlacementState, config: ComposeConfig) -> Dict[str, Any]:
    """Full composer request: sprite records plus options"""
    return {
        'sprites': [sprite.to_dict() for sprite in build_export_layout(state)],
        'config': config.to_payload(),
    }


def export_canvas(store: PlacementStore, exporter: Callable[[Dict[str, Any]], Any],
                  config: ComposeConfig) -> Optional[Any]:
    """Hand the current layout to an external composer

    Args:
        store: Placement store to read from
        exporter: Callable receiving the request dict, returns the composer's result
        config: Composer options

    Returns:
        Whatever the exporter returns, or None for an empty canvas (the
        exporter is not called)
    """
    state = store.state
    if not state.sprites:
        _logger.warning("Export skipped: canvas is empty")
        return None

    request = build_export_request(state, config)
    _logger.info(f"Exporting {len(request['sprites'])} sprites to "
                 f"{config.output_dir}/{config.output_name}")
    return exporter(request)
