"""
Sprite Compose Editor - Sprite Records

A Sprite is the immutable description of an image asset handed over by the
import collaborator. A PlacedSprite is that sprite sitting on the canvas at a
world position with a stacking order.

Neither type holds pixel data. Rendering resolves `path` on its own.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, NamedTuple

from models.transform import Rect


@dataclass(frozen=True)
class Sprite:
    """Immutable image asset description

    Attributes:
        id: Unique identifier, stable for the sprite's lifetime
        name: Display name
        path: Asset path, used only for rendering and export
        width: Pixel width, > 0
        height: Pixel height, > 0

    Raises:
        ValueError: If id is empty or a dimension is not positive
    """
    id: str
    name: str
    path: str
    width: int
    height: int

    def __post_init__(self):
        if not self.id:
            raise ValueError("Sprite id must be a non-empty string")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Sprite '{self.id}' has invalid size {self.width}x{self.height}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Sprite':
        """Build a Sprite from an import record

        Accepts the record produced by the sprite import step:
        {id, name, path, width, height}. Extra keys are ignored.

        Args:
            data: Import record

        Returns:
            New Sprite

        Raises:
            ValueError: If a required key is missing or a value is invalid
        """
        missing = [key for key in ('id', 'width', 'height') if key not in data]
        if missing:
            raise ValueError(f"Sprite record missing keys: {', '.join(missing)}")
        sprite_id = str(data['id'])
        return cls(
            id=sprite_id,
            name=str(data.get('name', sprite_id)),
            path=str(data.get('path', '')),
            width=int(data['width']),
            height=int(data['height']),
        )


@dataclass(frozen=True)
class PlacedSprite:
    """A sprite on the canvas

    Attributes:
        sprite: The underlying asset description
        x: World x of the top-left corner
        y: World y of the top-left corner
        z_index: Stacking order, larger draws later (on top)
    """
    sprite: Sprite
    x: float
    y: float
    z_index: int

    @property
    def id(self) -> str:
        return self.sprite.id

    @property
    def name(self) -> str:
        return self.sprite.name

    @property
    def path(self) -> str:
        return self.sprite.path

    @property
    def width(self) -> float:
        return self.sprite.width

    @property
    def height(self) -> float:
        return self.sprite.height

    @property
    def right(self) -> float:
        return self.x + self.sprite.width

    @property
    def bottom(self) -> float:
        return self.y + self.sprite.height

    @property
    def center_x(self) -> float:
        return self.x + self.sprite.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.sprite.height / 2

    @property
    def area(self) -> float:
        return self.sprite.width * self.sprite.height

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.sprite.width, self.sprite.height)

    def moved_to(self, x: float, y: float) -> 'PlacedSprite':
        """Return a copy at a new position"""
        return replace(self, x=x, y=y)

    def with_z(self, z_index: int) -> 'PlacedSprite':
        """Return a copy with a new stacking order"""
        return replace(self, z_index=z_index)


class PositionUpdate(NamedTuple):
    """Absolute position assignment for one sprite"""
    id: str
    x: float
    y: float
