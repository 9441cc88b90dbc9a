"""Actors placed on the grid: the player, walls, floors, goals and monsters."""

from __future__ import annotations

from typing import Any, List, Optional

import pygame

from gridquest.components import Color, Component, PaperFlipbookComponent, SceneComponent
from gridquest.renderer import Renderer
from gridquest.vector import Vector2D


class Actor:
    """Something that lives in the world at a grid location and owns components."""

    def __init__(self, location: Optional[Vector2D] = None) -> None:
        self.location = location if location is not None else Vector2D()
        self.components: List[Component] = []

    def add_actor_world_offset(self, offset: Vector2D) -> None:
        """Move the actor by ``offset`` grid cells."""
        self.location = self.location + offset

    def create_default_subobject(self, component: Component) -> Component:
        """Attach ``component`` to this actor and return it."""
        component.owner = self
        self.components.append(component)
        return component

    def scene_component(self) -> Optional[SceneComponent]:
        """Return the last scene component the actor owns, if any."""
        found = None
        for component in self.components:
            if isinstance(component, SceneComponent):
                found = component
        return found

    def tick(self, event: Any) -> None:
        """React to the frame's event; the base actor does nothing."""

    def render(self, renderer: Renderer, delta_seconds: float) -> None:
        """Draw every scene component the actor owns."""
        for component in self.components:
            if isinstance(component, SceneComponent):
                component.render(renderer, delta_seconds)


class _TileActor(Actor):
    """An actor drawn with a single flipbook component configured per class."""

    _shape = " "
    _render_order = 0
    _color: Color = (255, 255, 255, 0)
    _color_key: Color = (255, 255, 255, 255)
    _filename = ""
    _is_sprite = False

    def __init__(
        self, location: Optional[Vector2D] = None, renderer: Optional[Renderer] = None
    ) -> None:
        super().__init__(location)
        flipbook = PaperFlipbookComponent()
        self.create_default_subobject(flipbook)
        flipbook.shape = self._shape
        flipbook.render_order = self._render_order
        flipbook.color = self._color
        flipbook.color_key = self._color_key
        flipbook.filename = self._filename
        flipbook.is_sprite = self._is_sprite
        if renderer is not None:
            flipbook.load(renderer)
        self.flipbook = flipbook


_MOVES = {
    pygame.K_w: Vector2D(0, -1),
    pygame.K_UP: Vector2D(0, -1),
    pygame.K_s: Vector2D(0, 1),
    pygame.K_DOWN: Vector2D(0, 1),
    pygame.K_a: Vector2D(-1, 0),
    pygame.K_LEFT: Vector2D(-1, 0),
    pygame.K_d: Vector2D(1, 0),
    pygame.K_RIGHT: Vector2D(1, 0),
}


class Player(_TileActor):
    """The animated player, moved one cell per key press."""

    _shape = "P"
    _render_order = 7
    _color = (255, 0, 0, 0)
    _color_key = (255, 0, 255, 255)
    _filename = "player.bmp"
    _is_sprite = True

    def tick(self, event: Any) -> None:
        """Move on W/A/S/D or the arrow keys."""
        if event is None or getattr(event, "type", None) != pygame.KEYDOWN:
            return
        offset = _MOVES.get(getattr(event, "key", None))
        if offset is not None:
            self.add_actor_world_offset(offset)


class Wall(_TileActor):
    """An impassable wall tile."""

    _shape = "0"
    _render_order = 9
    _filename = "wall.bmp"


class Floor(_TileActor):
    """A floor tile, drawn beneath everything else."""

    _shape = " "
    _render_order = 10
    _filename = "floor.bmp"


class Goal(_TileActor):
    """The tile the player is trying to reach."""

    _shape = "G"
    _render_order = 6
    _color = (0, 255, 0, 0)
    _filename = "goal.bmp"


class Monster(_TileActor):
    """A monster tile."""

    _shape = "M"
    _render_order = 6
    _color = (255, 0, 0, 0)
    _filename = "monster.bmp"