"""Components that give actors behaviour and appearance."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Tuple

import pygame

from gridquest.renderer import Renderer

log = logging.getLogger(__name__)

TILE_SIZE = 30
SPRITE_FRAMES = 5

Color = Tuple[int, int, int, int]


class Component:
    """Base of everything an actor can own."""

    def __init__(self) -> None:
        self.owner: Optional[Any] = None

    def tick(self) -> None:
        """Advance the component by one frame."""


class ActorComponent(Component):
    """A component without a place in the scene."""


class SceneComponent(ActorComponent):
    """A component that is drawn, ordered by ``render_order``."""

    def __init__(self) -> None:
        super().__init__()
        self.render_order = 0

    def render(self, renderer: Renderer, delta_seconds: float) -> None:
        """Draw the component; the base class draws nothing."""


class PaperFlipbookComponent(SceneComponent):
    """A tile image, optionally animated as a strip of sprite frames."""

    data_dir = Path("data")

    def __init__(self) -> None:
        super().__init__()
        self.shape = " "
        self.color: Color = (0, 0, 0, 0)
        self.color_key: Color = (255, 255, 255, 255)
        self.filename = ""
        self.texture: Optional[pygame.Surface] = None
        self.is_sprite = False
        self.process_time = 0.25
        self.elapsed_time = 0.0
        self.frame = 0

    def load(self, renderer: Renderer) -> None:
        """Load the texture named by ``filename`` from ``data_dir``, if any."""
        if self.filename:
            self.texture = renderer.load_texture(
                self.data_dir / self.filename, self.color_key
            )

    def advance(self, delta_seconds: float) -> int:
        """Step the animation clock and return the current frame."""
        if self.elapsed_time >= self.process_time:
            self.elapsed_time = 0.0
            self.frame = (self.frame + 1) % SPRITE_FRAMES
        self.elapsed_time += delta_seconds
        return self.frame

    def render(self, renderer: Renderer, delta_seconds: float) -> None:
        """Draw the texture on the owner's tile."""
        if self.owner is None:
            raise RuntimeError("component has no owner to render at")
        if self.texture is None:
            return
        location = self.owner.location
        dest = pygame.Rect(
            location.x * TILE_SIZE, location.y * TILE_SIZE, TILE_SIZE, TILE_SIZE
        )
        if self.is_sprite:
            width, height = self.texture.get_size()
            frame_w = width // SPRITE_FRAMES
            frame_h = height // SPRITE_FRAMES
            source = pygame.Rect(frame_w * self.frame, 0, frame_w, frame_h)
            renderer.draw(self.texture, source, dest)
            self.advance(delta_seconds)
            log.debug("%f", delta_seconds)
        else:
            renderer.draw(self.texture, None, dest)