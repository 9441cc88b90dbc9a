"""Drawing onto a pygame surface."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

RectLike = Union[pygame.Rect, Sequence[int]]


class Renderer:
    """Draws textures onto a target surface and presents finished frames."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.screen_index = 0

    def load_texture(
        self, path: Union[str, PathLike], color_key: Sequence[int]
    ) -> pygame.Surface:
        """Load an image file and make pixels of ``color_key`` transparent."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"texture not found: {path}")
        texture = pygame.image.load(str(path))
        texture.set_colorkey(tuple(color_key[:3]))
        return texture

    def clear(self) -> None:
        """Fill the whole target with black."""
        self.surface.fill((0, 0, 0, 0))

    def draw(
        self,
        texture: pygame.Surface,
        source: Optional[RectLike],
        dest: RectLike,
    ) -> None:
        """Copy ``source`` of ``texture`` (all of it if None), scaled into ``dest``."""
        dest_rect = pygame.Rect(dest)
        image = texture if source is None else texture.subsurface(pygame.Rect(source))
        scaled = pygame.transform.scale(image, dest_rect.size)
        key = texture.get_colorkey()
        if key is not None:
            scaled.set_colorkey(key)
        self.surface.blit(scaled, dest_rect.topleft)

    def present(self) -> None:
        """Show the finished frame and switch to the other back buffer."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()
        self.screen_index = (self.screen_index + 1) % 2