"""The world: the set of actors loaded from a map."""

from __future__ import annotations

from functools import cmp_to_key
from os import PathLike
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from gridquest.actors import Actor, Floor, Goal, Monster, Player, Wall
from gridquest.renderer import Renderer
from gridquest.vector import Vector2D

MAX_LINE_LENGTH = 99

_TILES = {
    "*": Wall,
    "M": Monster,
    "G": Goal,
    "P": Player,
}


def _by_render_order(a: Actor, b: Actor) -> int:
    a_scene = a.scene_component()
    b_scene = b.scene_component()
    if a_scene is None or b_scene is None:
        return 0
    # Higher render orders are drawn first.
    return b_scene.render_order - a_scene.render_order


class World:
    """Holds every actor and ticks and draws them in order."""

    def __init__(self) -> None:
        self.actors: List[Actor] = []

    def load(
        self, filename: Union[str, PathLike], renderer: Optional[Renderer] = None
    ) -> None:
        """Spawn actors from the map file ``filename``."""
        path = Path(filename)
        if not path.is_file():
            raise FileNotFoundError(f"map not found: {path}")
        with path.open(encoding="latin-1") as handle:
            self.load_lines(handle, renderer)

    def load_lines(
        self, lines: Iterable[str], renderer: Optional[Renderer] = None
    ) -> None:
        """Spawn actors from map rows; every cell also gets a floor tile."""
        for y, raw in enumerate(lines):
            line = raw.rstrip("\r\n").split("\0", 1)[0][:MAX_LINE_LENGTH]
            for x, cell in enumerate(line):
                location = Vector2D(x, y)
                kind = _TILES.get(cell)
                if kind is not None:
                    self.spawn_actor(kind(location, renderer))
                self.spawn_actor(Floor(location, renderer))
        self.actors.sort(key=cmp_to_key(_by_render_order))

    def spawn_actor(self, actor: Actor) -> None:
        """Add ``actor`` to the world."""
        self.actors.append(actor)

    def destroy_actor(self, actor: Actor) -> None:
        """Remove ``actor``; raise ValueError if it is not in the world."""
        self.actors.remove(actor)

    def tick(self, event: Any) -> None:
        """Let every actor react to the frame's event."""
        for actor in self.actors:
            actor.tick(event)

    def render(self, renderer: Renderer, delta_seconds: float) -> None:
        """Clear, draw every actor and present the frame."""
        renderer.clear()
        for actor in self.actors:
            actor.render(renderer, delta_seconds)
        renderer.present()