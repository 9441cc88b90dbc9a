"""The engine: window, frame timer and the main loop."""

from __future__ import annotations

import argparse
from os import PathLike
from typing import Iterable, List, Optional, Sequence, Union

import pygame

from gridquest.renderer import Renderer
from gridquest.timer import Timer
from gridquest.world import World

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Engine"
DEFAULT_MAP = "level01.map"


class Engine:
    """Owns the world and runs the input, tick and render loop."""

    def __init__(self, surface: Optional[pygame.Surface] = None) -> None:
        self.surface = surface
        self.world: Optional[World] = None
        self.renderer: Optional[Renderer] = None
        self.timer = Timer()
        self.is_running = False
        self.event: Optional[pygame.event.Event] = None
        self._owns_display = False

    @property
    def delta_seconds(self) -> float:
        """Seconds between the last two frames."""
        return self.timer.delta_seconds

    def initialize(self, filename: Union[str, PathLike] = DEFAULT_MAP) -> None:
        """Open the window (unless a surface was given) and load the map."""
        self.is_running = True
        if self.surface is None:
            pygame.init()
            self._owns_display = True
            self.surface = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
        self.renderer = Renderer(self.surface)
        world = World()
        world.load(filename, self.renderer)
        self.world = world

    def step(self, events: Iterable[pygame.event.Event], now_ms: int) -> bool:
        """Run one frame with ``events`` at time ``now_ms``; return whether still running."""
        if self.world is None or self.renderer is None:
            raise RuntimeError("engine is not initialized")
        self.timer.tick(now_ms)
        frame_events: List[Optional[pygame.event.Event]] = list(events) or [None]
        for event in frame_events:
            self.event = event
            if event is not None and event.type == pygame.QUIT:
                self.is_running = False
            self.world.tick(event)
        self.world.render(self.renderer, self.delta_seconds)
        return self.is_running

    def run(self) -> None:
        """Loop until a quit event arrives, then shut down."""
        try:
            while self.is_running:
                self.step(pygame.event.get(), pygame.time.get_ticks())
        finally:
            self.terminate()

    def terminate(self) -> None:
        """Drop the world and close the window if the engine opened it."""
        self.world = None
        self.renderer = None
        self.is_running = False
        if self._owns_display:
            pygame.quit()
            self._owns_display = False
            self.surface = None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game on a map file."""
    parser = argparse.ArgumentParser(prog="gridquest", description="Grid puzzle game.")
    parser.add_argument("map", nargs="?", default=DEFAULT_MAP, help="map file to load")
    args = parser.parse_args(argv)
    engine = Engine()
    try:
        engine.initialize(args.map)
        engine.run()
    finally:
        engine.terminate()
    return 0