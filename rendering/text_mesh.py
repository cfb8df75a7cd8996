"""3D text meshes traced from pygame glyph masks, built off the frame loop."""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

import pygame

from .meshes import WireframeMesh, extrude_outline

logger = logging.getLogger(__name__)

Vec2 = Tuple[float, float]


def create_text_mesh(
    text: str,
    *,
    size: float = 1.0,
    depth: float = 0.2,
    font_pixels: int = 96,
    outline_every: int = 2,
    font_name: Optional[str] = None,
) -> WireframeMesh:
    """Extrude the outline of every glyph blob of ``text`` into a centered mesh.

    ``size`` is the height of the rendered line in world units. Only outer
    outlines are traced, so counters such as the hole in ``o`` are not drawn.
    """

    if not text.strip():
        raise ValueError("text must contain at least one visible character")

    pygame.font.init()
    font = pygame.font.Font(font_name, font_pixels)
    surface = font.render(text, True, (255, 255, 255))
    mask = pygame.mask.from_surface(surface)
    scale = size / max(1, surface.get_height())

    outline_2d: List[Vec2] = []
    segments: List[Tuple[int, int]] = []
    for component in mask.connected_components():
        points = component.outline(outline_every)
        if len(points) < 3:
            continue
        start = len(outline_2d)
        outline_2d.extend((px * scale, -py * scale) for px, py in points)
        count = len(points)
        segments.extend((start + i, start + (i + 1) % count) for i in range(count))

    if not outline_2d:
        raise ValueError(f"text {text!r} rendered no traceable pixels")

    mesh = extrude_outline(outline_2d, segments, depth=depth).centered()
    logger.debug("Built text mesh for %r: %d vertices", text, len(mesh.vertices))
    return mesh


class TextMeshLoader:
    """Runs a mesh builder on a worker thread; the frame loop polls for it.

    ``poll`` hands the finished mesh out exactly once. A builder failure is
    logged and the loader then reports ``failed`` instead of raising into the
    frame loop.
    """

    def __init__(
        self,
        builder: Callable[[], WireframeMesh],
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> None:
        self._builder = builder
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="text-mesh"
        )
        self._future: Optional[Future] = None
        self.failed = False
        self.delivered = False

    def start(self) -> None:
        if self._future is None:
            self._future = self._executor.submit(self._builder)

    @property
    def pending(self) -> bool:
        return self._future is not None and not (self.failed or self.delivered)

    def poll(self) -> Optional[WireframeMesh]:
        future = self._future
        if future is None or not future.done() or self.failed or self.delivered:
            return None
        error = future.exception()
        if error is not None:
            self.failed = True
            logger.error(
                "Text mesh construction failed; continuing without text",
                exc_info=(type(error), error, error.__traceback__),
            )
            return None
        self.delivered = True
        return future.result()

    def shutdown(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
