"""Entry point for the Heartfield scene."""
from __future__ import annotations

import argparse
import logging
import random
import time
from typing import Optional, Sequence, Tuple

import pygame

from logging_config import setup_logging
from rendering.draw_system import SceneRenderer, build_mesh_library
from rendering.opengl_context import initialize_gl, resize_viewport
from rendering.text_mesh import TextMeshLoader, create_text_mesh
from scene import config
from scene.animation import AnimationUpdater
from scene.camera import OrbitCamera, create_default_camera
from scene.controls import CONTROLS, ControlSurface
from scene.objects import build_scene
from scene.state import AnimationState
from ui.control_panel import ControlPanel
from ui.layout import ControlPanelLayout

logger = logging.getLogger("main")

Vec2 = Tuple[int, int]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Animated 3D heart scene.")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--fullscreen", action="store_true")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--seed", type=int, default=None, help="seed for scene randomness")
    parser.add_argument("--text", default=config.TEXT_SETTINGS["content"])
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--log-file", default=None)
    return parser.parse_args(argv)


def _open_window(size: Vec2, fullscreen: bool) -> Vec2:
    flags = pygame.OPENGL | pygame.DOUBLEBUF
    if fullscreen:
        pygame.display.set_mode((0, 0), flags | pygame.FULLSCREEN)
    else:
        pygame.display.set_mode(size, flags | pygame.RESIZABLE)
    return pygame.display.get_surface().get_size()


def _text_builder(text: str):
    settings = config.TEXT_SETTINGS

    def build():
        return create_text_mesh(
            text,
            size=settings["size"],
            depth=settings["depth"],
            font_pixels=settings["font_pixels"],
            outline_every=settings["outline_every"],
        )

    return build


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    pygame.init()
    pygame.display.set_caption("Heartfield")
    window_size = _open_window((args.width, args.height), args.fullscreen)
    initialize_gl(window_size)
    logger.info("Window opened at %dx%d", *window_size)

    rng = random.Random(args.seed)
    scene = build_scene(rng)
    started = time.time()
    state = AnimationState(animation_start_time=started, scene_start_time=started)
    updater = AnimationUpdater(rng)
    controls = ControlSurface(scene, state)
    camera: OrbitCamera = create_default_camera(window_size)
    renderer = SceneRenderer(build_mesh_library())
    panel = ControlPanel(ControlPanelLayout(window_size, [name for name, _ in CONTROLS]))

    text_loader = TextMeshLoader(_text_builder(args.text))
    text_loader.start()

    dragging = False
    panning = False
    clock = pygame.time.Clock()
    running = True
    try:
        while running:
            clock.tick(args.fps)
            now = time.time()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    action = panel.action_for_key(event.key)
                    if action is not None:
                        controls.dispatch(action, now)
                elif event.type == pygame.VIDEORESIZE:
                    pygame.display.set_mode(
                        event.size, pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE
                    )
                    window_size = event.size
                    resize_viewport(window_size)
                    camera.update_viewport(window_size)
                    panel.layout.update(window_size)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    action = panel.handle_mouse_click(event.pos)
                    if action is not None:
                        controls.dispatch(action, now)
                    elif not panel.layout.is_in_panel(event.pos):
                        dragging = True
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
                    if not panel.layout.is_in_panel(event.pos):
                        panning = True
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    dragging = False
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 3:
                    panning = False
                elif event.type == pygame.MOUSEMOTION:
                    if dragging:
                        camera.orbit(event.rel)
                    elif panning:
                        camera.pan(event.rel)
                elif event.type == pygame.MOUSEWHEEL:
                    camera.zoom(event.y)

            if scene.text is None:
                mesh = text_loader.poll()
                if mesh is not None:
                    renderer.register_mesh("text", mesh)
                    scene.attach_text("text")

            updater.update(scene, state, now)
            camera.update()
            renderer.draw_scene(scene, camera, window_size)
            panel.draw(controls.labels)
            pygame.display.flip()
    finally:
        text_loader.shutdown()
        pygame.quit()
        logger.info("Shut down")


if __name__ == "__main__":
    run()
