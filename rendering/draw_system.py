"""Wireframe renderer for the Heartfield scene."""
from __future__ import annotations

import logging
from typing import Dict, Tuple

import numpy as np
from OpenGL import GL as gl

from scene import config
from scene.camera import OrbitCamera
from scene.objects import Scene, SceneObject
from .meshes import (
    WireframeMesh,
    create_box_mesh,
    create_ground_mesh,
    create_heart_mesh,
    create_light_marker_mesh,
    create_sphere_mesh,
    create_torus_mesh,
)
from .opengl_context import hex_to_rgba

logger = logging.getLogger(__name__)


def build_mesh_library() -> Dict[str, WireframeMesh]:
    """Every mesh the scene references by key, except the late text mesh."""

    settings = config.MESH_SETTINGS
    return {
        "cube": create_box_mesh(settings["cube_size"]),
        "floating_cube": create_box_mesh(config.FLOATING_CUBE_SIZE),
        "sphere": create_sphere_mesh(settings["sphere_radius"], settings["sphere_segments"]),
        "torus": create_torus_mesh(
            settings["torus_radius"],
            settings["torus_tube"],
            settings["torus_radial_segments"],
            settings["torus_tubular_segments"],
        ),
        "ground": create_ground_mesh(settings["ground_size"], settings["ground_divisions"]),
        "heart": create_heart_mesh(settings["heart_curve_steps"], settings["heart_depth"]),
        "light_marker": create_light_marker_mesh(settings["light_marker_size"]),
    }


class SceneRenderer:
    """Draws scene objects from shared mesh data using client vertex arrays."""

    def __init__(self, meshes: Dict[str, WireframeMesh]) -> None:
        self._arrays: Dict[str, Tuple[np.ndarray, np.ndarray]] = {}
        for key, mesh in meshes.items():
            self.register_mesh(key, mesh)

    def register_mesh(self, key: str, mesh: WireframeMesh) -> None:
        self._arrays[key] = (mesh.vertex_array(), mesh.index_array())

    def draw_scene(self, scene: Scene, camera: OrbitCamera, viewport: Tuple[int, int]) -> None:
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        width, height = viewport
        gl.glViewport(0, 0, width, height)
        gl.glEnable(gl.GL_DEPTH_TEST)
        self._apply_camera(camera)

        gl.glEnableClientState(gl.GL_VERTEX_ARRAY)
        try:
            for obj in scene.objects():
                if obj.visible:
                    self._draw_object(obj)
        finally:
            gl.glDisableClientState(gl.GL_VERTEX_ARRAY)

    def _draw_object(self, obj: SceneObject) -> None:
        arrays = self._arrays.get(obj.mesh)
        if arrays is None:
            return
        vertices, indices = arrays
        if indices.size == 0:
            return
        model = obj.transform.model_matrix()
        gl.glPushMatrix()
        gl.glMultMatrixf(np.transpose(model).flatten())
        gl.glColor4f(*hex_to_rgba(obj.color))
        gl.glVertexPointer(3, gl.GL_FLOAT, 0, vertices)
        gl.glDrawElements(gl.GL_LINES, indices.size, gl.GL_UNSIGNED_INT, indices)
        gl.glPopMatrix()

    def _apply_camera(self, camera: OrbitCamera) -> None:
        projection = camera.projection_matrix()
        view = camera.view_matrix()
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glLoadMatrixf(np.transpose(projection).flatten())
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadMatrixf(np.transpose(view).flatten())
