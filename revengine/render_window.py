"""The game window: owns the device, the meshes and the event loop hook."""

from __future__ import annotations

from typing import Any, Iterable, Optional

import numpy as np
import pygame

from revengine.device import Device, DeviceContext, WindowHandler
from revengine.mesh import Mesh
from revengine.utils import VERTEX_SIZE, Vertex

WINDOW_TITLE = "WINDOW OF GODS"


def perspective_lh(view_width: float, view_height: float, near_z: float, far_z: float) -> np.ndarray:
    """Left-handed perspective projection (row-vector convention, depth mapped to [0, 1])."""
    if near_z <= 0 or far_z <= 0:
        raise ValueError("near and far planes must be positive")
    if near_z == far_z:
        raise ValueError("near and far planes must differ")
    if view_width == 0 or view_height == 0:
        raise ValueError("view size must be non-zero")
    two_near = near_z + near_z
    depth_range = far_z / (far_z - near_z)
    return np.array(
        [
            [two_near / view_width, 0.0, 0.0, 0.0],
            [0.0, two_near / view_height, 0.0, 0.0],
            [0.0, 0.0, depth_range, 1.0],
            [0.0, 0.0, -depth_range * near_z, 0.0],
        ]
    )


class RenderWindow:
    """Creates the window, stores meshes and pumps window events into input."""

    def __init__(self, input_manager: Any) -> None:
        self._input_manager = input_manager
        self._handler: Optional[WindowHandler] = None
        self._window = None
        self._meshes: dict[int, Mesh] = {}
        self._projection: Optional[np.ndarray] = None
        self.width = 0
        self.height = 0

    def init_window(self, width: int, height: int, near_z: float = 1.0, far_z: float = 1000.0) -> None:
        """Open the window and set up the device and projection."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"video could not initialise: {exc}") from None
        self.width = width
        self.height = height
        self._projection = perspective_lh(
            1.0, min(float(width), float(height)) / max(float(width), float(height)), near_z, far_z
        )
        try:
            self._window = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise RuntimeError(f"window could not be created: {exc}") from None
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.mouse.set_visible(False)
        pygame.event.set_grab(True)
        pygame.mouse.get_rel()
        self._handler = WindowHandler(self._window, width, height)
        self._handler.setup()

    def _require_handler(self) -> WindowHandler:
        if self._handler is None:
            raise RuntimeError("init_window() has not been called")
        return self._handler

    def add_mesh(self, vertices: Iterable[Vertex], indices: Iterable[int]) -> int:
        """Upload a mesh and return its id."""
        mesh = Mesh(self._require_handler().device)
        mesh.setup_vertex_buffer(vertices)
        mesh.setup_index_buffer(indices)
        self._meshes[mesh.id] = mesh
        return mesh.id

    def draw_mesh(self, mesh_id: int) -> None:
        context = self._require_handler().device_context
        try:
            mesh = self._meshes[mesh_id]
        except KeyError:
            raise KeyError(f"no mesh with id {mesh_id}") from None
        context.set_vertex_buffer(mesh.vertex_buffer, VERTEX_SIZE, 0)
        context.set_index_buffer(mesh.index_buffer)
        context.draw_indexed(mesh.index_count)

    def update_window(self) -> bool:
        """Handle pending events and present the frame; True means the user asked to quit."""
        handler = self._require_handler()
        for event in pygame.event.get():
            if event.type == pygame.KEYDOWN:
                self._input_manager.handle_key_down(getattr(event, "scancode", 0))
            elif event.type == pygame.QUIT:
                return True
        x_rel, y_rel = pygame.mouse.get_rel()
        self._input_manager.handle_mouse_relative_motion(x_rel, y_rel)
        handler.update_window()
        return False

    def rip_window(self) -> None:
        """Close the window and shut the video system down."""
        pygame.display.quit()
        pygame.quit()
        self._window = None

    @property
    def projection_matrix(self) -> np.ndarray:
        if self._projection is None:
            raise RuntimeError("init_window() has not been called")
        return self._projection.copy()

    @property
    def device(self) -> Device:
        return self._require_handler().device

    @property
    def device_context(self) -> DeviceContext:
        return self._require_handler().device_context