"""Component that draws a textured quad for its game object."""

from __future__ import annotations

from typing import Any

from revengine.component import BaseComponent
from revengine.core import CoreSystems
from revengine.utils import Vertex

QUAD_INDICES = (0, 1, 2, 2, 1, 3)


class CompRender(BaseComponent):
    """A textured quad of the given size, centred on the origin at the object's depth."""

    def __init__(
        self,
        game_object: Any,
        transform: Any,
        camera: Any,
        shader: Any,
        texture: Any,
        width: float = 1.0,
        height: float = 1.0,
    ) -> None:
        super().__init__(game_object)
        self._transform = transform
        self._camera = camera
        self._shader = shader
        self._texture = texture
        depth = float(transform.position[2])
        half_w = width / 2
        half_h = height / 2
        self._vertices = (
            Vertex((-half_w, -half_h, depth), (0.0, 1.0)),  # bottom left
            Vertex((half_w, -half_h, depth), (1.0, 1.0)),  # bottom right
            Vertex((-half_w, half_h, depth), (0.0, 0.0)),  # top left
            Vertex((half_w, half_h, depth), (1.0, 0.0)),  # top right
        )
        self._indices = QUAD_INDICES
        self._mesh_id = CoreSystems.render_window.add_mesh(self._vertices, self._indices)

    def render(self) -> None:
        """Upload the matrices and texture to the shader and draw the quad."""
        window = CoreSystems.render_window
        # The shader expects row-vector matrices, the transform gives column-vector ones.
        model = self._transform.model_matrix().T
        self._shader.set_shader(
            model,
            self._camera.camera.view_matrix,
            window.projection_matrix,
            self._texture.shader_resource_view,
        )
        self._shader.set_shader_stages()
        window.draw_mesh(self._mesh_id)

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return self._vertices

    @property
    def indices(self) -> tuple[int, ...]:
        return self._indices

    @property
    def mesh_id(self) -> int:
        return self._mesh_id