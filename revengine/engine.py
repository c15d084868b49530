"""The engine: opens the window and runs the game loop with a fixed simulation step."""

from __future__ import annotations

import time
from typing import Any, Callable

from revengine.core import CoreSystems

WINDOW_WIDTH = 700
WINDOW_HEIGHT = 500
FPS = 120


def _ms_per_frame(fps: int) -> float:
    return 1000.0 / fps


class Engine:
    """Owns the main loop; creating it opens the shared render window."""

    def __init__(
        self,
        window_width: int,
        window_height: int,
        near_z: float = 1.0,
        far_z: float = 1000.0,
    ) -> None:
        self.window_width = window_width
        self.window_height = window_height
        CoreSystems.render_window.init_window(window_width, window_height, near_z, far_z)

    def run(self, game_run: Callable[[], Any]) -> None:
        """Build the game with ``game_run`` and loop until the window is closed.

        Fixed updates run at 1/FPS steps to catch up with real time; update,
        late update and render run once per frame. The window is closed on exit.
        """
        window = CoreSystems.render_window
        try:
            scene_manager = game_run()
            fixed_time_step = 1.0 / FPS
            target_frame_time = int(_ms_per_frame(FPS)) / 1000.0
            last_time = time.perf_counter()
            lag = 0.0
            while True:
                current_time = time.perf_counter()
                delta_time = current_time - last_time
                last_time = current_time
                lag += delta_time

                while lag >= fixed_time_step:
                    scene_manager.fixed_update(fixed_time_step)
                    lag -= fixed_time_step

                scene_manager.update(delta_time)
                scene_manager.late_update(delta_time)
                scene_manager.render()

                if window.update_window():
                    break

                sleep_time = current_time + target_frame_time - time.perf_counter()
                if sleep_time > 0:
                    time.sleep(sleep_time)
        finally:
            window.rip_window()