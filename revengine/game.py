"""The demo game: a player with a camera, a gun sprite, enemies and a small object tree."""

from __future__ import annotations

import argparse
from enum import IntEnum
from pathlib import Path
from typing import Optional, Sequence, Union

from revengine.bullet import BulletComp
from revengine.camera import CompCamera
from revengine.comp_input import CompInput
from revengine.comp_render import CompRender
from revengine.core import CoreSystems
from revengine.engine import WINDOW_HEIGHT, WINDOW_WIDTH, Engine
from revengine.game_object import GameObject
from revengine.scene import Scene
from revengine.scene_manager import SceneManager
from revengine.texture_shader import TextureShader
from revengine.texture_shader_2d import TextureShader2D

RESOURCE_FOLDER = "../game_resources"


class Key(IntEnum):
    """Keyboard scancodes of the keys the game binds."""

    A = 4
    B = 5
    D = 7
    G = 10
    I = 12  # noqa: E741
    J = 13
    K = 14
    L = 15
    S = 22
    T = 23
    W = 26


def build_scene(resource_folder: Union[str, Path] = RESOURCE_FOLDER) -> Scene:
    """Load the game's resources and assemble its single scene."""
    root = Path(resource_folder)
    sprites = root / "doomSprites"
    renderer = CoreSystems.render_window
    device = renderer.device
    context = renderer.device_context

    sound = CoreSystems.sound
    sound.load_sound("pew", root / "sound" / "pew_pew.wav")
    sound.play_sound("pew")

    resources = CoreSystems.resource_manager
    test_texture = resources.load_resource(device, "TestTexture", sprites / "Enemies" / "bossb1.png")
    bullet_texture = resources.load_resource(device, "bulletTexture", sprites / "Bullets" / "misla5.png")
    bullet2_texture = resources.load_resource(device, "bullet2Texture", sprites / "Bullets" / "misla1.png")
    weapon_texture = resources.load_resource(device, "weaponTexture", sprites / "Weapons" / "pisga0.png")

    texture_shader = TextureShader(device, context)
    texture_shader_2d = TextureShader2D(device, context)

    player = GameObject()
    camera = player.add_component(CompCamera, player.transform)
    controls = player.add_component(CompInput)

    gun = GameObject()
    gun.transform.set_position(0, -0.5, 0)
    gun.add_component(CompRender, gun.transform, camera, texture_shader_2d, weapon_texture, 0.3, 0.3)

    player_transform = player.transform
    controls.bind_action(Key.I, lambda: player_transform.add_pitch_input(10))
    controls.bind_action(Key.K, lambda: player_transform.add_pitch_input(-10))
    controls.bind_action(Key.L, lambda: player_transform.add_yaw_input(10))
    controls.bind_action(Key.J, lambda: player_transform.add_yaw_input(-10))
    controls.bind_action(Key.W, lambda: player_transform.move_forward(1))
    controls.bind_action(Key.S, lambda: player_transform.move_forward(-1))
    controls.bind_action(Key.D, lambda: player_transform.move_right(1))
    controls.bind_action(Key.A, lambda: player_transform.move_right(-1))

    enemy1 = GameObject()
    enemy1.transform.set_position(0, 0, 5)
    enemy1.add_component(CompRender, enemy1.transform, camera, texture_shader, test_texture)
    enemy2 = GameObject()
    enemy2.transform.set_position(1, 0, 5)
    enemy2.add_component(CompRender, enemy2.transform, camera, texture_shader, test_texture)

    # A bullet is built but not placed in the scene.
    bullet = GameObject()
    bullet.add_component(CompRender, bullet.transform, camera, texture_shader, bullet_texture)
    bullet.add_component(BulletComp, bullet.transform)

    grand_parent = GameObject()
    grand_parent.transform.set_position(3, 0, 0)
    grand_parent.add_component(CompRender, grand_parent.transform, camera, texture_shader, bullet2_texture)
    parent = GameObject()
    parent.transform.set_position(4, 0, 0)
    parent.add_component(CompRender, parent.transform, camera, texture_shader, bullet_texture)
    son = GameObject()
    son.transform.set_position(8, 1, 0)
    son.add_component(CompRender, son.transform, camera, texture_shader, bullet_texture)
    grand_parent.add_child(parent)
    parent.add_child(son)

    grand_transform = grand_parent.transform
    parent_transform = parent.transform
    son_transform = son.transform
    controls.bind_action(Key.T, lambda: grand_transform.move_right(1))
    controls.bind_action(Key.G, lambda: parent_transform.add_yaw_input(0.1))
    controls.bind_action(Key.B, lambda: son_transform.add_yaw_input(0.1))

    scene = Scene()
    for obj in (player, enemy1, enemy2, gun, grand_parent):
        scene.add_game_object(obj)
    scene.display_hierarchy()
    return scene


def load(resource_folder: Union[str, Path] = RESOURCE_FOLDER) -> SceneManager:
    """Build the scene, hand it to the shared scene manager and return that manager."""
    scene = build_scene(resource_folder)
    manager = CoreSystems.scene_manager
    manager.add_scene(scene)
    return manager


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the demo game.")
    parser.add_argument(
        "resource_folder",
        nargs="?",
        default=RESOURCE_FOLDER,
        help="folder holding the game's sounds and sprites",
    )
    args = parser.parse_args(argv)
    engine = Engine(WINDOW_WIDTH, WINDOW_HEIGHT)
    engine.run(lambda: load(args.resource_folder))
    return 0