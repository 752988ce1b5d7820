"""The interactive demo: bouncing cubes, a spinning tetrahedron and a free camera."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Container, Iterable

import pygame

from .object import Object
from .shapes import build_scene
from .types import Camera, Position, Rotation

BOUND = 100.0
NUDGE = 0.3
_PATH_RANGE = (0.2, 0.8)
_CONTROL_KEYS = (
    pygame.K_w,
    pygame.K_a,
    pygame.K_s,
    pygame.K_d,
    pygame.K_LCTRL,
    pygame.K_SPACE,
    pygame.K_LEFT,
    pygame.K_RIGHT,
    pygame.K_UP,
    pygame.K_DOWN,
    pygame.K_i,
    pygame.K_j,
    pygame.K_k,
    pygame.K_l,
    pygame.K_EQUALS,
    pygame.K_MINUS,
    pygame.K_ESCAPE,
)


def calculate_distance(p1: Position, p2: Position) -> float:
    """Euclidean distance between two positions."""
    return math.dist((p1.x, p1.y, p1.z), (p2.x, p2.y, p2.z))


def sort_for_drawing(objects: Iterable[Object], camera: Camera) -> list[Object]:
    """Objects ordered farthest from the camera first."""
    return sorted(objects, key=lambda obj: calculate_distance(camera.pos, obj.pos), reverse=True)


def draw_objects(surface: pygame.Surface, objects: Iterable[Object], camera: Camera) -> None:
    """Draw the objects back to front."""
    for obj in sort_for_drawing(objects, camera):
        obj.draw(surface, camera)


class Simulation:
    """State of the demo scene, advanced one frame at a time."""

    def __init__(
        self,
        scene: dict[str, Object] | None = None,
        camera: Camera | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.scene = build_scene() if scene is None else scene
        self.camera = Camera() if camera is None else camera
        self.rng = random.Random() if rng is None else rng
        self.movement_speed = 0.8
        self.rotation_speed = 0.06
        self.pyramid_rot_speed = 1.0
        self.mov_x_mod = 1
        self.mov_z_mod = 1
        self.path_x = self._new_path()
        self.path_z = self._new_path()

    def _new_path(self) -> float:
        return self.rng.uniform(*_PATH_RANGE)

    def _bounce_x(self, limit: float) -> None:
        self.mov_x_mod *= -1
        self.scene["cube1"].x = limit
        self.path_x = self._new_path()

    def _bounce_z(self, limit: float) -> None:
        self.mov_z_mod *= -1
        self.scene["cube1"].z = limit
        self.path_z = self._new_path()

    def step(self) -> bool:
        """Advance one frame; return True if the moving cube bounced."""
        cube1 = self.scene["cube1"]
        cube2 = self.scene["cube2"]
        tetrahedron = self.scene["tetrahedron"]

        cube1.move(
            Position(
                self.path_x * self.mov_x_mod,
                0,
                self.path_z * self.mov_z_mod,
                Rotation(pitch=0, roll=4.0, yaw=2.0),
            )
        )
        cube2.move(Position(0, 0, 0, Rotation(pitch=0.7, roll=0, yaw=-0.3)))
        tetrahedron.move(Position(0, 0, 0, Rotation(yaw=self.pyramid_rot_speed)))

        bounced = False
        if cube1.x > BOUND:
            self._bounce_x(BOUND)
            bounced = True
        elif cube1.x < -BOUND:
            self._bounce_x(-BOUND)
            bounced = True

        if cube1.z > BOUND:
            self._bounce_z(BOUND)
            bounced = True
        elif cube1.z < -BOUND:
            self._bounce_z(-BOUND)
            bounced = True

        if cube1.collides_with(cube2):
            self.mov_x_mod *= -1
            self.mov_z_mod *= -1
            self.path_z = self._new_path()
            bounced = True
        return bounced

    def handle_keys(self, pressed: Container[int]) -> bool:
        """Apply the held keys to camera and scene; return True if Escape is held."""
        view = self.camera.pos
        speed = self.movement_speed
        turn = self.rotation_speed
        cos_yaw = math.cos(view.rotation.yaw)
        sin_yaw = math.sin(view.rotation.yaw)

        if pygame.K_s in pressed:
            view.z -= speed * cos_yaw
            view.x -= speed * sin_yaw
        if pygame.K_w in pressed:
            view.z += speed * cos_yaw
            view.x += speed * sin_yaw
        if pygame.K_a in pressed:
            view.x -= speed * cos_yaw
            view.z += speed * sin_yaw
        if pygame.K_d in pressed:
            view.x += speed * cos_yaw
            view.z -= speed * sin_yaw
        if pygame.K_LCTRL in pressed:
            view.y += speed
        if pygame.K_SPACE in pressed:
            view.y -= speed

        if pygame.K_LEFT in pressed:
            view.rotation.yaw -= turn
        if pygame.K_RIGHT in pressed:
            view.rotation.yaw += turn
        if pygame.K_UP in pressed:
            view.rotation.pitch -= turn
        if pygame.K_DOWN in pressed:
            view.rotation.pitch += turn

        cube2 = self.scene["cube2"]
        if pygame.K_i in pressed:
            cube2.move(Position(0, 0, NUDGE))
        if pygame.K_k in pressed:
            cube2.move(Position(0, 0, -NUDGE))
        if pygame.K_l in pressed:
            cube2.move(Position(NUDGE, 0, 0))
        if pygame.K_j in pressed:
            cube2.move(Position(-NUDGE, 0, 0))

        if pygame.K_EQUALS in pressed:
            self.pyramid_rot_speed += 0.1
        if pygame.K_MINUS in pressed:
            self.pyramid_rot_speed -= 0.1

        return pygame.K_ESCAPE in pressed


def _load_sound(path: str) -> pygame.mixer.Sound | None:
    try:
        pygame.mixer.init()
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError):
        return None


def main(argv: list[str] | None = None) -> int:
    """Open a window and run the demo until it is closed."""
    parser = argparse.ArgumentParser(description="Wireframe 3D demo.")
    parser.add_argument("--width", type=int, default=1920)
    parser.add_argument("--height", type=int, default=1080)
    parser.add_argument("--sound", default="./Audio/boing.ogg", help="sound played on a bounce")
    parser.add_argument("--seed", type=int, default=None, help="seed for the cube's path")
    parser.add_argument("--fps", type=int, default=60)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Window")
        clock = pygame.time.Clock()
        sound = _load_sound(args.sound)
        sim = Simulation(rng=random.Random(args.seed))

        running = True
        while running:
            if sim.step() and sound is not None:
                sound.play()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            state = pygame.key.get_pressed()
            pressed = {key for key in _CONTROL_KEYS if state[key]}
            if sim.handle_keys(pressed):
                running = False

            screen.fill((0, 0, 0))
            draw_objects(screen, sim.scene.values(), sim.camera)
            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0