"""Interactive window: move the listener with the mouse and trigger sounds."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Iterable, Sequence

import pygame

from .buffers import LineBuffer, VertexBuffer
from .line_object import SOUND_SPEED, LineObject, ObjectType
from .ray_listener import RayListener, RaySegment
from .vec2 import Vec2

VERTEX_FILE = "resources/vertices.csv"
SNAP_FILE = "resources/snap.mp3"
BOTTLE_FILE = "resources/bottle.mp3"

BACKGROUND = (5, 10, 15)
WHITE = (255, 255, 255, 255)
YELLOW = (253, 249, 0, 255)
GREEN = (0, 228, 48, 255)

WINDOW_FRACTION = 0.7
MIXER_CHANNELS = 64


def _pan_levels(pan: float) -> tuple[float, float]:
    """Left and right levels for *pan* in [0, 1]: 0.5 centred, 1.0 left, 0.0 right."""
    pan = min(max(pan, 0.0), 1.0)
    return min(1.0, 2.0 * pan), min(1.0, 2.0 * (1.0 - pan))


def _alpha(fraction: float) -> int:
    return max(0, min(255, int(fraction * 255)))


class SoundBank:
    """Loads each sound file once and plays it on a free channel."""

    def __init__(self, loader: Callable[[str], Any] | None = None) -> None:
        self._loader = loader if loader is not None else pygame.mixer.Sound
        self._sounds: dict[str, Any] = {}

    def play(self, file: str, volume: float, pan: float) -> bool:
        """Play *file* at *volume* and *pan*; False if no channel was free."""
        sound = self._sounds.get(file)
        if sound is None:
            sound = self._sounds[file] = self._loader(file)
        channel = sound.play()
        if channel is None:
            return False
        left, right = _pan_levels(pan)
        channel.set_volume(volume * left, volume * right)
        return True

    def close(self) -> None:
        """Stop and release every loaded sound."""
        for sound in self._sounds.values():
            sound.stop()
        self._sounds.clear()

    def __enter__(self) -> SoundBank:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def draw_objects(surface: pygame.Surface, buffer: Iterable[LineObject], now: float) -> None:
    """Draw walls, sound sources and the wavefronts of their active sounds."""
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    for obj in buffer:
        if obj.type == ObjectType.WALL:
            color = (255, 255, 255, _alpha(1.0 - obj.sound_absorption))
            pygame.draw.line(overlay, color, tuple(obj.start), tuple(obj.end))
            continue
        center = tuple(obj.start)
        pygame.draw.circle(overlay, YELLOW, center, obj.radius)
        for active in obj.active_sounds:
            if active.info.volume <= 0.0:
                continue
            pygame.draw.circle(overlay, YELLOW, center, SOUND_SPEED * (now - active.started), 1)
    surface.blit(overlay, (0, 0))


def _draw_rays(surface: pygame.Surface, rays: Iterable[RaySegment]) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    for segment in rays:
        pygame.draw.line(overlay, segment.color, tuple(segment.start), tuple(segment.end))
    surface.blit(overlay, (0, 0))


def display_stats(
    surface: pygame.Surface, font: pygame.font.Font, fps: float, listener: RayListener
) -> list[str]:
    """Draw frame rate, sample size and bounce count; return the lines drawn."""
    lines = [
        f"FPS: {int(fps)}",
        f"Sample size: {int(listener.sample_size)}",
        f"Num bounces: {int(listener.max_bounces)}",
    ]
    for row, text in enumerate(lines):
        surface.blit(font.render(text, True, WHITE), (10, 10 + 40 * row))
    return lines


def _handle_key(key: int, listener: RayListener, snd: LineObject, snd2: LineObject, now: float) -> None:
    if key == pygame.K_SPACE:
        snd.play_sound(now)
    elif key == pygame.K_w:
        snd2.play_sound(now)
    elif key == pygame.K_UP:
        listener.sample_size += 20
    elif key == pygame.K_DOWN and listener.sample_size > 5:
        listener.sample_size -= 20
    elif key == pygame.K_LEFT and listener.max_bounces > 1:
        listener.max_bounces -= 1
    elif key == pygame.K_RIGHT and listener.max_bounces < 8:
        listener.max_bounces += 1


def _run(buffer: LineBuffer, listener: RayListener, snd: LineObject, snd2: LineObject, head: LineObject) -> None:
    info = pygame.display.Info()
    size = (int(info.current_w * WINDOW_FRACTION), int(info.current_h * WINDOW_FRACTION))
    screen = pygame.display.set_mode(size)
    pygame.display.set_caption("RayCaster")
    pygame.mixer.init()
    pygame.mixer.set_num_channels(MIXER_CHANNELS)
    font = pygame.font.Font(None, 30)

    previous = 0.0
    with SoundBank() as bank:
        while True:
            now = pygame.time.get_ticks() / 1000.0
            keys = []
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return
                    keys.append(event.key)

            mouse = Vec2(*map(float, pygame.mouse.get_pos()))
            head.move(mouse - listener.pos)
            listener.pos = mouse
            snd.start = mouse

            screen.fill(BACKGROUND)
            for key in keys:
                _handle_key(key, listener, snd, snd2, now)

            snd.delete_old_sounds(now)
            snd2.delete_old_sounds(now)
            listener.listen(buffer, now - previous, now)
            listener.play_detected_sounds(bank.play)

            _draw_rays(screen, listener.rays)
            draw_objects(screen, buffer, now)
            fps = 1.0 / (now - previous) if now > previous else 0.0
            display_stats(screen, font, fps, listener)
            pygame.draw.circle(screen, GREEN, (int(listener.pos.x), int(listener.pos.y)), 10)

            pygame.display.flip()
            previous = now


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive window."""
    parser = argparse.ArgumentParser(prog="audiocaster", description="Acoustic ray casting demo.")
    parser.add_argument("vertices", nargs="?", default=VERTEX_FILE, help="wall vertex file")
    args = parser.parse_args(argv)

    vertex_buffer = VertexBuffer()
    try:
        vertex_buffer.load_data(args.vertices)
    except OSError:
        print("ERROR loadData(): Failed to open data file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"ERROR loadData(): {error}", file=sys.stderr)
        return 1

    buffer = LineBuffer()
    buffer.load_data(vertex_buffer.vertices)
    listener = RayListener()
    snd = LineObject.sound_source(Vec2(400.0, 400.0), 8, SNAP_FILE)
    snd2 = LineObject.sound_source(Vec2(400.0, 400.0), 40, BOTTLE_FILE)
    pos = listener.pos
    head = LineObject(Vec2(pos.x - 10.0, pos.y - 30.0), Vec2(pos.x + 10.0, pos.y - 30.0))
    buffer.lines.extend([snd, snd2, head])

    pygame.init()
    try:
        _run(buffer, listener, snd, snd2, head)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())