"""Casting rays from a listener to find the sounds that reach it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterable

from .line_object import SOUND_SPEED, LineObject, ObjectType, SoundInfo, distance
from .vec2 import Vec2

MAX_DETECTED = 250
LISTEN_ARC = 6.28
RAY_LENGTH = 3000.0
LISTENER_OFFSET = 10.0
SOUND_TIME_TOLERANCE = 0.005
MIN_HIT_DISTANCE = 0.1

MISS_COLOR = (255, 50, 50, 40)
HEARD_COLOR = (255, 161, 0, 255)
_SOUND_RAY_RGB = (200, 200, 100)
_WALL_RAY_RGB = (40, 140, 250)

Color = tuple[int, int, int, int]
PlayFunction = Callable[[str, float, float], object]


def _alpha(fraction: float) -> int:
    return max(0, min(255, int(fraction * 255)))


@dataclass(frozen=True)
class RaySegment:
    """A piece of a cast ray, kept so it can be drawn."""

    start: Vec2
    end: Vec2
    color: Color


@dataclass
class DetectedSound:
    """A sound heard by the listener and the direction it came from."""

    direction: Vec2
    sound: SoundInfo


@dataclass
class RayListener:
    """A point that listens for sounds by casting rays all around it."""

    pos: Vec2 = field(default_factory=lambda: Vec2(-1.0, -1.0))
    sample_size: float = 25.0
    dtime: float = 0.0
    max_bounces: int = 4
    detected: list[DetectedSound] = field(default_factory=list)
    rays: list[RaySegment] = field(default_factory=list)

    def get_line_hit(self, s: Vec2, d: Vec2, line: LineObject, t: float) -> float | None:
        """Ray parameter at which the ray from *s* along *d* meets *line*, if within *t*."""
        along_normal = Vec2.dot(d, line.normal)
        if along_normal == 0.0:
            return None
        collision = Vec2.dot(line.end - s, line.normal) / along_normal
        if 0.0 < collision <= t and line.contains_point(s + d * collision):
            return collision
        return None

    def get_sound_hit(self, s: Vec2, d: Vec2, sound: LineObject, t: float) -> float | None:
        """Ray parameter at which the ray passes the sound source, if within *t*."""
        dist = distance(s, sound.start)
        if t < dist or distance(s + d * dist, sound.start) > sound.radius:
            return None
        return dist

    def ray_in_sound(self, sound_active_time: float, ray_active_time: float) -> bool:
        """Whether a ray's travel time matches how long a sound has been spreading."""
        return abs(sound_active_time - ray_active_time) <= SOUND_TIME_TOLERANCE

    def clear_detected(self) -> None:
        """Forget every detected sound."""
        self.detected.clear()

    def find_closest_object(
        self, s: Vec2, d: Vec2, t: float, objects: Iterable[LineObject]
    ) -> tuple[LineObject, float] | None:
        """The nearest object the ray hits and the distance to it, or None."""
        closest: tuple[LineObject, float] | None = None
        for obj in objects:
            if obj.type == ObjectType.WALL:
                hit = self.get_line_hit(s, d, obj, t)
            else:
                hit = self.get_sound_hit(s, d, obj, t)
            if hit is None or hit <= MIN_HIT_DISTANCE:
                continue
            if closest is not None and closest[1] <= hit:
                continue
            closest = (obj, hit)
        return closest

    def cast_ray(
        self,
        s: Vec2,
        d: Vec2,
        t: float,
        ct: float,
        num_bounces: int,
        objects: Iterable[LineObject],
        now: float,
    ) -> SoundInfo:
        """Follow a ray of remaining length *t*, already *ct* long, and return what it hears."""
        objects = list(objects)
        hit = self.find_closest_object(s, d, t, objects)
        if hit is None or t < hit[1]:
            self.rays.append(RaySegment(s, s + d * t, MISS_COLOR))
            return SoundInfo()

        obj, hit_dist = hit
        end = s + d * hit_dist
        travelled = ct + hit_dist
        falloff = min(1.0, 0.01 * (ct + t) * (ct + t) / (travelled * travelled))

        if obj.type == ObjectType.SOUND:
            self.rays.append(RaySegment(s, end, (*_SOUND_RAY_RGB, _alpha(falloff))))
            for active in obj.active_sounds:
                if active.info.volume <= 0.0 or not self.ray_in_sound(
                    now - active.started, travelled / SOUND_SPEED
                ):
                    continue
                active.info.volume = falloff
                self.rays.append(RaySegment(s, end, HEARD_COLOR))
                return SoundInfo(active.info.file, active.info.volume)
            return SoundInfo()

        if num_bounces == self.max_bounces:
            return SoundInfo()

        normal = obj.normal
        along_normal = Vec2.dot(d, normal)
        if along_normal > 0:
            normal = -normal
            along_normal = -along_normal
        reflected_dir = d - normal * (2 * along_normal)

        remaining = t - hit_dist
        reflected = self.cast_ray(
            end, reflected_dir, remaining, travelled, num_bounces + 1, objects, now
        )
        refracted = self.cast_ray(end, d, remaining, travelled, num_bounces + 1, objects, now)

        self.rays.append(
            RaySegment(s, end, (*_WALL_RAY_RGB, _alpha(falloff * obj.sound_reflection)))
        )

        volume = reflected.volume * obj.sound_reflection + refracted.volume * (
            1.0 - obj.sound_absorption - obj.sound_reflection
        )
        if refracted.file:
            return SoundInfo(refracted.file, volume)
        if reflected.file:
            return SoundInfo(reflected.file, volume)
        return SoundInfo()

    def listen(self, objects: Iterable[LineObject], dtime: float, now: float) -> list[DetectedSound]:
        """Cast rays in a full circle and record every sound they hear."""
        if self.sample_size <= 0:
            raise ValueError("sample_size must be positive")
        self.dtime = dtime
        self.rays.clear()
        objects = list(objects)
        step = LISTEN_ARC / self.sample_size
        angle = 0.0
        while angle <= LISTEN_ARC:
            direction = Vec2(math.cos(angle), math.sin(angle))
            origin = self.pos + direction * LISTENER_OFFSET
            angle += step
            sound = self.cast_ray(origin, direction, RAY_LENGTH, 0.0, 0, objects, now)
            if sound.volume <= 0.0 or len(self.detected) >= MAX_DETECTED:
                continue
            self.detected.append(DetectedSound(direction, sound))
        return self.detected

    def play_detected_sounds(self, play: PlayFunction) -> int:
        """Hand each audible detected sound to *play*(file, volume, pan), then forget them."""
        played = 0
        for detection in self.detected:
            sound = detection.sound
            if not sound.file or sound.volume <= 0.0:
                continue
            play(sound.file, sound.volume, -0.5 * (detection.direction.x - 1.0))
            played += 1
        self.detected.clear()
        return played