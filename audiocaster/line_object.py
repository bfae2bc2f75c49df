"""Walls and sound sources that rays can hit."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .vec2 import Vec2

SOUND_SPEED = 2043.0
MAX_ACTIVE_SOUNDS = 10
SOUND_LIFETIME = 5.0
CONTAINS_TOLERANCE = 0.5


class ObjectType(enum.IntEnum):
    """What kind of object a line represents."""

    WALL = 0
    SOUND = 1


@dataclass
class SoundInfo:
    """A sound file and the volume it is heard at."""

    file: str = ""
    volume: float = 0.0


@dataclass
class ActiveSound:
    """A sound emitted by a source and the time it started."""

    info: SoundInfo
    started: float


def distance(p1: Vec2, p2: Vec2) -> float:
    """Distance between two points."""
    return (p1 - p2).length()


@dataclass
class LineObject:
    """A wall segment or a circular sound source."""

    start: Vec2
    end: Vec2
    type: ObjectType = ObjectType.WALL
    sound_file: str = ""
    sound_absorption: float = 0.5
    sound_reflection: float = 0.5
    radius: float = 40
    active_sounds: list[ActiveSound] = field(default_factory=list)
    normal: Vec2 = field(init=False)

    def __post_init__(self) -> None:
        self.normal = Vec2(
            self.end.y - self.start.y, self.start.x - self.end.x
        ).normalized()

    @classmethod
    def sound_source(cls, start: Vec2, radius: float, sound_file: str) -> LineObject:
        """A fully reflective sound source centred on *start*."""
        return cls(
            start,
            Vec2(0.0, 0.0),
            ObjectType.SOUND,
            sound_file=sound_file,
            sound_absorption=0.0,
            sound_reflection=1.0,
            radius=radius,
        )

    def add_sound(self, sound_file: str) -> None:
        """Set the file this object emits."""
        self.sound_file = sound_file

    def play_sound(self, now: float) -> bool:
        """Start emitting the sound at time *now*; False if too many are active."""
        if len(self.active_sounds) >= MAX_ACTIVE_SOUNDS:
            return False
        self.active_sounds.append(ActiveSound(SoundInfo(self.sound_file, 1.0), now))
        return True

    def delete_old_sounds(self, now: float) -> None:
        """Drop the first silent or expired sound, at most one per call."""
        for index, sound in enumerate(self.active_sounds):
            if sound.info.volume <= 0.0 or now - sound.started > SOUND_LIFETIME:
                del self.active_sounds[index]
                return

    def slope(self) -> float:
        """Slope of the segment; ZeroDivisionError for a vertical one."""
        return (self.end.y - self.start.y) / (self.end.x - self.start.x)

    def normal_slope(self) -> float:
        """Slope perpendicular to the segment; ZeroDivisionError for a horizontal one."""
        return -1 / self.slope()

    def length(self) -> float:
        """Length of the segment."""
        return distance(self.start, self.end)

    def contains_point(self, p: Vec2) -> bool:
        """Whether *p* lies on the segment, within a small tolerance."""
        detour = distance(self.start, p) + distance(self.end, p) - self.length()
        return abs(detour) < CONTAINS_TOLERANCE

    def move(self, displacement: Vec2) -> None:
        """Translate the object by *displacement*."""
        self.start = self.start + displacement
        self.end = self.end + displacement