import pygame
import pytest

from audiocaster.app import YELLOW, SoundBank, display_stats, draw_objects, main
from audiocaster.line_object import LineObject
from audiocaster.ray_listener import RayListener
from audiocaster.vec2 import Vec2


class _FakeChannel:
    def __init__(self):
        self.levels = None

    def set_volume(self, left, right):
        self.levels = (left, right)


class _FakeSound:
    def __init__(self, give_channel=True):
        self.channels = []
        self.stopped = False
        self.give_channel = give_channel

    def play(self):
        if not self.give_channel:
            return None
        channel = _FakeChannel()
        self.channels.append(channel)
        return channel

    def stop(self):
        self.stopped = True


@pytest.fixture
def loader():
    loaded = {}

    def load(file):
        loaded.setdefault(file, []).append(_FakeSound())
        return loaded[file][-1]

    load.loaded = loaded
    return load


def _surface():
    return pygame.Surface((20, 20), 0, 32)


def test_sound_bank_loads_each_file_once(loader):
    bank = SoundBank(loader)
    assert bank.play("a.wav", 1.0, 0.5)
    assert bank.play("a.wav", 0.5, 0.5)
    assert len(loader.loaded["a.wav"]) == 1
    assert len(loader.loaded["a.wav"][0].channels) == 2


def test_sound_bank_pan_extremes(loader):
    bank = SoundBank(loader)
    bank.play("a.wav", 1.0, 1.0)
    bank.play("a.wav", 1.0, 0.0)
    left_only, right_only = (c.levels for c in loader.loaded["a.wav"][0].channels)
    assert left_only[1] == 0.0 and left_only[0] > 0.0
    assert right_only[0] == 0.0 and right_only[1] > 0.0


def test_sound_bank_centre_pan_is_balanced(loader):
    bank = SoundBank(loader)
    bank.play("a.wav", 0.4, 0.5)
    left, right = loader.loaded["a.wav"][0].channels[0].levels
    assert left == pytest.approx(right)
    assert left <= 0.4


def test_sound_bank_no_free_channel():
    bank = SoundBank(lambda file: _FakeSound(give_channel=False))
    assert bank.play("a.wav", 1.0, 0.5) is False


def test_sound_bank_close_stops_sounds(loader):
    with SoundBank(loader) as bank:
        bank.play("a.wav", 1.0, 0.5)
    assert loader.loaded["a.wav"][0].stopped
    bank.play("a.wav", 1.0, 0.5)
    assert len(loader.loaded["a.wav"]) == 2


def test_draw_opaque_wall():
    surface = _surface()
    wall = LineObject(Vec2(0.0, 5.0), Vec2(19.0, 5.0), sound_absorption=0.0)
    draw_objects(surface, [wall], 0.0)
    assert tuple(surface.get_at((10, 5)))[:3] == (255, 255, 255)


def test_draw_fully_absorbing_wall_is_invisible():
    surface = _surface()
    wall = LineObject(Vec2(0.0, 5.0), Vec2(19.0, 5.0), sound_absorption=1.0)
    draw_objects(surface, [wall], 0.0)
    assert tuple(surface.get_at((10, 5)))[:3] == (0, 0, 0)


def test_draw_sound_source():
    surface = _surface()
    source = LineObject.sound_source(Vec2(10.0, 10.0), 3, "snap.wav")
    draw_objects(surface, [source], 0.0)
    assert tuple(surface.get_at((10, 10)))[:3] == YELLOW[:3]
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_display_stats_lines():
    pygame.font.init()
    font = pygame.font.Font(None, 30)
    surface = pygame.Surface((400, 200), 0, 32)
    lines = display_stats(surface, font, 60.7, RayListener())
    assert lines == ["FPS: 60", "Sample size: 25", "Num bounces: 4"]


def test_main_missing_vertex_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "Failed to open data file" in capsys.readouterr().err