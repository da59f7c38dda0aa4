from __future__ import annotations

import inspect
import random

import pytest

from profile_card.decor.rain import (
    RAIN_COLOR_DARK,
    RAIN_COLOR_LIGHT,
    Raindrop,
    generate_raindrops,
    rain_color,
)
from profile_card.decor.wave import wave_path


def test_generate_raindrops_default_count_and_bounds() -> None:
    drops = list(generate_raindrops(rng=random.Random(7)))
    assert len(drops) == 50
    assert [d.id for d in drops] == list(range(50))
    for d in drops:
        assert 0 <= d.left < 100
        assert 0 <= d.delay < 2
        assert 1 <= d.duration < 2


def test_generate_raindrops_is_lazy() -> None:
    gen = generate_raindrops(3, rng=random.Random(1))
    assert inspect.isgenerator(gen)
    assert isinstance(next(gen), Raindrop)


def test_generate_raindrops_uses_given_source() -> None:
    class _Fixed:
        def random(self) -> float:
            return 0.5

    drops = list(generate_raindrops(2, rng=_Fixed()))
    assert drops == [Raindrop(0, 50.0, 1.0, 1.5), Raindrop(1, 50.0, 1.0, 1.5)]


def test_generate_raindrops_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        list(generate_raindrops(-1))
    assert list(generate_raindrops(0)) == []


def test_rain_color_follows_theme() -> None:
    assert rain_color(True) == RAIN_COLOR_DARK == "#da931e"
    assert rain_color(False) == RAIN_COLOR_LIGHT == "#e1c8a3"


def test_wave_path_shape() -> None:
    d = wave_path(1000, 400, amplitude=30, points=4, base=20)
    assert d.startswith("M 0.00 50.00")
    assert d.endswith("L 1000.00 400.00 L 0.00 400.00 Z")
    assert d.count(" C ") == 4


def test_wave_path_rejects_zero_points() -> None:
    with pytest.raises(ValueError):
        wave_path(100, 100, points=0)
