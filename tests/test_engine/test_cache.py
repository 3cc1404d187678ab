"""Tests for the interpolation cache."""

import pytest

from vectormorph.engine.cache import AnimationData, ShapeKind, slot_fraction, slot_index
from vectormorph.engine.commands import MoveTo


@pytest.mark.parametrize(
    "fraction, expected",
    [
        (0.0, 0),
        (1.0, 100),
        (0.0049, 0),
        (0.0051, 1),
        (0.005, 1),
        (0.5, 50),
        (-3.0, 0),
        (7.0, 100),
        (float("nan"), 0),
    ],
)
def test_slot_index(fraction, expected):
    assert slot_index(fraction, 100) == expected


def test_slot_fraction():
    assert slot_fraction(0, 4) == 0.0
    assert slot_fraction(3, 4) == 0.75
    assert slot_fraction(4, 4) == 1.0


def test_smoothness_must_be_positive():
    with pytest.raises(ValueError):
        AnimationData(0)
    assert AnimationData(1).slot(0.6) == 1


def test_slots_start_empty():
    data = AnimationData(10)
    for kind in ShapeKind:
        assert data.filled(kind) == 0
        assert data.get(kind, 0.5) is None


def test_put_and_get_share_a_slot():
    data = AnimationData(10)
    shape = (MoveTo(1.0, 2.0),)
    data.put(ShapeKind.PAIRED, 0.31, shape)
    assert data.get(ShapeKind.PAIRED, 0.29) is shape
    assert data.get(ShapeKind.UNPAIRED_START, 0.3) is None


def test_get_or_compute_uses_slot_fraction():
    data = AnimationData(10)
    calls = []

    def compute(fraction):
        calls.append(fraction)
        return (MoveTo(fraction, 0.0),)

    first = data.get_or_compute(ShapeKind.PAIRED, 0.33, compute)
    assert calls == [pytest.approx(0.3)]
    # Same slot, different fraction: served from cache
    second = data.get_or_compute(ShapeKind.PAIRED, 0.27, compute)
    assert second is first
    assert len(calls) == 1


def test_fill_all_and_selected():
    data = AnimationData(4)
    data.fill(ShapeKind.PAIRED, lambda f: (MoveTo(f, f),))
    assert data.filled(ShapeKind.PAIRED) == 5
    assert data.get(ShapeKind.PAIRED, 0.75) == (MoveTo(0.75, 0.75),)

    data.fill(ShapeKind.UNPAIRED_END, lambda f: (), indices=range(0, 5, 4))
    assert data.filled(ShapeKind.UNPAIRED_END) == 2
    assert data.get(ShapeKind.UNPAIRED_END, 0.5) is None
