"""Tests for the converter registry."""

import pytest

from vectormorph.engine.commands import ALL_COMMAND_TYPES, Close, LineTo, MoveTo
from vectormorph.engine.registry import ConverterRegistry, ConverterSpec, get_registry


def _noop(command, cursor, previous):
    return []


def test_register_and_get():
    reg = ConverterRegistry()
    spec = ConverterSpec(kind=LineTo, fn=_noop)
    reg.register(spec)
    assert reg.get(LineTo) is spec
    assert reg.count == 1


def test_duplicate_registration_rejected():
    reg = ConverterRegistry()
    reg.register(ConverterSpec(kind=LineTo, fn=_noop))
    with pytest.raises(ValueError, match="LineTo"):
        reg.register(ConverterSpec(kind=LineTo, fn=_noop))


def test_missing_and_ensure_complete():
    reg = ConverterRegistry()
    reg.register(ConverterSpec(kind=MoveTo, fn=_noop))
    assert reg.missing([MoveTo, LineTo, Close]) == [LineTo, Close]
    with pytest.raises(ValueError, match="LineTo, Close"):
        reg.ensure_complete([MoveTo, LineTo, Close])
    reg.ensure_complete([MoveTo])


def test_all_sorted_by_kind_name():
    reg = ConverterRegistry()
    for kind in (MoveTo, Close, LineTo):
        reg.register(ConverterSpec(kind=kind, fn=_noop))
    assert [s.kind for s in reg.all()] == [Close, LineTo, MoveTo]


def test_global_registry_is_complete():
    import vectormorph.engine.segmenter  # noqa: F401

    reg = get_registry()
    assert reg.count == len(ALL_COMMAND_TYPES)
    reg.ensure_complete(ALL_COMMAND_TYPES)
    assert all(spec.description for spec in reg.all())
