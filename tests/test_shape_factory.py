"""
Tests for the shape abstract factory.

Covers:
- Case-insensitive lookup of recognized shape types
- Absent results for unknown shape types
- Family separation between plain and rounded factories
- FactoryProducer selection
"""

import logging

import pytest

from domain.enums import ShapeKind
from domain.models import Shape, Square, Rectangle, RoundedSquare, RoundedRectangle
from services.shape_factory import (
    AbstractShapeFactory,
    FactoryProducer,
    RoundedShapeFactory,
    ShapeFactory,
)
from test_constants import (
    PLAIN_DRAWINGS,
    RECOGNIZED_SHAPE_TYPES,
    ROUNDED_DRAWINGS,
    UNRECOGNIZED_SHAPE_TYPES,
)


# =============================================================================
# RECOGNIZED SHAPE TYPES
# =============================================================================


@pytest.mark.parametrize("shape_type", RECOGNIZED_SHAPE_TYPES)
def test_plain_factory_draws_expected_shape(shape_type, capsys):
    """
    Verifies:
    - Any casing of a recognized type yields a shape
    - The drawn line names the plain variant
    """
    shape = ShapeFactory().get_shape(shape_type)

    assert isinstance(shape, Shape)
    shape.draw()
    assert capsys.readouterr().out == PLAIN_DRAWINGS[shape_type.upper()] + "\n"


@pytest.mark.parametrize("shape_type", RECOGNIZED_SHAPE_TYPES)
def test_rounded_factory_draws_expected_shape(shape_type, capsys):
    shape = RoundedShapeFactory().get_shape(shape_type)

    assert isinstance(shape, Shape)
    shape.draw()
    assert capsys.readouterr().out == ROUNDED_DRAWINGS[shape_type.upper()] + "\n"


def test_get_shape_returns_new_instance_each_call():
    factory = ShapeFactory()

    assert factory.get_shape("SQUARE") is not factory.get_shape("SQUARE")


# =============================================================================
# UNRECOGNIZED SHAPE TYPES
# =============================================================================


@pytest.mark.parametrize("shape_type", UNRECOGNIZED_SHAPE_TYPES)
@pytest.mark.parametrize("factory_cls", [ShapeFactory, RoundedShapeFactory])
def test_unknown_shape_type_returns_none(factory_cls, shape_type):
    assert factory_cls().get_shape(shape_type) is None


def test_unknown_shape_type_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="gof.shapes")

    assert ShapeFactory().get_shape("TRIANGLE") is None
    assert "TRIANGLE" in caplog.text


def test_caller_skips_draw_for_absent_shape(capsys):
    """
    Verifies:
    - Optional-chained drawing of an absent shape is a no-op
    """
    factory = FactoryProducer.get_factory(rounded=False)
    for shape_type in ["SQUARE", "TRIANGLE", "RECTANGLE"]:
        shape = factory.get_shape(shape_type)
        if shape is not None:
            shape.draw()

    assert capsys.readouterr().out.splitlines() == [
        "Drawing Square...",
        "Drawing Rectangle...",
    ]


# =============================================================================
# FACTORY PRODUCER
# =============================================================================


def test_factory_producer_selects_family():
    plain = FactoryProducer.get_factory(rounded=False)
    rounded = FactoryProducer.get_factory(rounded=True)

    assert isinstance(plain, ShapeFactory)
    assert isinstance(rounded, RoundedShapeFactory)
    assert isinstance(plain, AbstractShapeFactory)
    assert isinstance(rounded, AbstractShapeFactory)


def test_families_never_cross_produce():
    plain = FactoryProducer.get_factory(rounded=False)
    rounded = FactoryProducer.get_factory(rounded=True)

    assert type(plain.get_shape("SQUARE")) is Square
    assert type(plain.get_shape("RECTANGLE")) is Rectangle
    assert type(rounded.get_shape("SQUARE")) is RoundedSquare
    assert type(rounded.get_shape("RECTANGLE")) is RoundedRectangle


def test_factory_producer_returns_new_factory_per_call():
    assert FactoryProducer.get_factory(rounded=True) is not FactoryProducer.get_factory(rounded=True)


def test_shape_kind_parse():
    assert ShapeKind.parse("square") is ShapeKind.SQUARE
    assert ShapeKind.parse("Rectangle") is ShapeKind.RECTANGLE
    assert ShapeKind.parse("hexagon") is None
