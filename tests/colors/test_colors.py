import numpy as np
import pytest

from chromablend import (
    ByteRGB,
    ByteRGBA,
    ChannelDomain,
    UnitRGB,
    UnitRGBA,
    rgb,
    rgba,
)


def test_default_is_domain_zero():
    assert UnitRGB().value == (0.0, 0.0, 0.0)
    assert UnitRGBA().value == (0.0, 0.0, 0.0, 0.0)
    assert ByteRGB().value == (0, 0, 0)
    assert ByteRGBA().value == (0, 0, 0, 0)


def test_channel_types_follow_domain():
    unit = UnitRGBA((1, 0.5, 0.25, 1.0))
    assert all(isinstance(v, np.float32) for v in unit.value)

    byte = ByteRGB((np.uint8(3), 4, 5))
    assert all(type(v) is int for v in byte.value)


def test_unit_channels_are_not_clamped():
    color = UnitRGB((1.5, -0.2, 0.0))
    assert color.r == np.float32(1.5)
    assert color.g == np.float32(-0.2)


def test_byte_channel_out_of_range():
    with pytest.raises(ValueError):
        ByteRGB((256, 0, 0))
    with pytest.raises(ValueError):
        ByteRGBA((0, 0, 0, -1))


def test_rejects_wrong_channel_types():
    with pytest.raises(TypeError):
        ByteRGB((0.5, 0, 0))
    with pytest.raises(TypeError):
        UnitRGB((True, 0.0, 0.0))
    with pytest.raises(TypeError):
        UnitRGB(("1", 0.0, 0.0))


def test_rejects_wrong_channel_count():
    with pytest.raises(ValueError):
        ByteRGB((1, 2, 3, 4))
    with pytest.raises(ValueError):
        UnitRGBA((0.1, 0.2, 0.3))


def test_colors_are_immutable():
    color = ByteRGB((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        color.extra = 1
    assert color.value == (1, 2, 3)


def test_accessors():
    color = ByteRGBA((10, 20, 30, 40))
    assert (color.r, color.g, color.b, color.alpha) == (10, 20, 30, 40)
    assert color.a == 40
    assert color.has_alpha
    assert color.is_byte and not color.is_unit
    assert not ByteRGB((1, 2, 3)).has_alpha
    assert tuple(color) == (10, 20, 30, 40)
    assert len(color) == 4
    assert color[-1] == 40


def test_structural_equality_and_hash():
    a = ByteRGB((1, 2, 3))
    b = ByteRGB((1, 2, 3))
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, ByteRGB((3, 2, 1))}) == 2

    assert UnitRGBA((0.25, 0.5, 0.75, 1.0)) == UnitRGBA((0.25, 0.5, 0.75, 1.0))


def test_different_classes_never_equal():
    assert ByteRGB((0, 0, 0)) != UnitRGB((0.0, 0.0, 0.0))
    assert ByteRGB((1, 2, 3)) != ByteRGBA((1, 2, 3, 0))
    assert ByteRGB((1, 2, 3)) != (1, 2, 3)


def test_lexicographic_ordering():
    colors = [ByteRGB((1, 3, 0)), ByteRGB((0, 255, 255)), ByteRGB((1, 2, 200))]
    assert sorted(colors) == [ByteRGB((0, 255, 255)), ByteRGB((1, 2, 200)), ByteRGB((1, 3, 0))]
    assert ByteRGBA((1, 2, 3, 4)) < ByteRGBA((1, 2, 3, 5))
    assert UnitRGB((0.5, 0.0, 0.0)) >= UnitRGB((0.5, 0.0, 0.0))

    with pytest.raises(TypeError):
        ByteRGB((1, 2, 3)) < UnitRGB((0.1, 0.2, 0.3))


def test_rgb_drops_alpha():
    color = UnitRGBA((0.1, 0.2, 0.3, 0.4))
    assert color.rgb() == UnitRGB((0.1, 0.2, 0.3))
    assert ByteRGB(ByteRGBA((7, 8, 9, 10))) == ByteRGB((7, 8, 9))


def test_alpha_is_never_invented():
    with pytest.raises(ValueError):
        ByteRGBA(ByteRGB((1, 2, 3)))


def test_from_rgb_and_with_alpha():
    base = ByteRGB((255, 128, 0))
    color = ByteRGBA.from_rgb(base, 64)
    assert color == ByteRGBA((255, 128, 0, 64))
    assert color.with_alpha(255) == ByteRGBA((255, 128, 0, 255))
    # source color untouched
    assert color.alpha == 64

    unit = UnitRGBA.from_rgb(UnitRGB((0.5, 0.25, 1.0)), 0.5)
    assert unit == UnitRGBA((0.5, 0.25, 1.0, 0.5))

    with pytest.raises(ValueError):
        ByteRGBA.from_rgb(color, 1)


def test_from_rgb_converts_other_domain():
    color = UnitRGBA.from_rgb(ByteRGB((255, 0, 255)), 1.0)
    assert color == UnitRGBA((1.0, 0.0, 1.0, 1.0))


def test_construct_from_other_domain():
    assert UnitRGB(ByteRGB((255, 0, 255))) == UnitRGB((1.0, 0.0, 1.0))
    assert ByteRGB(UnitRGBA((1.0, 0.0, 0.5, 0.0))) == ByteRGB((255, 0, 127))


def test_factory_infers_domain():
    assert isinstance(rgb(255, 255, 0), ByteRGB)
    assert isinstance(rgb(1.0, 1.0, 0.0), UnitRGB)
    assert isinstance(rgb(1, 1, 0.0), UnitRGB)
    assert isinstance(rgba(255, 255, 0, 255), ByteRGBA)
    assert isinstance(rgba(1.0, 1.0, 0.0, 1.0), UnitRGBA)


def test_factory_packed_forms():
    assert rgb(0xFFFF00) == ByteRGB((255, 255, 0))
    assert rgba(0xFFFF00FF) == ByteRGBA((255, 255, 0, 255))
    assert rgba(0xFFFF00FF) == rgba(255, 255, 0, 255)


def test_factory_explicit_domain():
    assert rgba(255, 255, 0, 255, domain=ChannelDomain.UNIT_FLOAT) == UnitRGBA((1.0, 1.0, 0.0, 1.0))
    assert rgb(0x80FF00, domain="float") == ByteRGB((128, 255, 0)).to_unit()
    assert rgb(1.0, 0.5, 0.0, domain="int") == ByteRGB((255, 127, 0))


def test_explicit_domain_converts_components_and_packed_alike():
    assert rgb(128, 255, 0, domain="float") == rgb(0x80FF00, domain="float")
    assert rgba(0, 255, 0, 128, domain=ChannelDomain.UNIT_FLOAT) == rgba(0x00FF0080, domain="float")
    assert isinstance(rgb(128, 255, 0, domain="float"), UnitRGB)


def test_factory_accepts_colors():
    assert rgb(rgba(1, 2, 3, 4)) == ByteRGB((1, 2, 3))
    assert rgba(rgba(1, 2, 3, 4)) == ByteRGBA((1, 2, 3, 4))
    assert rgb(ByteRGB((255, 0, 255)), domain="float") == UnitRGB((1.0, 0.0, 1.0))
    assert rgba(UnitRGBA((1.0, 0.0, 0.5, 1.0)), domain="int") == ByteRGBA((255, 0, 127, 255))
    with pytest.raises(ValueError, match="from_rgb"):
        rgba(rgb(1, 2, 3))


def test_factory_wrong_arity():
    with pytest.raises(TypeError):
        rgb(1, 2)
    with pytest.raises(TypeError):
        rgba(1, 2, 3)


def test_repr():
    assert repr(ByteRGBA((254, 254, 0, 255))) == "ByteRGBA(254, 254, 0, 255)"
    assert repr(UnitRGB((1.0, 0.5, 0.0))) == "UnitRGB(1, 0.5, 0)"
