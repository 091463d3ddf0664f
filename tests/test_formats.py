import pytest

from freedtrack.formats import BufferElementType, Format, element_type_for_format


@pytest.mark.parametrize(
    "fmt, expected",
    [
        (Format.R8G8B8A8_UNORM, BufferElementType.UINT8),
        (Format.B8G8R8A8_SRGB, BufferElementType.UINT8),
        (Format.G8B8G8R8_422_UNORM, BufferElementType.UINT8),
        (Format.D16_UNORM, BufferElementType.UINT16),
        (Format.R16G16B16A16_USCALED, BufferElementType.UINT16),
        (Format.R16_SNORM, BufferElementType.INT16),
        (Format.R16G16B16A16_SSCALED, BufferElementType.INT16),
        (Format.R16G16B16A16_SFLOAT, BufferElementType.FLOAT16),
        (Format.R32G32_UINT, BufferElementType.UINT32),
        (Format.R32G32B32A32_SINT, BufferElementType.INT32),
        (Format.D32_SFLOAT, BufferElementType.FLOAT),
        (Format.R32_SFLOAT, BufferElementType.FLOAT),
    ],
)
def test_known_formats(fmt, expected):
    assert element_type_for_format(fmt) is expected


@pytest.mark.parametrize(
    "fmt",
    [Format.UNDEFINED, Format.A2R10G10B10_UNORM_PACK32, Format.D24_UNORM_S8_UINT],
)
def test_unlisted_formats_are_undefined(fmt):
    assert element_type_for_format(fmt) is BufferElementType.UNDEFINED


def test_name_lookup_matches_enum_lookup():
    for fmt in Format:
        assert element_type_for_format(fmt.name) is element_type_for_format(fmt)


def test_unknown_name_is_undefined():
    assert element_type_for_format("NOT_A_FORMAT") is BufferElementType.UNDEFINED


def test_every_format_except_specials_is_defined():
    undefined = {f for f in Format if element_type_for_format(f) is BufferElementType.UNDEFINED}
    assert undefined == {
        Format.UNDEFINED,
        Format.A2R10G10B10_UNORM_PACK32,
        Format.D24_UNORM_S8_UINT,
    }


def test_every_element_type_used():
    used = {element_type_for_format(f) for f in Format}
    assert used == set(BufferElementType)