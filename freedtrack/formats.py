"""Texture formats and the buffer element type each one stores."""

from __future__ import annotations

from enum import Enum, auto


class Format(Enum):
    """Texture pixel formats."""

    UNDEFINED = auto()
    R8_UNORM = auto()
    R8G8_UNORM = auto()
    R8G8B8_UNORM = auto()
    B8G8R8_UNORM = auto()
    R8G8B8A8_UNORM = auto()
    B8G8R8A8_UNORM = auto()
    G8B8G8R8_422_UNORM = auto()
    B8G8R8G8_422_UNORM = auto()
    R8_UINT = auto()
    R8G8_UINT = auto()
    B8G8R8_UINT = auto()
    R8G8B8A8_UINT = auto()
    R8_SRGB = auto()
    R8G8_SRGB = auto()
    R8G8B8_SRGB = auto()
    B8G8R8_SRGB = auto()
    R8G8B8A8_SRGB = auto()
    B8G8R8A8_SRGB = auto()
    R16_UNORM = auto()
    R16G16_UNORM = auto()
    R16G16B16_UNORM = auto()
    R16G16B16A16_UNORM = auto()
    D16_UNORM = auto()
    R16_UINT = auto()
    R16G16B16_UINT = auto()
    R16G16_UINT = auto()
    R16G16B16A16_UINT = auto()
    R16_USCALED = auto()
    R16G16_USCALED = auto()
    R16G16B16_USCALED = auto()
    R16G16B16A16_USCALED = auto()
    R16_SINT = auto()
    R16G16_SINT = auto()
    R16G16B16_SINT = auto()
    R16G16B16A16_SINT = auto()
    R16_SNORM = auto()
    R16G16_SNORM = auto()
    R16G16B16_SNORM = auto()
    R16G16B16A16_SNORM = auto()
    R16_SSCALED = auto()
    R16G16_SSCALED = auto()
    R16G16B16_SSCALED = auto()
    R16G16B16A16_SSCALED = auto()
    R16_SFLOAT = auto()
    R16G16_SFLOAT = auto()
    R16G16B16_SFLOAT = auto()
    R16G16B16A16_SFLOAT = auto()
    R32_UINT = auto()
    R32G32_UINT = auto()
    R32G32B32_UINT = auto()
    R32G32B32A32_UINT = auto()
    R32_SINT = auto()
    R32G32_SINT = auto()
    R32G32B32_SINT = auto()
    R32G32B32A32_SINT = auto()
    R32_SFLOAT = auto()
    R32G32_SFLOAT = auto()
    R32G32B32_SFLOAT = auto()
    R32G32B32A32_SFLOAT = auto()
    D32_SFLOAT = auto()
    A2R10G10B10_UNORM_PACK32 = auto()
    D24_UNORM_S8_UINT = auto()


class BufferElementType(Enum):
    """Type of one element in a buffer holding texture data."""

    UNDEFINED = auto()
    UINT8 = auto()
    UINT16 = auto()
    INT16 = auto()
    FLOAT16 = auto()
    UINT32 = auto()
    INT32 = auto()
    FLOAT = auto()


def _group(element: BufferElementType, *names: str) -> dict[Format, BufferElementType]:
    return {Format[name]: element for name in names}


_ELEMENT_TYPES: dict[Format, BufferElementType] = {
    **_group(
        BufferElementType.UINT8,
        "R8_UNORM", "R8G8_UNORM", "R8G8B8_UNORM", "B8G8R8_UNORM",
        "R8G8B8A8_UNORM", "B8G8R8A8_UNORM", "G8B8G8R8_422_UNORM",
        "B8G8R8G8_422_UNORM", "R8_UINT", "R8G8_UINT", "B8G8R8_UINT",
        "R8G8B8A8_UINT", "R8_SRGB", "R8G8_SRGB", "R8G8B8_SRGB",
        "B8G8R8_SRGB", "R8G8B8A8_SRGB", "B8G8R8A8_SRGB",
    ),
    **_group(
        BufferElementType.UINT16,
        "R16_UNORM", "R16G16_UNORM", "R16G16B16_UNORM", "R16G16B16A16_UNORM",
        "D16_UNORM", "R16_UINT", "R16G16B16_UINT", "R16G16_UINT",
        "R16G16B16A16_UINT", "R16_USCALED", "R16G16_USCALED",
        "R16G16B16_USCALED", "R16G16B16A16_USCALED",
    ),
    **_group(
        BufferElementType.INT16,
        "R16_SINT", "R16G16_SINT", "R16G16B16_SINT", "R16G16B16A16_SINT",
        "R16_SNORM", "R16G16_SNORM", "R16G16B16_SNORM", "R16G16B16A16_SNORM",
        "R16_SSCALED", "R16G16_SSCALED", "R16G16B16_SSCALED",
        "R16G16B16A16_SSCALED",
    ),
    **_group(
        BufferElementType.FLOAT16,
        "R16_SFLOAT", "R16G16_SFLOAT", "R16G16B16_SFLOAT", "R16G16B16A16_SFLOAT",
    ),
    **_group(
        BufferElementType.UINT32,
        "R32_UINT", "R32G32_UINT", "R32G32B32_UINT", "R32G32B32A32_UINT",
    ),
    **_group(
        BufferElementType.INT32,
        "R32_SINT", "R32G32_SINT", "R32G32B32_SINT", "R32G32B32A32_SINT",
    ),
    **_group(
        BufferElementType.FLOAT,
        "R32_SFLOAT", "R32G32_SFLOAT", "R32G32B32_SFLOAT", "R32G32B32A32_SFLOAT",
        "D32_SFLOAT",
    ),
}


def element_type_for_format(fmt: Format | str) -> BufferElementType:
    """Element type for ``fmt`` (a Format or its name); UNDEFINED if unknown."""
    if isinstance(fmt, str):
        try:
            fmt = Format[fmt]
        except KeyError:
            return BufferElementType.UNDEFINED
    return _ELEMENT_TYPES.get(fmt, BufferElementType.UNDEFINED)