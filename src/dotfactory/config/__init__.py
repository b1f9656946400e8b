"""Output configuration schema and preset file loading."""

from .schema import (
    OutputConfiguration,
    PaddingRemoval,
    LineWrap,
    CommentStyle,
    IndentStyle,
    BitLayout,
    ByteOrder,
    ByteFormat,
    Rotation,
    DescriptorFormat,
    BYTE_LEADING_STRING_BINARY,
    BYTE_LEADING_STRING_HEX,
    BYTE_LEADING_STRINGS,
)
from .loader import (
    load_presets,
    save_presets,
    parse_presets,
    dump_presets,
    presets_to_xml,
    presets_from_xml,
    preset_format,
)

__all__ = [
    'OutputConfiguration',
    'PaddingRemoval',
    'LineWrap',
    'CommentStyle',
    'IndentStyle',
    'BitLayout',
    'ByteOrder',
    'ByteFormat',
    'Rotation',
    'DescriptorFormat',
    'BYTE_LEADING_STRING_BINARY',
    'BYTE_LEADING_STRING_HEX',
    'BYTE_LEADING_STRINGS',
    'load_presets',
    'save_presets',
    'parse_presets',
    'dump_presets',
    'presets_to_xml',
    'presets_from_xml',
    'preset_format',
]
