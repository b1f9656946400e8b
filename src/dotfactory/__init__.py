"""
dotfactory

Output configuration presets for font and bitmap to source code conversion:
the settings schema, an ordered preset manager and preset file storage.
"""

__version__ = "0.1.0"

from .config import (
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
    load_presets,
    save_presets,
)

from .manager import PresetManager

from .errors import (
    PresetError,
    PresetIndexError,
    PersistenceError,
    PresetDecodeError,
    PresetLoadError,
)

__all__ = [
    # Config
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
    'load_presets',
    'save_presets',
    # Manager
    'PresetManager',
    # Errors
    'PresetError',
    'PresetIndexError',
    'PersistenceError',
    'PresetDecodeError',
    'PresetLoadError',
]
