"""Exceptions raised by the preset manager and its persistence layer."""


class PresetError(Exception):
    """Base class for all preset errors."""


class PresetIndexError(PresetError, IndexError):
    """Raised when a preset index is outside the stored range."""

    def __init__(self, index: int, count: int):
        super().__init__(f"Preset index {index} out of range (0..{count - 1})" if count
                         else f"Preset index {index} out of range (no presets stored)")
        self.index = index
        self.count = count


class PersistenceError(PresetError):
    """Raised when a preset file cannot be written or read."""


class PresetDecodeError(PersistenceError, ValueError):
    """Raised when a preset file is readable but its content is not a valid preset list."""


class PresetLoadError(PersistenceError):
    """Failure recorded by PresetManager.load. Never raised out of load itself."""
