"""
Preset Manager

Holds the ordered list of output configuration presets plus a working
configuration used while editing. Presets are addressed by index; the list
order is the order shown in selection lists.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .config import OutputConfiguration, load_presets, save_presets
from .errors import PersistenceError, PresetIndexError, PresetLoadError

logger = logging.getLogger(__name__)


class PresetManager:
    """Ordered collection of output configuration presets.

    Not thread safe. Callers sharing a manager between threads must hold a
    single lock around add, delete, save and load.
    """

    def __init__(self):
        self._presets: List[OutputConfiguration] = []
        # Used when no preset is selected and while a preset is being edited
        self.working = OutputConfiguration()
        self.last_load_error: Optional[PresetLoadError] = None

    def add(self, config: OutputConfiguration) -> int:
        """Append a copy of a configuration.

        Returns:
            Index of the new preset
        """
        self._presets.append(config.clone())
        return len(self._presets) - 1

    def delete(self, index: int) -> None:
        """Remove the preset at index. Out of range indices are ignored."""
        if 0 <= index < len(self._presets):
            del self._presets[index]

    def count(self) -> int:
        """Get the number of stored presets."""
        return len(self._presets)

    def get_at(self, index: int) -> OutputConfiguration:
        """Get the preset at index.

        The stored instance is returned, not a copy.

        Raises:
            PresetIndexError: If index is outside 0..count()-1
        """
        if not 0 <= index < len(self._presets):
            raise PresetIndexError(index, len(self._presets))
        return self._presets[index]

    def names(self) -> List[str]:
        """Get preset display names in list order, for populating a selection list."""
        return [preset.display_name for preset in self._presets]

    def save(self, path: Union[str, Path]) -> None:
        """Write all presets to a file, replacing its content.

        The working configuration is not saved.

        Raises:
            PersistenceError: If the file cannot be written
        """
        save_presets(self._presets, path)

    def load(self, path: Union[str, Path]) -> bool:
        """Replace all presets with those read from a file.

        Failure is not raised: the current presets are kept, the failure is
        stored in last_load_error and False is returned. A missing file and
        a corrupt file are reported the same way.

        Returns:
            True if the presets were replaced
        """
        try:
            presets = load_presets(path)
        except PersistenceError as e:
            self.last_load_error = PresetLoadError(str(e))
            self.last_load_error.__cause__ = e
            logger.warning("Presets not loaded from %s: %s", path, e)
            return False

        self._presets = presets
        self.last_load_error = None
        logger.info("Loaded %d presets from %s", len(presets), path)
        return True

    def __len__(self) -> int:
        return len(self._presets)

    def __iter__(self) -> Iterator[OutputConfiguration]:
        return iter(list(self._presets))
