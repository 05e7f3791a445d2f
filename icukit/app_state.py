"""Application mode used by the query and update guards."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from .errors import AppStateError

_log = logging.getLogger(__name__)


class AppMode(Enum):
    ENABLED = "Enabled"
    READONLY = "Readonly"
    DISABLED = "Disabled"

    def __str__(self) -> str:
        return self.value


class AppCommand(Enum):
    START = "Start"
    READONLY = "Readonly"
    STOP = "Stop"

    def __str__(self) -> str:
        return self.value


_COMMAND_MODES = {
    AppCommand.START: AppMode.ENABLED,
    AppCommand.READONLY: AppMode.READONLY,
    AppCommand.STOP: AppMode.DISABLED,
}


@dataclass(frozen=True)
class AppStateData:
    """Exportable snapshot of the application state."""

    mode: AppMode = AppMode.DISABLED


class AppState:
    """Holds the current application mode."""

    def __init__(self, data: AppStateData | None = None) -> None:
        self._data = data if data is not None else AppStateData()

    @property
    def mode(self) -> AppMode:
        return self._data.mode

    @mode.setter
    def mode(self, mode: AppMode) -> None:
        self._data = replace(self._data, mode=mode)

    def command(self, cmd: AppCommand) -> None:
        """Switch mode; raises if the app is already in the target mode."""
        old_mode = self._data.mode
        new_mode = _COMMAND_MODES[cmd]
        if old_mode == new_mode:
            raise AppStateError.already_in_mode(old_mode)
        self.mode = new_mode
        _log.info("app: mode changed %s -> %s", old_mode, new_mode)

    def import_data(self, data: AppStateData) -> None:
        self._data = data

    def export(self) -> AppStateData:
        return self._data