from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ShiftPreset


class ShiftPresetRepository(Protocol):
    def list_active(self) -> Sequence[ShiftPreset]:
        raise NotImplementedError

    def get_by_id(self, preset_id: str) -> Optional[ShiftPreset]:
        raise NotImplementedError
