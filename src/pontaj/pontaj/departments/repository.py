from __future__ import annotations

from typing import Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError
