from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The subset of ``random.Random`` the pairing code relies on."""

    def choice(self, seq: Sequence[T]) -> T: ...

    def shuffle(self, x: list[Any]) -> None: ...


_system_random = random.SystemRandom()


def get_random_source() -> RandomSource:
    """Return the process-wide OS-entropy source."""
    return _system_random
