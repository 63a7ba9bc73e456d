from __future__ import annotations

from collections.abc import Sequence
from typing import NewType

__all__: Sequence[str] = ("GuildId", "UserId")

GuildId = NewType("GuildId", int)
UserId = NewType("UserId", int)
