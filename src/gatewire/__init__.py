from __future__ import annotations

from collections.abc import Sequence

from .snowflake import GuildId, UserId

__all__: Sequence[str] = ("GuildId", "UserId")
