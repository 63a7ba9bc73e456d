from __future__ import annotations

from collections.abc import Sequence

from ._codec import decode, encode
from ._opcode import OpCode
from .request_guild_members import (
    DEFAULT_LIMIT,
    MAX_USER_IDS,
    BuilderConsumedError,
    Multiple,
    One,
    RequestGuildMemberId,
    RequestGuildMembers,
    RequestGuildMembersBuilder,
    RequestGuildMembersInfo,
    TooManyUserIdsError,
    UserIdsError,
    user_ids_from,
)

__all__: Sequence[str] = (
    "DEFAULT_LIMIT",
    "MAX_USER_IDS",
    "BuilderConsumedError",
    "Multiple",
    "One",
    "OpCode",
    "RequestGuildMemberId",
    "RequestGuildMembers",
    "RequestGuildMembersBuilder",
    "RequestGuildMembersInfo",
    "TooManyUserIdsError",
    "UserIdsError",
    "decode",
    "encode",
    "user_ids_from",
)
