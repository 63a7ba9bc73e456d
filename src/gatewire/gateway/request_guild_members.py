from __future__ import annotations

import logging
import typing
from collections.abc import Iterable, Iterator, Sequence
from typing import Annotated, Any, Final, Self

from msgspec import Meta, Struct, convert

from gatewire.snowflake import GuildId, UserId

from ._opcode import OpCode

__all__: Sequence[str] = (
    "DEFAULT_LIMIT",
    "MAX_USER_IDS",
    "BuilderConsumedError",
    "Multiple",
    "One",
    "RequestGuildMemberId",
    "RequestGuildMembers",
    "RequestGuildMembersBuilder",
    "RequestGuildMembersInfo",
    "TooManyUserIdsError",
    "UserIdsError",
    "user_ids_from",
)

MAX_USER_IDS: Final[int] = 100
DEFAULT_LIMIT: Final[int] = 0


class UserIdsError(ValueError):
    """Provided user IDs are invalid for the request."""


class TooManyUserIdsError(UserIdsError):
    """More than `MAX_USER_IDS` user IDs were provided.

    The rejected IDs are kept on `ids`, complete and in the order given.
    """

    def __init__(self, ids: list[UserId]) -> None:
        super().__init__(f"{len(ids)} user IDs were provided when only a maximum of {MAX_USER_IDS} is allowed")
        self.ids: list[UserId] = ids


class BuilderConsumedError(RuntimeError):
    """The builder already produced a request and can't be used again."""


class RequestGuildMemberId:
    """One or a list of user IDs in a request.

    Either `One` (a bare ID on the wire) or `Multiple` (a list on the wire).
    """

    __slots__ = ()


@typing.final
class One(RequestGuildMemberId):
    __slots__ = ("_id",)
    __match_args__ = ("id",)

    def __init__(self, id: UserId) -> None:
        self._id: UserId = id

    @property
    def id(self) -> UserId:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, One):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((One, self._id))

    def __repr__(self) -> str:
        return f"One({self._id!r})"


@typing.final
class Multiple(RequestGuildMemberId):
    __slots__ = ("_ids",)
    __match_args__ = ("ids",)

    def __init__(self, ids: Iterable[UserId]) -> None:
        self._ids: tuple[UserId, ...] = tuple(ids)

    @property
    def ids(self) -> tuple[UserId, ...]:
        return self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[UserId]:
        return iter(self._ids)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multiple):
            return NotImplemented
        return self._ids == other._ids

    def __hash__(self) -> int:
        return hash((Multiple, self._ids))

    def __repr__(self) -> str:
        return f"Multiple({list(self._ids)!r})"


def user_ids_from(value: Any) -> RequestGuildMemberId:
    """Wrap a bare ID as `One` and a list or tuple of IDs as `Multiple`.

    String snowflakes are converted to integers, anything else that isn't an
    ID raises `msgspec.ValidationError`.
    """
    if isinstance(value, RequestGuildMemberId):
        return value
    if isinstance(value, (list, tuple)):
        return Multiple(convert(value, type=list[UserId], strict=False))
    return One(convert(value, type=UserId, strict=False))


class RequestGuildMembersInfo(Struct, frozen=True, omit_defaults=True):
    guild_id: GuildId
    limit: Annotated[int, Meta(ge=0)] | None = None
    nonce: str | None = None
    presences: bool | None = None
    query: str | None = None
    user_ids: RequestGuildMemberId | None = None


class RequestGuildMembers(Struct, frozen=True, tag_field="op", tag=OpCode.REQUEST_GUILD_MEMBERS.value):
    d: RequestGuildMembersInfo

    @property
    def op(self) -> OpCode:
        return OpCode.REQUEST_GUILD_MEMBERS

    @staticmethod
    def builder(guild_id: GuildId) -> RequestGuildMembersBuilder:
        """Alias of `RequestGuildMembersBuilder(guild_id)`."""
        return RequestGuildMembersBuilder(guild_id)


class RequestGuildMembersBuilder:
    """Configure and construct a `RequestGuildMembers` for one guild.

    `nonce` and `presences` may be set any number of times, the last value
    wins. Exactly one of `query`, `user_id` or `user_ids` then finishes the
    request; after that the builder is consumed and any further call raises
    `BuilderConsumedError`.

    Request all members whose username starts with "a", with presences:

        request = RequestGuildMembers.builder(GuildId(1)).presences(True).query("a")
        assert request.d.limit == 0
    """

    _logger: logging.Logger = logging.getLogger("gatewire.gateway.request_guild_members")

    def __init__(self, guild_id: GuildId) -> None:
        self._guild_id: GuildId = guild_id
        self._nonce: str | None = None
        self._presences: bool | None = None
        self._consumed: bool = False

    @property
    def guild_id(self) -> GuildId:
        return self._guild_id

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _ensure_usable(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(f"builder for guild {self._guild_id} was already consumed")

    def _consume(self) -> None:
        self._ensure_usable()
        self._consumed = True

    def _finish(
        self,
        mode: str,
        *,
        limit: int | None = None,
        query: str | None = None,
        user_ids: RequestGuildMemberId | None = None,
    ) -> RequestGuildMembers:
        request = RequestGuildMembers(
            RequestGuildMembersInfo(
                guild_id=self._guild_id,
                limit=limit,
                nonce=self._nonce,
                presences=self._presences,
                query=query,
                user_ids=user_ids,
            )
        )
        self._logger.debug("built request guild members [guild_id:%s;mode:%s]", self._guild_id, mode)
        return request

    def nonce(self, nonce: str) -> Self:
        """Set the nonce identifying the member chunk responses."""
        self._ensure_usable()
        self._nonce = nonce
        return self

    def presences(self, presences: bool) -> Self:
        """Request that members' presences are included in member chunks."""
        self._ensure_usable()
        self._presences = presences
        return self

    def query(self, query: str, limit: int | None = None) -> RequestGuildMembers:
        """Request members whose username starts with `query`.

        An empty query matches every member. Without a limit `DEFAULT_LIMIT`
        is sent, which the platform treats as unbounded. A negative limit
        raises `ValueError` and leaves the builder usable.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self._consume()
        return self._finish("query", limit=DEFAULT_LIMIT if limit is None else limit, query=query)

    def user_id(self, user_id: UserId) -> RequestGuildMembers:
        self._consume()
        return self._finish("user_id", user_ids=One(user_id))

    def user_ids(self, user_ids: Iterable[UserId]) -> RequestGuildMembers:
        """Request up to `MAX_USER_IDS` members by ID.

        Raises `TooManyUserIdsError` with every given ID when there are more.
        The builder is consumed either way.
        """
        self._consume()
        ids = list(user_ids)
        if len(ids) > MAX_USER_IDS:
            self._logger.debug("rejected user ids [count:%s;max:%s]", len(ids), MAX_USER_IDS)
            raise TooManyUserIdsError(ids)
        return self._finish("user_ids", user_ids=Multiple(ids))
