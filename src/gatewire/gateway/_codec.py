from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Final

from msgspec import Struct, ValidationError, json

from ._opcode import OpCode
from .request_guild_members import (
    Multiple,
    One,
    RequestGuildMemberId,
    RequestGuildMembers,
    RequestGuildMembersInfo,
    user_ids_from,
)

__all__: Sequence[str] = ("decode", "encode")

_LOGGER: logging.Logger = logging.getLogger("gatewire.gateway.codec")


class _Envelope(Struct, frozen=True):
    # `op` is required here, a lone tagged struct would accept it missing
    op: OpCode
    d: RequestGuildMembersInfo


def _enc_hook(obj: Any) -> Any:
    if isinstance(obj, One):
        return obj.id
    if isinstance(obj, Multiple):
        return list(obj.ids)
    raise NotImplementedError(f"objects of type {type(obj).__name__} are not supported")


def _dec_hook(type_: type[Any], obj: Any) -> Any:
    # a list is always `Multiple`, even with one element
    if type_ is RequestGuildMemberId:
        return user_ids_from(obj)
    raise NotImplementedError(f"objects of type {type_.__name__} are not supported")


_ENCODER: Final[json.Encoder] = json.Encoder(enc_hook=_enc_hook)
_DECODER: Final[json.Decoder[_Envelope]] = json.Decoder(_Envelope, dec_hook=_dec_hook, strict=False)


def encode(payload: RequestGuildMembers) -> bytes:
    _LOGGER.debug("encode payload [op:%s;guild_id:%s]", payload.op, payload.d.guild_id)
    return _ENCODER.encode(payload)


def decode(data: bytes | str) -> RequestGuildMembers:
    envelope = _DECODER.decode(data)
    if envelope.op != OpCode.REQUEST_GUILD_MEMBERS:
        raise ValidationError(
            f"Expected op {OpCode.REQUEST_GUILD_MEMBERS.value}, got {envelope.op.value} - at `$.op`"
        )
    _LOGGER.debug("decoded payload [op:%s;guild_id:%s]", envelope.op, envelope.d.guild_id)
    return RequestGuildMembers(envelope.d)
