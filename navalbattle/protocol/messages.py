"""Session message envelope for a two-player naval battle.

Only the message types and their JSON-lines encoding live here; moving the
lines over a socket is left to whoever hosts the game. Grids travel as lists
of row strings in the render alphabet (``.`` empty, ``o`` blocked, ``X``
occupied).
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from navalbattle.domain.grid import Grid


class MessageFormatError(ValueError):
    pass


class InvalidReason(Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    OUT_OF_ORDER = "out_of_order"
    ALREADY_HIT = "already_hit"
    INCORRECT_FORMAT = "incorrect_format"


# Server -> client

@dataclass(frozen=True)
class InitializeMessage:
    own: Grid
    opponent: Optional[Grid] = None


@dataclass(frozen=True)
class DisconnectMessage:
    pass


@dataclass(frozen=True)
class SenderMissMessage:
    pass


@dataclass(frozen=True)
class SenderHitMessage:
    pass


@dataclass(frozen=True)
class ReceiverMissMessage:
    x: int
    y: int


@dataclass(frozen=True)
class ReceiverHitMessage:
    x: int
    y: int


@dataclass(frozen=True)
class InvalidMessage:
    reason: InvalidReason


@dataclass(frozen=True)
class GameWonMessage:
    pass


@dataclass(frozen=True)
class GameLostMessage:
    pass


# Client -> server

@dataclass(frozen=True)
class TurnMessage:
    x: int
    y: int


ServerMessage = Union[
    InitializeMessage,
    DisconnectMessage,
    SenderMissMessage,
    SenderHitMessage,
    ReceiverMissMessage,
    ReceiverHitMessage,
    InvalidMessage,
    GameWonMessage,
    GameLostMessage,
]
ClientMessage = TurnMessage

_SERVER_TYPES = {
    "initialize": InitializeMessage,
    "disconnect": DisconnectMessage,
    "sender_miss": SenderMissMessage,
    "sender_hit": SenderHitMessage,
    "receiver_miss": ReceiverMissMessage,
    "receiver_hit": ReceiverHitMessage,
    "invalid": InvalidMessage,
    "game_won": GameWonMessage,
    "game_lost": GameLostMessage,
}
_CLIENT_TYPES = {
    "turn": TurnMessage,
}
_TYPE_NAMES = {cls: name for name, cls in list(_SERVER_TYPES.items()) + list(_CLIENT_TYPES.items())}

_COORD_TYPES = (ReceiverMissMessage, ReceiverHitMessage, TurnMessage)


def encode_message(msg: Union[ServerMessage, ClientMessage]) -> str:
    name = _TYPE_NAMES.get(type(msg))
    if name is None:
        raise TypeError(f"not a protocol message: {msg!r}")

    payload: Dict[str, Any] = {"type": name}
    if isinstance(msg, InitializeMessage):
        payload["own"] = msg.own.to_lines()
        payload["opponent"] = msg.opponent.to_lines() if msg.opponent is not None else None
    elif isinstance(msg, _COORD_TYPES):
        payload["x"] = int(msg.x)
        payload["y"] = int(msg.y)
    elif isinstance(msg, InvalidMessage):
        payload["reason"] = msg.reason.value
    return json.dumps(payload, separators=(",", ":"))


def _load(line: str) -> Dict[str, Any]:
    try:
        data = json.loads(line)
    except json.JSONDecodeError as exc:
        raise MessageFormatError(f"malformed JSON: {exc.msg}") from exc
    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        raise MessageFormatError("message must be an object with a 'type' field")
    return data


def _coord(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise MessageFormatError(f"field '{key}' must be an integer")
    return value


def _grid(raw: Any, key: str) -> Grid:
    if not isinstance(raw, list) or not all(isinstance(row, str) for row in raw):
        raise MessageFormatError(f"field '{key}' must be a list of row strings")
    try:
        return Grid.from_lines(raw).freeze()
    except ValueError as exc:
        raise MessageFormatError(f"field '{key}': {exc}") from exc


def decode_server_message(line: str) -> ServerMessage:
    data = _load(line)
    cls = _SERVER_TYPES.get(data["type"])
    if cls is None:
        raise MessageFormatError(f"unknown server message type: {data['type']}")

    if cls is InitializeMessage:
        own = _grid(data.get("own"), "own")
        opponent_raw = data.get("opponent")
        opponent = _grid(opponent_raw, "opponent") if opponent_raw is not None else None
        return InitializeMessage(own, opponent)
    if cls in _COORD_TYPES:
        return cls(_coord(data, "x"), _coord(data, "y"))
    if cls is InvalidMessage:
        try:
            return InvalidMessage(InvalidReason(data.get("reason")))
        except ValueError as exc:
            raise MessageFormatError(f"unknown invalid reason: {data.get('reason')!r}") from exc
    return cls()


def decode_client_message(line: str) -> ClientMessage:
    data = _load(line)
    if data["type"] not in _CLIENT_TYPES:
        raise MessageFormatError(f"unknown client message type: {data['type']}")
    return TurnMessage(_coord(data, "x"), _coord(data, "y"))
