# Area: Game
"""
hotseat_show._game.payloads — Inbound payload models
=====================================================

Pydantic models for every message that carries data, plus the options a
game is started with. A payload that fails validation is rejected before
any handler runs.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import InvalidChoiceError, InvalidPayloadError
from .._question.choices import Choice, parse_choice
from .._question.lifelines import Confidence, Lifeline
from .events import SocketEvent


class EmptyPayload(BaseModel):
    """Phase messages carry nothing; anything sent along is ignored."""
    model_config = ConfigDict(extra="ignore")


class ChoicePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    choice: Choice

    @field_validator("choice", mode="before")
    @classmethod
    def _parse_choice(cls, value: Any) -> Choice:
        return parse_choice(value)


class LifelinePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    lifeline: Lifeline


class FriendPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str = Field(min_length=1)


class ConfidencePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    confidence: Confidence


PAYLOAD_MODELS: Dict[SocketEvent, Type[BaseModel]] = {
    SocketEvent.CONTESTANT_FASTEST_FINGER_CHOOSE: ChoicePayload,
    SocketEvent.CONTESTANT_CHOOSE: ChoicePayload,
    SocketEvent.HOT_SEAT_CHOOSE: ChoicePayload,
    SocketEvent.HOT_SEAT_USE_LIFELINE: LifelinePayload,
    SocketEvent.HOT_SEAT_PICK_PHONE_A_FRIEND: FriendPayload,
    SocketEvent.CONTESTANT_SET_CONFIDENCE: ConfidencePayload,
}


def validate_payload(socket_event: SocketEvent, data: Any,
                     username: Optional[str] = None) -> BaseModel:
    """
    Validate raw message data for ``socket_event``.

    Raises
    ------
    InvalidChoiceError
        If a choice field holds something other than 0..3 / 'A'..'D'.
    InvalidPayloadError
        For any other schema violation.
    """
    model = PAYLOAD_MODELS.get(socket_event, EmptyPayload)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidPayloadError(
            socket_event.value, username,
            [f"payload must be an object, got {type(data).__name__}"],
        )
    try:
        return model.model_validate(data)
    except ValidationError as e:
        messages = [
            f"{'.'.join(str(part) for part in err['loc']) or 'payload'}: {err['msg']}"
            for err in e.errors()
        ]
        if model is ChoicePayload:
            raise InvalidChoiceError(socket_event.value, username, "; ".join(messages)) from e
        raise InvalidPayloadError(socket_event.value, username, messages) from e


class GameOptions(BaseModel):
    """Options a game is started with."""
    model_config = ConfigDict(extra="forbid")

    show_host_username: Optional[str] = None

    @field_validator("show_host_username", mode="before")
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value
