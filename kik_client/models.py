"""
Records exchanged with the Kik bot API.

Attributes use snake_case; ``to_dict()`` and ``from_dict()`` translate to and
from the camelCase JSON keys the API speaks.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .exceptions import DecodeError


class KikRecord(BaseModel):
    """Base for API records: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: Any):
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Invalid {cls.__name__} payload: {e}") from e


class Message(KikRecord):
    """
    A single chat message.

    Only ``type`` is required. Fields specific to a message type (``url`` for
    links, ``picUrl`` for pictures and so on) are kept as extra fields and
    sent unchanged.
    """

    model_config = ConfigDict(extra='allow')

    type: str
    to: Optional[str] = None
    chat_id: Optional[str] = None
    id: Optional[str] = None
    body: Optional[str] = None
    delay: Optional[int] = None
    keyboards: Optional[List[Dict[str, Any]]] = None
    type_time: Optional[int] = None

    @property
    def extra(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class User(KikRecord):
    """Public profile of a Kik user."""

    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_pic_url: Optional[str] = None
    profile_pic_last_modified: Optional[int] = None
    timezone: Optional[str] = None


class Configuration(KikRecord):
    """Bot configuration: webhook URL, feature flags and static keyboard."""

    webhook: str
    features: Dict[str, bool] = Field(default_factory=dict)
    static_keyboard: Optional[Dict[str, Any]] = None

    @field_validator('features', mode='before')
    @classmethod
    def _null_features(cls, value):
        # the API sends null when no feature is set
        return {} if value is None else value


class ScanData(KikRecord):
    """Arbitrary JSON data embedded in a Kik code."""

    data: Optional[Dict[str, Any]] = None


class Code(KikRecord):
    """A Kik code created from scan data."""

    id: str
