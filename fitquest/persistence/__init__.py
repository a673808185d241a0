"""Serialization boundary between stored raw strings and domain enums."""

from fitquest.persistence.plan_serializers import deserialize_plan, serialize_plan
from fitquest.persistence.player_record import PlayerRecord, profile_to_record, record_to_profile

__all__ = [
    "PlayerRecord",
    "deserialize_plan",
    "profile_to_record",
    "record_to_profile",
    "serialize_plan",
]
