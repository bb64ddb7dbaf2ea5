"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from property_gen.models import PropertyRecord


def to_camel(name: str) -> str:
    """Convert ``snake_case`` to ``camelCase``."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to a camelCase dict with proper serialization.

    Uses ``fields()`` + ``getattr`` rather than ``asdict()`` so nested
    dataclasses go through ``serialize_value`` too.
    """
    return {to_camel(f.name): serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def record_to_dict(record: PropertyRecord) -> dict[str, Any]:
    """Serialize a listing to its wire shape.

    The agent is flattened into ``agentName``, ``agentPhone``,
    ``agentEmail`` and ``brokerName``.
    """
    data = {}
    for f in fields(record):
        if f.name == "agent":
            continue
        data[to_camel(f.name)] = serialize_value(getattr(record, f.name))

    agent = record.agent
    data["agentName"] = agent.name
    data["agentPhone"] = agent.phone
    data["agentEmail"] = agent.email
    data["brokerName"] = agent.broker
    return data


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
