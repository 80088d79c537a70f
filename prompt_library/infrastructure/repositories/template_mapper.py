"""Translation between stored template rows and the ``Template`` aggregate.

A row has flat columns plus a ``template_data`` payload::

    {
        "id": "...", "name": "...", "description": None, "user_id": "...",
        "is_public": False,
        "template_data": {"messages": [...], "arguments": [...]},
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    }
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from prompt_library.domain.entities import Template
from prompt_library.utils import ensure_utc, parse_timestamp


def template_to_row(template: Template) -> dict[str, Any]:
    """Return the row representation of ``template`` with UTC ISO timestamps."""

    return {
        "id": template.id.get_value(),
        "name": template.name,
        "description": template.description,
        "user_id": template.user_id.get_value(),
        "is_public": template.is_public,
        "template_data": {
            "messages": [message.to_dict() for message in template.messages],
            "arguments": [argument.to_dict() for argument in template.arguments],
        },
        "created_at": ensure_utc(template.created_at).isoformat(),
        "updated_at": ensure_utc(template.updated_at).isoformat(),
    }


def template_from_row(row: Mapping[str, Any]) -> Template:
    """Rebuild the aggregate stored in ``row``.

    Timestamps may be ISO strings or datetimes; a missing ``template_data``
    payload means no messages and no arguments.
    """

    template_data = row.get("template_data") or {}
    if isinstance(template_data, str):
        template_data = json.loads(template_data)

    return Template.from_persistence(
        id=row["id"],
        name=row["name"],
        description=row.get("description"),
        user_id=row["user_id"],
        is_public=bool(row.get("is_public", False)),
        messages=template_data.get("messages") or [],
        arguments=template_data.get("arguments") or [],
        created_at=parse_timestamp(row["created_at"]),
        updated_at=parse_timestamp(row["updated_at"]),
    )


__all__ = ["template_from_row", "template_to_row"]
