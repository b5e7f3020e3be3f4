# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the clippyqa package."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing_extensions import TypeAliasType

JsonScalar = TypeAliasType("JsonScalar", str | int | float | bool | None)
JsonValue = TypeAliasType("JsonValue", JsonScalar | list["JsonValue"] | dict[str, "JsonValue"])


class Issue(BaseModel):
    """Flattened Clippy finding ready for downstream reporting.

    Every field is optional: a diagnostic only needs a rule code and a primary
    span to be reported, the remaining attributes degrade to ``None`` when the
    tool omitted them or emitted a value of the wrong JSON type.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    file_path: str | None = None
    rule_key: str | None = None
    message: str | None = None
    line_start: int | None = None
    line_end: int | None = None
    col_start: int | None = None
    col_end: int | None = None
    severity: str | None = None

    def has_location(self) -> bool:
        """Return whether any positional attribute is populated.

        Returns:
            bool: ``True`` when at least one line or column value is known.
        """

        return any(value is not None for value in (self.line_start, self.line_end, self.col_start, self.col_end))


__all__ = ["Issue", "JsonScalar", "JsonValue"]
