"""
schemas/base.py
---------------

Common base for every record mirrored from the Sentry JSON schema.

Sentry omits keys freely, so every field on every model is optional
and defaults to ``None``.  Whether a key was actually present in the
payload is tracked by pydantic's ``model_fields_set``; a present empty
string, zero or ``false`` is therefore never confused with an absent
value.  Keys the models do not know about are kept as extras so that a
fetched record can be sent back without losing data.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class SentryModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def is_present(self, name: str) -> bool:
        """Return ``True`` if ``name`` was supplied, even as an empty value."""
        return name in self.model_fields_set

    def to_payload(self) -> Dict[str, Any]:
        """Dump the record as the JSON object Sentry expects.

        Fields are keyed by their wire names and absent fields are left
        out entirely.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
