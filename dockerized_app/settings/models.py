from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

__all__: list[str] = ["Settings"]


class Settings(BaseModel):
    """Runtime settings record fetched from the configuration resource.

    Field names follow Python conventions; the wire format uses camelCase
    aliases (``baseUrl``). Unknown keys are kept so that
    :meth:`to_payload` reproduces the fetched body.
    """

    model_config = ConfigDict(extra="allow")

    base_url: str = Field(default="", alias="baseUrl")

    def to_payload(self) -> Dict[str, Any]:
        """Return the record keyed by wire names."""
        return self.model_dump(by_alias=True)
