"""Minifier rule configuration models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class PluginSetting(BaseModel):
    """One minifier rule, toggled on or off."""

    name: str
    active: bool = True


class MinifyConfig(BaseModel):
    """Ordered list of rules handed to a minifier.

    Entries may be given as bare rule names or as full settings, so
    ``["removeComments", {"name": "removeViewBox", "active": False}]`` is valid.
    """

    plugins: list[PluginSetting] = Field(default_factory=list)

    @field_validator("plugins", mode="before")
    @classmethod
    def _expand_names(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [{"name": item} if isinstance(item, str) else item for item in value]

    def active_plugins(self) -> list[PluginSetting]:
        return [p for p in self.plugins if p.active]

    def is_active(self, name: str) -> bool:
        return any(p.name == name for p in self.active_plugins())
