"""
Setting Model

A single named configuration leaf holding a literal or a SettingBlock.

Version: 1.0.0
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field

from .setting_block import SettingBlock


class Setting(BaseModel):
    """
    Named setting value.

    Literal values are returned unchanged. SettingBlock values are evaluated
    on every read, nothing is cached.

    Attributes:
        key: Setting name, unique within its namespace
        value: Literal value or SettingBlock
    """
    key: str = Field(..., description="Setting name")
    value: Any = Field(default=None, description="Literal value or SettingBlock")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def is_deferred(self) -> bool:
        return isinstance(self.value, SettingBlock)

    def resolved_value(self) -> Any:
        """Get the current value, evaluating the block if deferred."""
        if self.is_deferred:
            return self.value.call()
        return self.value

    def is_truthy(self) -> bool:
        """Only None and False count as false."""
        value = self.resolved_value()
        return value is not None and value is not False

    def to_dict(self) -> Dict[str, Any]:
        return {self.key: self.resolved_value()}
