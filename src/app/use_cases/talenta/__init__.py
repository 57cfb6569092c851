"""Use cases da integração Talenta."""

from .execute_action import ExecuteTalentaActionUseCase
from .models import ActionItem, ItemError, ItemResult

__all__ = [
    "ActionItem",
    "ExecuteTalentaActionUseCase",
    "ItemError",
    "ItemResult",
]
