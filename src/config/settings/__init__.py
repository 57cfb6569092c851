"""Agregador de settings do conector Talenta.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Integração Talenta
from config.settings.talenta import (
    TalentaSettings,
    get_talenta_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "TalentaSettings",
    "get_base_settings",
    "get_talenta_settings",
]
