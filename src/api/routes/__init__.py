"""Rotas HTTP da API: adapters de entrada do host.

Estrutura:
- routes/health/: health checks e readiness
- routes/talenta/: catálogo e execução de ações

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
