"""Normalizer Talenta: respostas da API em linhas uniformes.

Responsabilidades:
- Achatar listas da resposta em uma linha por elemento
- Extrair itens e metadados de paginação por página
"""

from .normalizer import (
    extract_page_items,
    extract_pagination_metadata,
    find_first_array,
    normalize_response,
)

__all__ = [
    "extract_page_items",
    "extract_pagination_metadata",
    "find_first_array",
    "normalize_response",
]
