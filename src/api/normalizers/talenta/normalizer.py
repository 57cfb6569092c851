"""Normalização de respostas Talenta em linhas de saída.

Heurística (mantida por compatibilidade): a primeira lista encontrada no
body, ou em `data`/`response`, vira uma linha por elemento. Se houver
listas irmãs, vence a primeira na ordem de chaves do JSON.
"""

from __future__ import annotations

from typing import Any

# Sub-objetos inspecionados após o nível raiz
_CONTAINER_KEYS = ("data", "response")

# Onde procurar current_page/last_page
_PAGINATION_CONTAINERS = ("data", "pagination", "meta")


def _first_list_field(obj: dict[str, Any]) -> list[Any] | None:
    for value in obj.values():
        if isinstance(value, list):
            return value
    return None


def _first_list_in_containers(body: dict[str, Any]) -> list[Any] | None:
    for key in _CONTAINER_KEYS:
        container = body.get(key)
        if isinstance(container, dict):
            found = _first_list_field(container)
            if found is not None:
                return found
    return None


def find_first_array(body: Any) -> list[Any] | None:
    """Retorna a primeira lista no body (raiz, depois data/response).

    Returns:
        A lista encontrada ou None
    """
    if isinstance(body, list):
        return body
    if not isinstance(body, dict):
        return None

    found = _first_list_field(body)
    if found is not None:
        return found
    return _first_list_in_containers(body)


def extract_page_items(body: Any) -> list[Any]:
    """Itens da página corrente (lista vazia se nenhuma lista encontrada).

    Em páginas os itens vêm do objeto aninhado (`data`, depois `response`);
    listas da raiz (ex: `errors: []`) só são usadas se ele não tiver lista.
    """
    if isinstance(body, dict):
        found = _first_list_in_containers(body)
        if found is not None:
            return found
    return find_first_array(body) or []


def _as_page_number(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None


def _read_metadata(obj: Any) -> tuple[int, int] | None:
    if not isinstance(obj, dict):
        return None
    current = _as_page_number(obj.get("current_page"))
    last = _as_page_number(obj.get("last_page"))
    if current is None or last is None:
        return None
    return current, last


def extract_pagination_metadata(body: Any) -> tuple[int, int] | None:
    """Retorna (current_page, last_page) se o servidor informou paginação.

    Procura na raiz, em data/pagination/meta e em data.pagination.
    """
    if not isinstance(body, dict):
        return None

    candidates: list[Any] = [body]
    candidates.extend(body.get(key) for key in _PAGINATION_CONTAINERS)
    data = body.get("data")
    if isinstance(data, dict):
        candidates.extend(data.get(key) for key in ("pagination", "meta"))

    for candidate in candidates:
        metadata = _read_metadata(candidate)
        if metadata is not None:
            return metadata
    return None


def _as_row(element: Any) -> dict[str, Any]:
    if isinstance(element, dict):
        return element
    return {"response": element}


def normalize_response(body: Any) -> list[dict[str, Any]]:
    """Converte o body decodificado em linhas de saída.

    - string → [{"response": string}]
    - lista encontrada → uma linha por elemento
    - nenhuma lista → [body]
    """
    if body is None:
        return []
    if isinstance(body, str):
        return [{"response": body}]

    items = find_first_array(body)
    if items is not None:
        return [_as_row(element) for element in items]

    return [_as_row(body)]
