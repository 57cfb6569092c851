"""Enums e constantes de domínio da integração Talenta."""

from __future__ import annotations

from enum import StrEnum


class TalentaAction(StrEnum):
    """Ações suportadas pelo catálogo do conector."""

    GET_ALL_EMPLOYEES = "getAllEmployees"
    GET_EMPLOYEE_BY_ID = "getEmployeeById"
    GET_OVERTIME_REQUEST_LIST = "getOvertimeRequestList"
    GET_OVERTIME_REQUEST_DETAIL_BY_ID = "getOvertimeRequestDetailById"


class TalentaEnvironment(StrEnum):
    """Ambientes expostos pelo Mekari API Gateway."""

    PRODUCTION = "production"
    SANDBOX = "sandbox"


TALENTA_BASE_URLS: dict[str, str] = {
    TalentaEnvironment.PRODUCTION: "https://api.mekari.com/v2/talenta/v2/",
    TalentaEnvironment.SANDBOX: "https://sandbox-api.mekari.com/v2/talenta/v2/",
}

TALENTA_DOCUMENTATION_URL = "https://documenter.getpostman.com/view/12246328/UVR5qp6v"

# Parâmetros de query que habilitam o modo "return all"
PAGINATION_QUERY_PARAMS = ("limit", "page")
