"""Conector Talenta (Mekari HRIS).

Catálogo declarativo de ações, assinatura HMAC-SHA256 por request,
transporte HTTP e driver de paginação.
"""

from .catalog import TALENTA_ACTIONS, ActionDescriptor, get_action, list_actions
from .credentials import TalentaCredentials, validate_credentials
from .errors import (
    InvalidCredentialsError,
    MalformedResponseError,
    OperationCancelledError,
    TalentaError,
    TransportFailureError,
    UnknownActionError,
)
from .http_client import HttpClientConfig, TalentaHttpClient, create_talenta_http_client
from .pagination import PaginationResult, paginate
from .parameters import (
    PARAMETER_FIELDS,
    ActionParameters,
    MappingParameterSource,
    ParameterField,
    fields_for_action,
    resolve_parameters,
)
from .request_builder import SignedRequest, build_signed_request

__all__ = [
    "PARAMETER_FIELDS",
    "TALENTA_ACTIONS",
    "ActionDescriptor",
    "ActionParameters",
    "HttpClientConfig",
    "InvalidCredentialsError",
    "MalformedResponseError",
    "MappingParameterSource",
    "OperationCancelledError",
    "PaginationResult",
    "ParameterField",
    "SignedRequest",
    "TalentaCredentials",
    "TalentaError",
    "TalentaHttpClient",
    "TransportFailureError",
    "UnknownActionError",
    "build_signed_request",
    "create_talenta_http_client",
    "fields_for_action",
    "get_action",
    "list_actions",
    "paginate",
    "resolve_parameters",
    "validate_credentials",
]
