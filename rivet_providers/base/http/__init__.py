"""HTTP transport package.

Exposes the pooled httpx clients, the POST senders and the response handler
factories.
"""

from .client import get_httpx_client, close_all_clients
from .form_data import FormData
from .handler_types import HandlerResult, RequestBody, ResponseContext, ResponseHandler
from .headers import (
    extract_response_headers,
    get_runtime_user_agent,
    remove_undefined_entries,
    with_user_agent_suffix,
)
from .post_to_api import post_form_data_to_api, post_json_to_api, post_to_api
from .response_handlers import (
    create_event_source_response_handler,
    create_json_error_response_handler,
    create_json_response_handler,
    create_status_code_error_response_handler,
)

__all__ = [
    "FormData",
    "HandlerResult",
    "RequestBody",
    "ResponseContext",
    "ResponseHandler",
    "close_all_clients",
    "create_event_source_response_handler",
    "create_json_error_response_handler",
    "create_json_response_handler",
    "create_status_code_error_response_handler",
    "extract_response_headers",
    "get_httpx_client",
    "get_runtime_user_agent",
    "post_form_data_to_api",
    "post_json_to_api",
    "post_to_api",
    "remove_undefined_entries",
    "with_user_agent_suffix",
]
