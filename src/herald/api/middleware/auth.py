"""JWT Bearer authentication middleware."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from herald.errors.exceptions import AuthenticationError
from herald.logging_config import bind_request_context
from herald.services.auth_service import AuthService

_ANONYMOUS = {"sub": "anonymous"}


class AuthMiddleware(BaseHTTPMiddleware):
    """Decode a Bearer token, if any, and attach the caller to request.state.

    Nothing is rejected here; routes that need a caller depend on
    ``get_current_user``.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        auth_header = request.headers.get("authorization", "")

        if auth_header.startswith("Bearer "):
            request.state.user = self._validate_jwt(request, auth_header[7:])
        else:
            request.state.user = dict(_ANONYMOUS)
        return await call_next(request)

    def _validate_jwt(self, request: Request, token: str) -> dict:
        service = AuthService(request.app.state.auth_config)
        try:
            payload = service.decode(token)
        except AuthenticationError:
            return {**_ANONYMOUS, "_auth_error": "invalid_token"}

        trace_id = getattr(request.state, "trace_id", None)
        if trace_id:
            bind_request_context(trace_id, payload.get("sub"))

        return {
            "sub": payload.get("sub", ""),
            "name": payload.get("name", payload.get("sub", "")),
        }
