"""Starlette/FastAPI binding: parse HTMX headers in, flush directives out."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from .config import FEATURE_HTMX, vary_enabled
from .headers import HX_REQUEST
from .htmx import Htmx
from .obs.prom import observe_directives, observe_request
from .utils.logging import get_logger

log = get_logger()


def feature_enabled() -> bool:  # pragma: no cover - simple accessor
    return FEATURE_HTMX


def get_htmx(request: Request, response: Response) -> Htmx:
    """FastAPI dependency: the request's Htmx.

    Without HtmxMiddleware the Htmx is created here and bound to FastAPI's
    dependency ``response``, whose headers FastAPI copies onto the response
    when the handler returns plain data. A handler that returns its own
    Response object must call ``hx.apply(resp.headers)`` itself.
    """
    hx = getattr(request.state, "htmx", None)
    if hx is None:
        log.debug(f"htmx bound to dependency response for {request.url.path} (no middleware)")
        hx = Htmx(request.headers).bind(response.headers)
        request.state.htmx = hx
    return hx


def _add_vary(headers) -> None:
    vary = headers.get("vary", "")
    if HX_REQUEST.lower() in [v.strip().lower() for v in vary.split(",")]:
        return
    headers.add_vary_header(HX_REQUEST)


class HtmxMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request, call_next):
        hx = Htmx(request.headers)
        request.state.htmx = hx
        route = request.url.path
        kind = observe_request(route=route, hx=hx)
        if kind != "plain":
            log.info(
                f"htmx {kind} request {request.method} {route} "
                f"target={hx.get_target() or '(none)'} trigger={hx.get_trigger() or '(none)'}"
            )

        response = await call_next(request)

        hx.apply(response.headers)
        observe_directives(name for name, _ in hx.response.items())
        if vary_enabled():
            _add_vary(response.headers)
        return response
