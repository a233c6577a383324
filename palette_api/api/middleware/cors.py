"""CORS middleware.

Adds permissive CORS headers to every response and answers any OPTIONS
request directly with 200, before rate limiting or routing. Unhandled
exceptions are turned into the 500 body here so they carry the headers too.
"""

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from palette_api.api.errors import generic_exception_handler

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Outermost stage of the request pipeline."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

        try:
            response = await call_next(request)
        except Exception as e:
            response = await generic_exception_handler(request, e)
        response.headers.update(CORS_HEADERS)
        return response
