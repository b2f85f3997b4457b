import logging

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from config import settings
from routers import countries
from services import country_service

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Answers preflight requests and stamps CORS headers on every response.

    Also the last line of defence: anything a handler raises that was not
    turned into a response ends up here as a generic 500.
    """

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Unhandled error on %s %s", request.method, request.url.path)
                response = JSONResponse({"error": "Internal server error"}, status_code=500)
        response.headers["Access-Control-Allow-Origin"] = settings.cors_allow_origin
        response.headers["Access-Control-Allow-Methods"] = ", ".join(settings.cors_allow_methods)
        response.headers["Access-Control-Allow-Headers"] = ", ".join(settings.cors_allow_headers)
        return response


app = FastAPI(
    title="Country Info API",
    version="0.1.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)

app.add_middleware(CORSHeadersMiddleware)

app.include_router(countries.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc, HTTPException):
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code)
    # Raised by the router itself: unknown path, or known path with the wrong method
    return JSONResponse({"error": "Route not found"}, status_code=404)


@app.on_event("startup")
async def startup():
    country_service.load(settings.data_path)


class CountryServer(uvicorn.Server):
    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        # Sockets are bound once the base startup returns
        if self.started:
            print(f"Server running on http://localhost:{self.config.port}")


if __name__ == "__main__":
    config = uvicorn.Config(app, host=settings.host, port=settings.port, log_level=settings.log_level)
    CountryServer(config).run()
