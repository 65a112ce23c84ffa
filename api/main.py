"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from api.routes import rounds
from config import config
from core.exceptions import IllegalActionError, InvalidArgumentError

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    enabled=config.rate_limit.enabled,
    default_limits=[f"{config.rate_limit.requests_per_minute}/minute"],
)


def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded errors."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


def _invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    """Malformed round input."""
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def _illegal_action_handler(request: Request, exc: IllegalActionError) -> JSONResponse:
    """Action not allowed in the round's current phase."""
    return JSONResponse(status_code=409, content={"detail": str(exc)})


app = FastAPI(
    title="Blackjack Round Engine",
    description="Deal, play and settle blackjack rounds",
    version="0.1.0",
    debug=config.debug,
)

# Add rate limiter to app state and exception handlers
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(InvalidArgumentError, _invalid_argument_handler)
app.add_exception_handler(IllegalActionError, _illegal_action_handler)

# CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.allow_methods,
    allow_headers=config.cors.allow_headers,
)


@app.get("/api/health")
@limiter.limit(f"{config.rate_limit.requests_per_minute}/minute")
async def health_check(request: Request) -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(rounds.router, prefix="/api/blackjack", tags=["blackjack"])
