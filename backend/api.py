import asyncio
import logging
import backend.config as config

from functools import lru_cache
from typing import Any, Optional
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from google import genai
from google.genai.errors import APIError

from fastapi.middleware.cors import CORSMiddleware
from backend.constants import (
    CODE_REQUIRED_ERROR,
    EMPTY_RESPONSE_ERROR,
    NOT_CONFIGURED_ERROR,
    REVIEW_ROUTE,
    UPSTREAM_FAILED_ERROR,
    UPSTREAM_TIMEOUT_ERROR,
)
from backend.generators import gemini_review

from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

@lru_cache
def get_settings():
    return config.Settings()

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL.upper())

# Initialize Limiter
limiter = Limiter(key_func=get_remote_address)

app = FastAPI(
    title="CodeSensei Review Gateway",
    description="Forwards code snippets to Gemini and returns a markdown review.",
    version="1.0.0",
)

# Register Limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ReviewRequest(BaseModel):
    # any JSON value; anything but a non-empty string gets the 400 below
    code: Optional[Any] = Field(None, description="The code snippet to be reviewed.")


@lru_cache
def get_gemini_client():
    """Shared Gemini client, built on first use and reused by every request."""
    return genai.Client(api_key=settings.GOOGLE_API_KEY)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.post(REVIEW_ROUTE, tags=["Review"])
@limiter.limit(settings.RATE_LIMIT)
async def get_review(request: Request, request_data: Optional[ReviewRequest] = None):
    if request_data is None or not isinstance(request_data.code, str) or not request_data.code:
        return error_response(400, CODE_REQUIRED_ERROR)

    try:
        gclient = get_gemini_client()
    except Exception as e:
        logging.error(f"Failed to initialize Gemini client: {e}")
        return error_response(503, NOT_CONFIGURED_ERROR)

    try:
        review = await gemini_review(
            gclient,
            request_data.code,
            settings.GEMINI_MODEL,
            settings.UPSTREAM_TIMEOUT,
        )
    except asyncio.TimeoutError:
        logging.error(f"Gemini call exceeded {settings.UPSTREAM_TIMEOUT}s")
        return error_response(504, UPSTREAM_TIMEOUT_ERROR)
    except APIError as e:
        logging.error(f"Gemini API Error: {e}")
        return error_response(502, UPSTREAM_FAILED_ERROR)
    except Exception as e:
        logging.error(f"An unexpected error occurred while generating a review: {e}")
        return error_response(502, UPSTREAM_FAILED_ERROR)

    if not review:
        logging.warning("Gemini returned a response without text")
        return error_response(502, EMPTY_RESPONSE_ERROR)

    logging.info(f"Review generated ({len(review)} chars)")
    return PlainTextResponse(review)


def main():
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
