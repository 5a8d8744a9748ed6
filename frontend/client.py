"""
HTTP client for the review gateway.

Every failure is turned into a user-facing message; nothing raised here
reaches the UI.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

REVIEW_PATH = "/ai/get-review"

EMPTY_CODE_MESSAGE = "⚠️ Please enter some code before requesting a review."
NO_BODY_MESSAGE = "⚠️ No response received from server."
UNEXPECTED_FORMAT_MESSAGE = "⚠️ Unexpected response format from server."
TIMEOUT_MESSAGE = "❌ Request timed out. Try again."
NO_RESPONSE_MESSAGE = "❌ No response from server. Please check your connection or backend."


@dataclass
class ReviewOutcome:
    kind: str  # "review", "warning" or "error"
    text: str

    @property
    def ok(self) -> bool:
        return self.kind == "review"


def render_payload(payload: Any) -> ReviewOutcome:
    """Pick the review text out of a decoded JSON body."""
    # JSON falsy values (null, "", 0, false); empty objects and lists fall through to the preview
    if payload is None or payload in ("", 0):
        return ReviewOutcome("warning", NO_BODY_MESSAGE)
    if isinstance(payload, str):
        return ReviewOutcome("review", payload)
    if isinstance(payload, dict):
        for field in ("review", "result"):
            if payload.get(field):
                return ReviewOutcome("review", str(payload[field]))

    preview = json.dumps(payload, indent=2, ensure_ascii=False)
    return ReviewOutcome(
        "warning",
        f"{UNEXPECTED_FORMAT_MESSAGE}\n\nResponse preview:\n\n```json\n{preview}\n```",
    )


def looks_like_json(text: str) -> bool:
    """Objects and arrays are decoded even when served without a JSON content-type."""
    return text.lstrip()[:1] in ("{", "[")


def render_response(response: httpx.Response) -> ReviewOutcome:
    if not response.content:
        return ReviewOutcome("warning", NO_BODY_MESSAGE)

    declared_json = "application/json" in response.headers.get("content-type", "")
    if declared_json or looks_like_json(response.text):
        try:
            payload = response.json()
        except ValueError:
            return ReviewOutcome("review", response.text)
        return render_payload(payload)

    return ReviewOutcome("review", response.text)


class ReviewClient:
    """Posts code to the gateway and keeps the loading/output display state."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 20.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self.loading = False
        self.output: Optional[ReviewOutcome] = None

    def request_review(self, code: str) -> ReviewOutcome:
        if not code.strip():
            self.output = ReviewOutcome("warning", EMPTY_CODE_MESSAGE)
            return self.output

        self.loading = True
        self.output = None
        try:
            self.output = self._post(code)
        finally:
            self.loading = False
        return self.output

    def _post(self, code: str) -> ReviewOutcome:
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(f"{self.base_url}{REVIEW_PATH}", json={"code": code})
                response.raise_for_status()
        except httpx.TimeoutException:
            logging.error(f"Review request timed out after {self.timeout}s")
            return ReviewOutcome("error", TIMEOUT_MESSAGE)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logging.error(f"Review gateway returned {status}")
            return ReviewOutcome("error", f"❌ Server error: {status} {e.response.reason_phrase}")
        except httpx.TransportError as e:
            logging.error(f"Review gateway unreachable: {e}")
            return ReviewOutcome("error", NO_RESPONSE_MESSAGE)
        except Exception as e:
            logging.error(f"Error fetching review: {e}")
            return ReviewOutcome("error", f"❌ Error: {e}")

        return render_response(response)
