# =============================================================================
# app/routers/forms.py - Form Submission Endpoint
# =============================================================================
# Accepts a name/email pair as a form post or a JSON body and echoes it
# back as plain text.
# =============================================================================

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from core.models.form import FormSubmission

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_payload(request: Request) -> Any:
    """Decode the body according to its Content-Type."""
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("application/json"):
        try:
            return await request.json()
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError (non UTF-8 body)
            raise RequestValidationError([
                {
                    "type": "json_invalid",
                    "loc": ("body", getattr(e, "pos", 0)),
                    "msg": "JSON decode error",
                    "input": {},
                    "ctx": {"error": getattr(e, "msg", str(e))},
                }
            ]) from e

    form = await request.form()
    return dict(form)


@router.post("/submitForm", response_class=PlainTextResponse)
async def submit_form(request: Request) -> str:
    """
    Submit the contact form.

    Example:
        POST /submitForm  name=Alice&email=a@x.com
        -> "Form submitted: Name - Alice, Email - a@x.com"
    """
    payload = await _read_payload(request)

    try:
        submission = FormSubmission.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e

    logger.debug(f"Form submitted by {submission.email}")
    return submission.confirmation()
