# =============================================================================
# core/models/form.py - Form Submission Schema
# =============================================================================

from pydantic import BaseModel, Field


class FormSubmission(BaseModel):
    """
    Contact form posted to POST /submitForm.

    Accepted as form-encoded, multipart or JSON. Both fields are plain
    strings; no format checks are applied to the email.
    """

    name: str = Field(
        ...,
        description="Name entered in the form"
    )

    email: str = Field(
        ...,
        description="Email entered in the form"
    )

    def confirmation(self) -> str:
        """Text echoed back to the submitter."""
        return f"Form submitted: Name - {self.name}, Email - {self.email}"
