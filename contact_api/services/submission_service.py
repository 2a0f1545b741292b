"""
Submission Service
Validates contact form payloads and records accepted ones in the
submission store. Blocking (file I/O); routes call it from the threadpool.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from contact_api.database.submission_store import SubmissionStore
from contact_api.models.submission import BODY_INVALID, ContactForm, Submission
from contact_api.utils.exceptions import ValidationError
from contact_api.utils.helpers import SubmissionIdFactory, utc_now_iso

logger = logging.getLogger(__name__)


def validate_contact_form(payload: Any, strict: bool = False) -> ContactForm:
    """
    Validate a raw payload into a ContactForm.

    Raises ValidationError for the first failing field, in declaration order
    (fullName, phone, then the optional fields).
    """
    if not isinstance(payload, dict):
        raise ValidationError("body", BODY_INVALID)
    try:
        return ContactForm.model_validate(payload, context={"strict": strict})
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else "body"
        raise ValidationError(field, first["msg"])


class SubmissionService:
    """Validates and stores contact form submissions"""

    def __init__(
        self,
        store: SubmissionStore,
        strict: bool = False,
        version: Optional[str] = None,
        id_factory: Optional[SubmissionIdFactory] = None,
    ):
        self.store = store
        self.strict = strict
        self.version = version
        self.id_factory = id_factory or SubmissionIdFactory()
        self.started_at = utc_now_iso()

    def submit(self, payload: Any) -> Submission:
        """
        Validate ``payload`` and append it to the store.

        Raises ValidationError (nothing stored) or SubmissionStoreError
        (store left as it was).
        """
        form = validate_contact_form(payload, strict=self.strict)
        submission = Submission.from_form(form, self.id_factory.next_id(), utc_now_iso())
        total = self.store.append(submission.model_dump(mode="json"))
        logger.info("📨 New submission %s stored (%d total)", submission.id, total)
        return submission

    def list_submissions(self) -> List[Dict[str, Any]]:
        return self.store.read_all()

    def status(self) -> Dict[str, Any]:
        payload = {
            "status": "ok",
            "message": "Server is running",
            "startedAt": self.started_at,
        }
        if self.version:
            payload["version"] = self.version
        return payload
