"""Contact form presenter and submission backends."""

import asyncio
import logging
from dataclasses import replace
from typing import Protocol

from skylens.models.contact import Contact, ContactValidationError
from skylens.models.presentation import SubmissionStatus
from skylens.presenters.observable import Observable
from skylens.validation.contact_validator import validate

logger = logging.getLogger(__name__)

DEFAULT_SUBMISSION_DELAY = 1.5


class ContactSubmitter(Protocol):
    async def submit(self, contact: Contact) -> None: ...


class SimulatedSubmitter:
    """Stand-in backend: waits a fixed latency, then always succeeds."""

    def __init__(self, delay_seconds: float = DEFAULT_SUBMISSION_DELAY):
        self.delay_seconds = delay_seconds

    async def submit(self, contact: Contact) -> None:
        logger.info("Submitting contact message from %s", contact.email)
        await asyncio.sleep(self.delay_seconds)


class ContactPresenter(Observable):
    def __init__(self, submitter: ContactSubmitter | None = None):
        super().__init__()
        self.submitter = submitter or SimulatedSubmitter()
        self.contact = Contact()
        self.validation_errors: list[ContactValidationError] = []
        self.status = SubmissionStatus.IDLE
        self.show_success = False

    @property
    def is_submitting(self) -> bool:
        return self.status == SubmissionStatus.SUBMITTING

    @property
    def error_messages(self) -> list[str]:
        return [e.message for e in self.validation_errors]

    async def submit_form(self) -> bool:
        """Validate and submit. Returns True if the message was sent.

        Validation failures leave the form untouched with errors populated.
        A successful submission clears the form.
        """
        self.validation_errors = validate(self.contact)
        if self.validation_errors:
            logger.debug("Contact form invalid: %s", ", ".join(self.validation_errors))
            self.status = SubmissionStatus.IDLE
            self._notify()
            return False

        self.status = SubmissionStatus.SUBMITTING
        self._notify()
        try:
            await self.submitter.submit(replace(self.contact))
        except Exception:
            self.status = SubmissionStatus.IDLE
            self._notify()
            raise

        self.status = SubmissionStatus.SUBMITTED
        self.show_success = True
        self.contact = Contact()
        self._notify()
        return True

    def reset_form(self) -> None:
        self.contact = Contact()
        self.validation_errors = []
        self.show_success = False
        self.status = SubmissionStatus.IDLE
        self._notify()
