"""
In-memory submission store.

Stands in for the job system's submission collection: lookup by id and
the numbering of repeat submissions.
"""

import logging
import uuid
from collections import defaultdict

from .exceptions import SubmissionLimitReached, SubmissionNotFound
from .schemas.submission import FormSubmission

logger = logging.getLogger(__name__)

MAX_SUBMISSIONS = 3


class InMemorySubmissionStore:
    """Submissions keyed by id, numbered per (job, form, user)."""

    def __init__(self):
        self._submissions: dict[str, FormSubmission] = {}
        self._counts: dict[tuple[str, str, str], int] = defaultdict(int)

    def get(self, submission_id: str) -> FormSubmission:
        """
        Look up a submission.

        Raises:
            SubmissionNotFound: If the id is unknown
        """
        try:
            return self._submissions[submission_id]
        except KeyError:
            raise SubmissionNotFound(submission_id) from None

    def add(self, submission: FormSubmission) -> FormSubmission:
        """
        Store a new submission with the next submission number.

        Args:
            submission: The submission (its id is generated when empty)

        Returns:
            The stored copy, with ``id`` and ``submission_number`` set

        Raises:
            SubmissionLimitReached: If the user already submitted this form
                three times for the job
        """
        key = (submission.job_id, submission.form_id, submission.submitted_by)
        existing = self._counts[key]
        if existing >= MAX_SUBMISSIONS:
            raise SubmissionLimitReached(
                f"Maximum submissions ({MAX_SUBMISSIONS}) reached for form "
                f"{submission.form_id} on job {submission.job_id}"
            )

        stored = submission.model_copy(
            update={"id": submission.id or uuid.uuid4().hex, "submission_number": existing + 1}
        )
        self._submissions[stored.id] = stored
        self._counts[key] = existing + 1
        logger.info("Stored submission %s (#%d)", stored.id, stored.submission_number)
        return stored

    def __len__(self) -> int:
        return len(self._submissions)
