"""Tests for payload schemas and date formatting."""

from datetime import date

import pytest
from pydantic import ValidationError

from claim_forms.schemas.base import FormType
from claim_forms.schemas.requests import MaterialListRequest, NoncomplianceRequest
from claim_forms.schemas.submission import FormSubmission
from claim_forms.utils.dates import format_date, ordinal


def test_submission_accepts_camel_case() -> None:
    submission = FormSubmission.model_validate({
        "id": "s1",
        "jobId": "job-1",
        "formId": "form-discovery-geyser",
        "submissionNumber": 2,
        "data": {"field-claim-number": "D-1"},
    })
    assert submission.job_id == "job-1"
    assert submission.download_name == "form-discovery-geyser-submission-2.pdf"


def test_submission_number_range() -> None:
    with pytest.raises(ValidationError):
        FormSubmission(formId="form-absa-certificate", submissionNumber=4)


def test_form_type_lookup() -> None:
    assert FormType.from_id("noncompliance-form") is FormType.NONCOMPLIANCE
    assert FormType.from_id("form-job-checklist") is None


def test_selected_issues_from_json_string() -> None:
    params = NoncomplianceRequest.model_validate({"selectedIssues": "[1, 3]"})
    assert params.selected_issues == [1, 3]
    assert NoncomplianceRequest.model_validate({}).selected_issues == []


def test_material_list_missing_objects() -> None:
    body = MaterialListRequest.model_validate({"geyser": None, "sundries": None})
    data = body.to_form_data()
    assert data["geyser"] == {"size": "", "kwikot": False, "heatTech": False, "techron": False}
    assert data["sundries"] == []


@pytest.mark.parametrize("day, expected", [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
                                           (11, "11th"), (12, "12th"), (13, "13th"), (22, "22nd")])
def test_ordinal(day: int, expected: str) -> None:
    assert ordinal(day) == expected


def test_date_formats() -> None:
    value = date(2026, 3, 1)
    assert format_date(value, "Do,MM") == "1st,03"
    assert format_date(value, "MMMM Do, YYYY") == "March 1st, 2026"
    assert format_date(value, "YYYY-MM-DD") == "2026-03-01"
    with pytest.raises(ValueError):
        format_date(value, "DD/MM")
