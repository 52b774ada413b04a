"""
Employee onboarding schemas and validators.

This module only depends on pydantic and email-validator so that the
same rules run wherever a submission is checked: in an API handler, a
batch import or a client-side tool. Field names on the wire are camelCase;
Python attributes are snake_case.

Validators return a ValidationResult instead of raising. Every failure is
collected so a form can show all problems at once. A TypeError is raised
only when the input is not a mapping at all.

Submission status is deliberately not checked against the steps here;
status transitions belong to the onboarding workflow.
"""
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from hrportal.validation.result import FieldError, ValidationResult, field_errors_from


class OnboardingCategory(str, Enum):
    """Checklist groups used by HR during onboarding"""
    PRE_ARRIVAL = "pre_arrival"
    DOCUMENTATION = "documentation"
    IT_SETUP = "it_setup"
    ACCESS_PERMISSIONS = "access_permissions"
    ORIENTATION = "orientation"


class SubmissionStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


# Keyed by wire name; used for both blank and missing values
REQUIRED_FIELD_MESSAGES: Dict[str, str] = {
    "firstName": "First name is required",
    "lastName": "Last name is required",
    "email": "Email is required",
    "phoneNumber": "Phone number is required",
    "currentAddress": "Current address is required",
    "position": "Position is required",
    "department": "Department is required",
    "startDate": "Start date is required",
    "emergencyContactName": "Emergency contact name is required",
    "emergencyContactPhone": "Emergency contact phone is required",
    "privacyPolicyAgreed": "Privacy policy agreement is required",
    "termsAndConditionsAgreed": "Terms and conditions agreement is required",
    "backgroundCheckConsent": "Background check consent is required",
}

INVALID_EMAIL_MESSAGE = "Invalid email address"

REQUIRED_TEXT_FIELDS = (
    "first_name",
    "last_name",
    "phone_number",
    "current_address",
    "position",
    "department",
    "start_date",
    "emergency_contact_name",
    "emergency_contact_phone",
)

CONSENT_FIELDS = (
    "privacy_policy_agreed",
    "terms_and_conditions_agreed",
    "background_check_consent",
)


def _raise_rule_violations(messages: List[str]) -> None:
    if messages:
        raise PydanticCustomError(
            "field_rules",
            "{summary}",
            {"summary": "; ".join(messages), "messages": messages},
        )


def _is_blank(value: str) -> bool:
    return not value.strip()


def _is_email(value: str) -> bool:
    # A bare local-part@domain only: no display name, no padding
    if value != value.strip() or "<" in value or ">" in value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return "." in value.rpartition("@")[2]


class OnboardingModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class EmployeeDetails(OnboardingModel):
    """Details a new hire enters in step one of onboarding."""

    # Personal information
    first_name: StrictStr
    last_name: StrictStr
    date_of_birth: Optional[StrictStr] = None
    gender: Optional[StrictStr] = None
    marital_status: Optional[StrictStr] = None
    nationality: Optional[StrictStr] = None

    # Contact information
    email: StrictStr
    phone_number: StrictStr
    alternate_phone: Optional[StrictStr] = None

    # Address information
    current_address: StrictStr
    permanent_address: Optional[StrictStr] = None
    city: Optional[StrictStr] = None
    state: Optional[StrictStr] = None
    zip_code: Optional[StrictStr] = None
    country: Optional[StrictStr] = None

    # Employment information
    position: StrictStr
    department: StrictStr
    start_date: StrictStr
    employment_type: Optional[StrictStr] = None
    work_location: Optional[StrictStr] = None
    reporting_manager: Optional[StrictStr] = None

    # Educational background
    highest_education: Optional[StrictStr] = None
    university: Optional[StrictStr] = None
    graduation_year: Optional[StrictStr] = None
    major_subject: Optional[StrictStr] = None

    # Emergency contact
    emergency_contact_name: StrictStr
    emergency_contact_relation: Optional[StrictStr] = None
    emergency_contact_phone: StrictStr
    emergency_contact_address: Optional[StrictStr] = None

    # Additional information
    skills: Optional[StrictStr] = None
    previous_experience: Optional[StrictStr] = None
    languages_spoken: Optional[StrictStr] = None
    hobbies: Optional[StrictStr] = None

    # Acknowledgments
    privacy_policy_agreed: StrictBool
    terms_and_conditions_agreed: StrictBool
    background_check_consent: StrictBool

    @field_validator(*REQUIRED_TEXT_FIELDS)
    @classmethod
    def check_required_text(cls, value: str, info: ValidationInfo) -> str:
        if _is_blank(value):
            _raise_rule_violations([REQUIRED_FIELD_MESSAGES[to_camel(info.field_name)]])
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        messages = []
        if _is_blank(value):
            messages.append(REQUIRED_FIELD_MESSAGES["email"])
        if not _is_email(value):
            messages.append(INVALID_EMAIL_MESSAGE)
        _raise_rule_violations(messages)
        return value

    @field_validator(*CONSENT_FIELDS)
    @classmethod
    def check_consent(cls, value: bool, info: ValidationInfo) -> bool:
        if value is not True:
            _raise_rule_violations([REQUIRED_FIELD_MESSAGES[to_camel(info.field_name)]])
        return value

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class HROnboardingStep(OnboardingModel):
    """
    One HR checklist item.

    completed_by and completed_at stay optional even when is_completed is
    true, so a step can be closed in bulk without a named completer. Use
    completion_gaps() to find such steps.
    """
    id: StrictStr
    title: StrictStr
    description: StrictStr
    category: OnboardingCategory
    estimated_time: Union[StrictInt, StrictFloat]
    is_completed: StrictBool
    completed_by: Optional[StrictStr] = None
    completed_at: Optional[StrictStr] = None
    notes: Optional[StrictStr] = None
    requires_document: Optional[StrictBool] = None
    document_uploaded: Optional[StrictBool] = None


class EmployeeSubmission(OnboardingModel):
    """A new hire's details together with HR's checklist progress."""
    id: StrictInt
    employee_details: EmployeeDetails
    hr_steps: Optional[List[HROnboardingStep]] = None
    status: SubmissionStatus
    submitted_at: StrictStr
    completed_at: Optional[StrictStr] = None
    assigned_hr: Optional[StrictStr] = Field(default=None, alias="assignedHR")


def _validate(model: Type[OnboardingModel], data: Any) -> ValidationResult:
    if isinstance(data, model):
        return ValidationResult(value=data)

    if not isinstance(data, Mapping):
        raise TypeError(f"{model.__name__} data must be a mapping, got {type(data).__name__}")

    try:
        return ValidationResult(value=model.model_validate(dict(data)))
    except ValidationError as exc:
        return ValidationResult(errors=field_errors_from(exc, REQUIRED_FIELD_MESSAGES))


def validate_employee_details(data: Any) -> ValidationResult:
    """
    Validate a new hire's details.

    Args:
        data: Mapping keyed by wire (camelCase) or attribute names

    Returns:
        ValidationResult holding an EmployeeDetails or every field failure

    Raises:
        TypeError: If data is not a mapping
    """
    return _validate(EmployeeDetails, data)


def validate_hr_step(data: Any) -> ValidationResult:
    """Validate one HR onboarding step."""
    return _validate(HROnboardingStep, data)


def validate_employee_submission(data: Any) -> ValidationResult:
    """
    Validate a whole submission: its details and each of its steps.

    The submission is valid only when the details are valid and every step
    is valid. Failure paths point into the nested structure, for example
    ``hrSteps.1.category``. Status is not compared with step completion.
    """
    return _validate(EmployeeSubmission, data)


def completion_gaps(step: HROnboardingStep) -> List[str]:
    """
    List the completer fields missing from a completed step.

    Returns:
        Wire names of missing fields; empty when the step is open or fully recorded
    """
    if not step.is_completed:
        return []

    gaps = []
    if not step.completed_by:
        gaps.append("completedBy")
    if not step.completed_at:
        gaps.append("completedAt")
    return gaps


def errors_as_dicts(errors: List[FieldError]) -> List[Dict[str, str]]:
    return [error.model_dump() for error in errors]

