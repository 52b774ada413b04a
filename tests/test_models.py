import pytest
from pydantic import ValidationError

from hrportal.core.permissions import UserRole
from hrportal.models.announcement import AnnouncementModel
from hrportal.models.employee import DepartmentModel, EmployeeModel
from hrportal.models.logistics import LogisticsItemModel, LogisticsRequestModel
from hrportal.models.onboarding_checklist import DocumentModel, OnboardingChecklistModel
from hrportal.models.recognition import RecognitionModel
from hrportal.models.user import UserModel


def test_user_defaults():
    user = UserModel(email="jane.doe@acme-corp.com")

    assert user.role == "employee"
    assert user.status == "active"
    with pytest.raises(ValidationError):
        UserModel(email="jane.doe@acme-corp.com", role="superuser")


def test_employee_progress_bounds():
    assert EmployeeModel(user_id="u", employee_id="EMP-1").onboarding_progress == 0
    with pytest.raises(ValidationError):
        EmployeeModel(user_id="u", employee_id="EMP-1", onboarding_progress=101)


def test_department_codes():
    assert DepartmentModel(code="finance_accounting", name="Finance").code == "finance_accounting"
    with pytest.raises(ValidationError):
        DepartmentModel(code="marketing", name="Marketing")


def test_recognition_types():
    model = RecognitionModel(nominee_id="u-1", nominated_by="u-2", title="Launch",
                             description="Shipped on time", type="achievement")

    assert not model.is_approved
    with pytest.raises(ValidationError):
        RecognitionModel(nominee_id="u-1", nominated_by="u-2", title="Launch",
                         description="Shipped on time", type="bonus")


def test_announcement_visibility():
    everyone = AnnouncementModel(title="Hi", content="All hands", is_published=True)
    managers = AnnouncementModel(title="Sync", content="Agenda", is_published=True,
                                 target_roles=[UserRole.TEAM_LEAD])
    draft = AnnouncementModel(title="Draft", content="Later")

    assert everyone.is_visible_to(UserRole.EMPLOYEE)
    assert managers.is_visible_to(UserRole.TEAM_LEAD)
    assert not managers.is_visible_to(UserRole.EMPLOYEE)
    assert not draft.is_visible_to(UserRole.HR_ADMIN)


def test_low_stock_flag():
    assert LogisticsItemModel(name="Markers", category="Supplies", quantity=1, min_quantity=10).is_low_stock
    assert not LogisticsItemModel(name="Badges", category="Security", quantity=30, min_quantity=10).is_low_stock


def test_request_quantity_must_be_positive():
    with pytest.raises(ValidationError):
        LogisticsRequestModel(requester_id="u-1", item_name="Chair", quantity=0)


def test_document_must_exist_before_verification():
    with pytest.raises(ValidationError):
        OnboardingChecklistModel(employee_id=1, item_title="Passport copy",
                                 requires_document=True, is_document_verified=True)

    item = OnboardingChecklistModel(employee_id=1, item_title="Passport copy", requires_document=True,
                                    document_url="/uploads/passport.pdf", is_document_verified=True)
    assert item.is_document_verified


def test_document_size_cannot_be_negative():
    with pytest.raises(ValidationError):
        DocumentModel(filename="a.pdf", original_name="a.pdf", mime_type="application/pdf", size=-1)
