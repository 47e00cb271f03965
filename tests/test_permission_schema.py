"""Permission flags stay in sync between the model and the request schema."""
from app.models import PERMISSION_FLAGS, Permission
from app.schemas.permission import UpdatePermissionRequest


def test_request_schema_accepts_every_permission_flag():
    assert tuple(UpdatePermissionRequest.model_fields) == PERMISSION_FLAGS


def test_every_permission_flag_is_a_column():
    columns = set(Permission.__table__.columns.keys())
    assert set(PERMISSION_FLAGS) <= columns


def test_changes_only_include_fields_sent():
    request = UpdatePermissionRequest.model_validate({"can_view_users": True, "can_log_refunds": None})

    assert request.changes() == {"can_view_users": True}
