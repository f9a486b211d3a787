"""Unit tests for the permission_action module."""

import pytest

from pfp.classifier.permission_action import PermissionAction


@pytest.mark.parametrize("value,action", [("ignore", PermissionAction.IGNORE), ("raise", PermissionAction.RAISE)])
def test_permission_action_values(value, action):
    assert PermissionAction(value) is action
    assert action == value


def test_unknown_permission_action():
    with pytest.raises(ValueError):
        PermissionAction("fail")
