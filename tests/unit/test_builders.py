"""Permission and permit helper tests."""

import pytest

from permitkit import Permission, Permit
from permitkit.check import check_permission, check_permit
from permitkit.contracts import Approval, Continuation, Denial, Role
from permitkit.evaluate import evaluate_permit


@pytest.mark.asyncio
async def test_permission_create_checks_permit():
    permission = Permission.create(["reader", "writer"])

    def privilege(role):
        return role.value == "reader"

    approval = await check_permission(permission, privilege)
    assert approval == Approval(value=False, error=Denial("Privilege", False))

    assert (await check_permission(permission, True)).value


@pytest.mark.asyncio
async def test_permission_create_passes_target_to_permit():
    permission = Permission.create(lambda target: f"owner:{target}")

    def privilege(role):
        return role.value == "owner:doc-1"

    assert (await check_permission(permission, privilege, "doc-1")).value
    assert not (await check_permission(permission, privilege, "doc-2")).value


@pytest.mark.asyncio
async def test_permission_map_with_sync_and_async_mapper():
    def permission(privilege, target):
        return target == "mapped:doc"

    async def async_mapper(target):
        return f"mapped:{target}"

    mapped = Permission.map(permission, lambda target: f"mapped:{target}")
    assert (await check_permission(mapped, None, "doc")).value

    mapped = Permission.map(permission, async_mapper)
    assert (await check_permission(mapped, None, "doc")).value
    assert not (await check_permission(mapped, None, "other")).value


@pytest.mark.asyncio
async def test_permit_map():
    permit = Permit.map(lambda owner: f"user:{owner}", lambda document: document["owner"])

    roles = await evaluate_permit(permit, {"owner": "alice"})
    assert [role.value for role in roles] == ["user:alice"]


@pytest.mark.asyncio
async def test_permission_continuation_emits_continuation_role():
    nested = Permission.create("admin")
    received = []

    def privilege(role):
        received.append(role)
        return True

    permission = Permission.continuation("tenant", nested, error="tenant denied")
    assert (await check_permission(permission, privilege)).value

    (role,) = received
    assert role.value == Continuation(type="tenant", permission=nested)
    assert role.error == "tenant denied"


@pytest.mark.asyncio
async def test_permission_continuation_unaddressed_uses_error():
    permission = Permission.continuation("tenant", True, error="tenant denied")

    approval = await check_permission(permission, lambda role: [])
    assert approval == Approval(value=False, error="tenant denied")


@pytest.mark.asyncio
async def test_role_continuation_can_be_checked_directly():
    role = Role.continuation("tenant", True)

    async def privilege(role):
        if isinstance(role.value, Continuation) and role.value.type == "tenant":
            return await check_permission(role.value.permission, None)
        return False

    assert (await check_permit(role, privilege)).value
