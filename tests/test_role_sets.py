"""Role set tests."""

import pytest

from permitkit import Role, create_role_set, create_role_sets
from permitkit.contracts import Continuation


@pytest.mark.asyncio
async def test_create_role_set_collapses_duplicates():
    roles = await create_role_set(["a", "a", "b"], "t")
    assert len(roles) == 2
    assert set(roles) == {"a", "b"}


@pytest.mark.asyncio
async def test_create_role_set_uses_target():
    roles = await create_role_set([lambda doc: f"owner:{doc}", "reader"], "doc-1")
    assert set(roles) == {"owner:doc-1", "reader"}


@pytest.mark.asyncio
async def test_create_role_sets_flattens_and_deduplicates():
    roles = await create_role_sets(
        (["a", "b"],),
        ("b", None),
        (lambda target: [target, "a"], "c"),
    )
    assert len(roles) == 3
    assert set(roles) == {"a", "b", "c"}


@pytest.mark.asyncio
async def test_create_role_sets_empty():
    assert await create_role_sets() == []


@pytest.mark.asyncio
async def test_continuation_values_deduplicated_by_identity():
    shared = Role.continuation("tenant", True)
    other = Role.continuation("tenant", True)

    roles = await create_role_set([shared, shared, other, "a"])
    continuations = [value for value in roles if isinstance(value, Continuation)]

    assert len(continuations) == 2
    assert continuations[0] is shared.value
    assert continuations[1] is other.value
    assert "a" in roles
