"""Unit tests for PermissionResolver."""

from uuid import uuid4

import pytest

from rolegraph.application.services import PermissionResolver
from rolegraph.domain.exceptions import NotFound


@pytest.mark.asyncio
async def test_root_role_inherits_nothing(roles) -> None:
    """Empty inherits gives an empty inherited set."""
    root = roles.add_role("Root", permissions={"x:read"})
    resolver = PermissionResolver(roles)

    assert await resolver.get_inherited_permissions(root.id) == frozenset()
    assert await resolver.get_all_permissions(root.id) == {"x:read"}


@pytest.mark.asyncio
async def test_inherited_excludes_own_permissions(roles) -> None:
    """Inherited set holds only ancestor tokens; all adds own ones."""
    editor = roles.add_role("Editor", permissions={"post:write"})
    admin = roles.add_role("Admin", permissions={"post:delete"}, inherits=[editor.id])
    resolver = PermissionResolver(roles)

    assert await resolver.get_inherited_permissions(admin.id) == {"post:write"}
    assert await resolver.get_all_permissions(admin.id) == {"post:write", "post:delete"}


@pytest.mark.asyncio
async def test_transitive_chain(roles) -> None:
    """Permissions flow through every level of a chain."""
    r0 = roles.add_role("R0", permissions={"r0"})
    r1 = roles.add_role("R1", permissions={"r1"}, inherits=[r0.id])
    r2 = roles.add_role("R2", permissions={"r2"}, inherits=[r1.id])

    assert await PermissionResolver(roles).get_all_permissions(r2.id) == {"r0", "r1", "r2"}


@pytest.mark.asyncio
async def test_diamond_deduplicates_shared_ancestor(roles, diamond) -> None:
    """D reached through B and C contributes its token once."""
    result = await PermissionResolver(roles).get_all_permissions(diamond["A"].id)

    assert result == {"a:read", "b:read", "c:read", "d:read"}
    assert sorted(result).count("d:read") == 1


@pytest.mark.asyncio
async def test_parent_order_does_not_matter(roles) -> None:
    """Reordering inherits leaves the result unchanged."""
    x = roles.add_role("X", permissions={"x", "shared"})
    y = roles.add_role("Y", permissions={"y", "shared"})
    xy = roles.add_role("XY", inherits=[x.id, y.id])
    yx = roles.add_role("YX", inherits=[y.id, x.id])
    resolver = PermissionResolver(roles)

    assert await resolver.get_all_permissions(xy.id) == await resolver.get_all_permissions(yx.id)


@pytest.mark.asyncio
async def test_all_permissions_unknown_role_raises(roles) -> None:
    """get_all_permissions raises NotFound for unknown ids."""
    with pytest.raises(NotFound, match="Role"):
        await PermissionResolver(roles).get_all_permissions(uuid4())


@pytest.mark.asyncio
async def test_inherited_permissions_unknown_role_is_empty(roles) -> None:
    """get_inherited_permissions is lenient for unknown ids."""
    assert await PermissionResolver(roles).get_inherited_permissions(uuid4()) == frozenset()


@pytest.mark.asyncio
async def test_dangling_parent_is_skipped(roles) -> None:
    """Edges to missing roles contribute nothing."""
    editor = roles.add_role("Editor", permissions={"post:write"})
    admin = roles.add_role("Admin", inherits=[uuid4(), editor.id])

    assert await PermissionResolver(roles).get_all_permissions(admin.id) == {"post:write"}


@pytest.mark.asyncio
async def test_corrupted_cycle_terminates(roles) -> None:
    """A persisted cycle does not loop forever."""
    a = roles.add_role("A", permissions={"a"})
    b = roles.add_role("B", permissions={"b"}, inherits=[a.id])
    c = roles.add_role("C", permissions={"c"}, inherits=[b.id])
    a.inherits.append(c.id)

    result = await PermissionResolver(roles).get_all_permissions(a.id)

    assert result == {"a", "b", "c"}


@pytest.mark.asyncio
async def test_self_loop_terminates(roles) -> None:
    """A role inheriting itself still resolves."""
    a = roles.add_role("A", permissions={"a"})
    a.inherits.append(a.id)

    assert await PermissionResolver(roles).get_all_permissions(a.id) == {"a"}
