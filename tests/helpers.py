"""Shared assertions over generated geometry."""

from steelbuilder.models import PrimitiveRole


def count_role(geometry, role: PrimitiveRole, group: str | None = None) -> int:
    return sum(
        1 for p in geometry.primitives
        if p.role == role and (group is None or p.group == group)
    )


def tagged(geometry, role: PrimitiveRole, **tags) -> list:
    return [
        p for p in geometry.primitives
        if p.role == role and all(p.tags.get(k) == v for k, v in tags.items())
    ]


def in_group(geometry, group: str, role: PrimitiveRole | None = None) -> list:
    return [
        p for p in geometry.primitives
        if p.group == group and (role is None or p.role == role)
    ]
