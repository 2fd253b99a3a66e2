"""URI comparison helpers."""

from typing import Optional

from ..models.uri import Schemas, Uri


def has_to_ignore_case(resource: Optional[Uri], ignore_case: bool) -> bool:
    """Case rule for comparing ``resource``.

    File URIs live on the local filesystem and follow the platform rule.
    Other schemes may come from any platform, so their case is ignored.
    """
    if resource is not None and resource.scheme == Schemas.FILE:
        return ignore_case
    return True


def is_equal(first: Optional[Uri], second: Optional[Uri], ignore_case: bool = False) -> bool:
    """Compare two URIs by their canonical string form."""
    if first is second:
        return True
    if first is None or second is None:
        return False

    first_str = first.to_string()
    second_str = second.to_string()
    if ignore_case:
        return first_str.lower() == second_str.lower()
    return first_str == second_str
