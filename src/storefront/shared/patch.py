"""Partial-update support for aggregates.

A patch is the mapping of fields the caller explicitly supplied. A key that is
present carries its new value, even when that value is ``None``; a missing key
leaves the field untouched.
"""

from protean.exceptions import ValidationError


def supplied_changes(changes, updatable):
    """Return ``changes`` as a dict, rejecting fields outside ``updatable``."""
    changes = dict(changes or {})
    unknown = sorted(set(changes) - set(updatable))
    if unknown:
        raise ValidationError({field: ["Field cannot be updated"] for field in unknown})
    return changes
