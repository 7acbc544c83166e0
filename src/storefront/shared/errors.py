"""Errors raised by the Storefront domain beyond protean's own hierarchy."""

from protean.exceptions import ProteanExceptionWithMessage


class ConflictError(ProteanExceptionWithMessage):
    """A write would create a second record where only one may exist.

    Carries a ``messages`` dict keyed by the offending element, in the same
    shape as ``protean.exceptions.ValidationError``.
    """
