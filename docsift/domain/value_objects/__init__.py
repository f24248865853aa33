"""
Domain Value Objects

Immutable value objects that encapsulate domain concepts with validation.
"""
from .page_state import PageState, can_transition
from .resolved_identifier import IdentifierSource, ResolvedIdentifier

__all__ = [
    'PageState',
    'can_transition',
    'IdentifierSource',
    'ResolvedIdentifier',
]
