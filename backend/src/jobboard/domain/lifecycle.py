"""
Application Lifecycle
Transition table for application status changes
"""
from typing import Dict, FrozenSet

from .enums import ApplicationStatus
from jobboard.core.exceptions import InvalidStatusTransitionException


INITIAL_STATUS = ApplicationStatus.PENDING

# PENDING -> PENDING is listed so repeating the current status is a no-op
TRANSITIONS: Dict[ApplicationStatus, FrozenSet[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset({
        ApplicationStatus.PENDING,
        ApplicationStatus.APPROVED,
        ApplicationStatus.REJECTED,
    }),
    ApplicationStatus.APPROVED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}


def is_terminal(status: ApplicationStatus) -> bool:
    """A status with no outgoing transitions"""
    return not TRANSITIONS[status]


def can_transition(current: ApplicationStatus, requested: ApplicationStatus) -> bool:
    return requested in TRANSITIONS[current]


def transition(current: ApplicationStatus, requested: ApplicationStatus) -> ApplicationStatus:
    """
    Validate a status change

    Returns:
        The new status

    Raises:
        InvalidStatusTransitionException: if the table does not allow it
    """
    if not can_transition(current, requested):
        raise InvalidStatusTransitionException(current.value, requested.value)
    return requested
