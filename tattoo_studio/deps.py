# tattoo_studio/deps.py

from fastapi import HTTPException

from .auth import PRIVILEGED_ROLES, SessionContext
from .scheduling import BookingRejected, RejectionKind
from .schemas import UserRole

REJECTION_STATUS = {
    RejectionKind.invalid_range: 422,
    RejectionKind.out_of_working_hours: 422,
    RejectionKind.chair_conflict: 409,
}


def require_role(user: SessionContext, *roles: UserRole):
    if user.role not in roles:
        raise HTTPException(status_code=403, detail="Forbidden")


def require_privileged(user: SessionContext):
    require_role(user, *PRIVILEGED_ROLES)


def raise_rejection(rejection: BookingRejected):
    """Turns a booking rejection into an HTTP error the client can tell apart by `code`."""
    raise HTTPException(
        status_code=REJECTION_STATUS[rejection.kind],
        detail={
            "code": rejection.kind.value,
            "message": rejection.message,
            "conflicting_ids": rejection.conflicting_ids,
            "authoritative": rejection.authoritative,
        },
    )
