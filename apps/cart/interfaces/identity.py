"""
Request identity resolution.
"""
from shared.domain.exceptions import UnauthenticatedError


class RequestIdentityResolver:
    """Turns an authenticated request into the owner id carts are keyed by."""

    def resolve(self, request) -> str:
        user = getattr(request, 'user', None)
        if user is None or not user.is_authenticated:
            raise UnauthenticatedError()
        return str(user.pk)
