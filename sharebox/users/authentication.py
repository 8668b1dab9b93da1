from django.conf import settings
from rest_framework import authentication, exceptions

from sharebox.items.services.gateways import get_user


class SharerUserIdAuthentication(authentication.BaseAuthentication):
    """
    Resolve the acting user from the `X-Sharer-User-Id` header.

    No header -> fall through to the next authenticator (JWT).
    A header that is not an integer -> 400; an id with no user -> 404
    (`UserNotFound`), matching what the service layer reports.
    """

    def authenticate(self, request):
        header = getattr(settings, "SHAREBOX_USER_ID_HEADER", "X-Sharer-User-Id")
        raw = request.headers.get(header)
        if raw is None or raw == "":
            return None

        try:
            user_id = int(raw)
        except (TypeError, ValueError):
            raise exceptions.ValidationError({header: "Must be an integer user id."})

        return get_user(user_id), None

    def authenticate_header(self, request):
        return getattr(settings, "SHAREBOX_USER_ID_HEADER", "X-Sharer-User-Id")
