import logging

from rest_framework import viewsets, permissions
from rest_framework_simplejwt.views import TokenObtainPairView as BaseTokenObtainPairView
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiResponse

from sharebox.items.exceptions import Forbidden
from sharebox.items.services.gateways import get_user
from sharebox.items.throttling import ScopedRateThrottleIsolated
from .models import CustomUser
from .serializers import UserSerializer

logger = logging.getLogger(__name__)


class ThrottledTokenObtainPairView(BaseTokenObtainPairView):
    throttle_classes = (ScopedRateThrottleIsolated,)
    throttle_scope = 'auth_login'


@extend_schema(tags=["users"])
@extend_schema_view(
    list=extend_schema(summary="List users"),
    retrieve=extend_schema(
        summary="Retrieve user",
        responses={200: UserSerializer, 404: OpenApiResponse(description="User not found")},
    ),
    create=extend_schema(summary="Register user", auth=[]),
    partial_update=extend_schema(
        summary="Partial update user (self only)",
        responses={200: UserSerializer, 404: OpenApiResponse(description="User not found or not your account")},
    ),
    destroy=extend_schema(summary="Delete user (self only)"),
)
class UserViewSet(viewsets.ModelViewSet):
    queryset = CustomUser.objects.order_by('id')
    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']
    lookup_value_regex = r"\d+"

    def get_permissions(self):
        if self.action == 'create':
            return [permissions.AllowAny()]
        return super().get_permissions()

    def get_object(self):
        user = get_user(int(self.kwargs['pk']))
        if self.action in ('partial_update', 'destroy') and user.pk != self.request.user.pk:
            raise Forbidden(f"User id={self.request.user.pk} cannot modify user id={user.pk}.")
        return user

    def perform_create(self, serializer):
        user = serializer.save()
        logger.info("Registered user id=%s", user.id)

    def perform_destroy(self, instance):
        logger.info("Deleting user id=%s", instance.id)
        instance.delete()
