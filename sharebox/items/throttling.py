from django.core.exceptions import ImproperlyConfigured
from rest_framework.settings import api_settings
from rest_framework.throttling import ScopedRateThrottle


class ScopedRateThrottleIsolated(ScopedRateThrottle):
    """
    Include the resolved rate in the cache key to avoid collisions
    when tests or environments override DEFAULT_THROTTLE_RATES.
    """
    def get_rate(self):
        # Read rates at request time so overridden settings take effect
        try:
            return api_settings.DEFAULT_THROTTLE_RATES[self.scope]
        except KeyError:
            raise ImproperlyConfigured(f"No default throttle rate set for '{self.scope}' scope")

    def get_cache_key(self, request, view):
        key = super().get_cache_key(request, view)
        if key is None:
            return None
        return f"{key}:{self.get_rate() or 'none'}"
