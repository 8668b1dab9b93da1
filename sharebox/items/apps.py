from django.apps import AppConfig


class ItemsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "sharebox.items"
    label = "items"
    verbose_name = "Items & bookings"
