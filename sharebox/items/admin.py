import logging

from django.contrib import admin

from .models import Item, Booking, Comment, ItemRequest

logger = logging.getLogger(__name__)


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'owner', 'available', 'request', 'created_at')
    list_filter = ('available', 'created_at')
    date_hierarchy = 'created_at'
    search_fields = ('id', 'name', 'description', 'owner__email')
    autocomplete_fields = ('owner', 'request')
    readonly_fields = ('created_at', 'updated_at')
    ordering = ('id',)
    list_select_related = ('owner', 'request')


def _decide(request, qs, target):
    # Only WAITING bookings may change; decided ones are left as they are
    updated = qs.filter(status=Booking.WAITING).update(status=target)
    logger.info("Admin %s set %s booking(s) to %s", request.user.pk, updated, target)


@admin.action(description="Approve selected WAITING bookings")
def approve_bookings(modeladmin, request, qs):
    _decide(request, qs, Booking.APPROVED)


@admin.action(description="Reject selected WAITING bookings")
def reject_bookings(modeladmin, request, qs):
    _decide(request, qs, Booking.REJECTED)


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        'id', 'item', 'item_owner_email', 'booker_email',
        'status', 'start', 'end', 'created_at'
    )
    list_filter = ('status', 'start', 'end', 'created_at')
    date_hierarchy = 'start'
    search_fields = ('item__name', 'item__owner__email', 'booker__email')
    autocomplete_fields = ('item', 'booker')
    ordering = ('-start', '-id')
    list_select_related = ('item', 'item__owner', 'booker')
    actions = (approve_bookings, reject_bookings)

    @admin.display(ordering='item__owner__email', description='Owner')
    def item_owner_email(self, obj):
        owner = getattr(obj.item, 'owner', None)
        return getattr(owner, 'email', None)

    @admin.display(ordering='booker__email', description='Booker')
    def booker_email(self, obj):
        booker = getattr(obj, 'booker', None)
        return getattr(booker, 'email', None)


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ('id', 'item', 'author', 'created')
    list_filter = ('created',)
    date_hierarchy = 'created'
    search_fields = ('text', 'item__name', 'author__email')
    autocomplete_fields = ('item', 'author')
    list_select_related = ('item', 'author')


@admin.register(ItemRequest)
class ItemRequestAdmin(admin.ModelAdmin):
    list_display = ('id', 'requestor', 'created')
    list_filter = ('created',)
    search_fields = ('description', 'requestor__email')
    autocomplete_fields = ('requestor',)
    ordering = ('-created', '-id')
    list_select_related = ('requestor',)
