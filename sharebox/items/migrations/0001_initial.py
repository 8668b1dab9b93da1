import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ItemRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("description", models.TextField()),
                ("created", models.DateTimeField()),
                ("requestor", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="item_requests",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "ordering": ["-created", "-id"],
            },
        ),
        migrations.CreateModel(
            name="Item",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("available", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("owner", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="items",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("request", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="items",
                    to="items.itemrequest",
                )),
            ],
            options={
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["owner", "id"], name="item_owner_idx"),
                    models.Index(fields=["available"], name="item_available_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("start", models.DateTimeField()),
                ("end", models.DateTimeField()),
                ("status", models.CharField(
                    choices=[("WAITING", "Waiting"), ("APPROVED", "Approved"), ("REJECTED", "Rejected")],
                    default="WAITING",
                    max_length=10,
                )),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("booker", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="bookings",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("item", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="bookings",
                    to="items.item",
                )),
            ],
            options={
                "ordering": ["-start", "-id"],
                "indexes": [
                    models.Index(fields=["booker", "start"], name="booking_booker_start_idx"),
                    models.Index(fields=["item", "status", "start"], name="booking_item_status_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("text", models.TextField()),
                ("created", models.DateTimeField()),
                ("author", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="comments",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("item", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="comments",
                    to="items.item",
                )),
            ],
            options={
                "ordering": ["created", "id"],
                "indexes": [
                    models.Index(fields=["item", "created"], name="comment_item_created_idx"),
                ],
            },
        ),
    ]
