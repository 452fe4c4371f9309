from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("hotel_room", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Company",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("street_address", models.CharField(blank=True, default="", max_length=255)),
                ("contact_no", models.CharField(blank=True, default="", max_length=100)),
                ("currency_symbol", models.CharField(default="RM", max_length=10)),
                ("active", models.BooleanField(default=True)),
            ],
            options={
                "db_table": "frontdesk_company",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("guest_name", models.CharField(max_length=255)),
                ("guest_passport", models.CharField(max_length=100)),
                ("guest_origin", models.CharField(blank=True, default="", max_length=100)),
                ("guest_contact", models.CharField(blank=True, default="", max_length=100)),
                ("guest_emergency_contact_name", models.CharField(blank=True, default="", max_length=255)),
                ("guest_emergency_contact_no", models.CharField(blank=True, default="", max_length=100)),
                ("total_guest", models.PositiveSmallIntegerField()),
                ("stay_duration", models.PositiveSmallIntegerField()),
                ("booking_date", models.DateTimeField()),
                ("guest_check_in", models.DateTimeField()),
                ("guest_check_out", models.DateTimeField()),
                ("remarks", models.TextField(blank=True, default="")),
                ("room_no", models.CharField(max_length=50)),
                ("room_type", models.CharField(max_length=50)),
                ("room_location", models.CharField(max_length=100)),
                ("room_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("breakfast", models.BooleanField(default=False)),
                ("breakfast_price", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("sub_total", models.DecimalField(decimal_places=2, max_digits=10)),
                ("deposit", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("payment", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("refund", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("active", models.BooleanField(default=True)),
                ("created_by", models.CharField(max_length=50)),
                ("created_date", models.DateTimeField()),
                ("last_modified_by", models.CharField(blank=True, default="", max_length=50)),
                ("last_modified_date", models.DateTimeField(blank=True, null=True)),
                (
                    "room",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="bookings",
                        to="hotel_room.room",
                    ),
                ),
            ],
            options={
                "db_table": "frontdesk_bookings",
                "ordering": ["-id"],
                "indexes": [
                    models.Index(fields=["active", "created_date"], name="idx_booking_active_created"),
                    models.Index(fields=["guest_passport"], name="idx_booking_guest_passport"),
                ],
            },
        ),
    ]
