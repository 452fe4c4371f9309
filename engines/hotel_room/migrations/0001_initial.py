from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="RoomType",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("short_name", models.CharField(max_length=50, unique=True)),
                ("long_name", models.CharField(blank=True, default="", max_length=255)),
                ("active", models.BooleanField(default=True)),
            ],
            options={
                "db_table": "frontdesk_room_types",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Room",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("short_name", models.CharField(max_length=50)),
                ("long_name", models.CharField(blank=True, default="", max_length=255)),
                ("room_type", models.CharField(max_length=50)),
                ("location", models.CharField(max_length=100)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("breakfast", models.BooleanField(default=False)),
                ("breakfast_price", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Open", "Open"),
                            ("Booked", "Booked"),
                            ("Occupied", "Occupied"),
                            ("Housekeeping", "Housekeeping"),
                            ("Maintenance", "Maintenance"),
                        ],
                        default="Open",
                        max_length=20,
                    ),
                ),
                ("booking_id", models.IntegerField(default=0)),
                ("active", models.BooleanField(default=True)),
                ("created_by", models.CharField(max_length=50)),
                ("created_date", models.DateTimeField()),
                ("last_modified_by", models.CharField(blank=True, default="", max_length=50)),
                ("last_modified_date", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "db_table": "frontdesk_rooms",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["active", "status"], name="idx_room_active_status"),
                ],
            },
        ),
    ]
