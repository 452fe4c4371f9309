from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LogBooking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("booking_id", models.IntegerField(db_index=True)),
                ("guest_name", models.CharField(max_length=255)),
                ("guest_passport", models.CharField(max_length=100)),
                ("action", models.CharField(max_length=255)),
                ("created_by", models.CharField(max_length=50)),
                ("created_date", models.DateTimeField()),
            ],
            options={
                "db_table": "frontdesk_log_booking",
                "ordering": ["created_date", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="LogRoom",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("room_id", models.IntegerField(db_index=True)),
                ("booking_id", models.IntegerField(default=0)),
                ("room_short_name", models.CharField(max_length=50)),
                ("room_status", models.CharField(max_length=20)),
                ("action", models.CharField(max_length=255)),
                ("created_by", models.CharField(max_length=50)),
                ("created_date", models.DateTimeField()),
            ],
            options={
                "db_table": "frontdesk_log_room",
                "ordering": ["created_date", "id"],
                "abstract": False,
            },
        ),
    ]
