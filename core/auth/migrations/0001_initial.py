from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StaffUser",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.CharField(db_index=True, max_length=50, unique=True)),
                ("display_name", models.CharField(max_length=255)),
                (
                    "group",
                    models.PositiveSmallIntegerField(
                        choices=[
                            (1, "Administrator"),
                            (2, "Manager"),
                            (3, "Supervisor"),
                            (4, "Clerk"),
                        ],
                    ),
                ),
                ("password_hash", models.CharField(max_length=255)),
                ("idle_seconds", models.PositiveIntegerField(default=0)),
                ("login_attempts", models.PositiveSmallIntegerField(default=0)),
                ("active", models.BooleanField(default=True)),
                ("change_password", models.BooleanField(default=True)),
                ("dashboard_blink", models.BooleanField(default=False)),
                ("created_by", models.CharField(blank=True, default="", max_length=50)),
                ("created_date", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "db_table": "frontdesk_staff_users",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="ModuleAccess",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("module_id", models.PositiveSmallIntegerField(unique=True)),
                ("description", models.CharField(max_length=255)),
                ("module_type", models.CharField(default="Form", max_length=50)),
                ("group1", models.BooleanField(default=False)),
                ("group2", models.BooleanField(default=False)),
                ("group3", models.BooleanField(default=False)),
                ("group4", models.BooleanField(default=False)),
                ("active", models.BooleanField(default=True)),
            ],
            options={
                "db_table": "frontdesk_module_access",
                "ordering": ["module_id"],
            },
        ),
    ]
