import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=200)),
                ("slug", models.CharField(max_length=255, unique=True)),
                ("description", models.CharField(max_length=2000)),
                ("overview", models.CharField(max_length=500)),
                ("image", models.TextField()),
                ("venue", models.TextField()),
                ("location", models.TextField()),
                ("date", models.CharField(max_length=10)),
                ("time", models.CharField(max_length=5)),
                (
                    "mode",
                    models.CharField(
                        choices=[
                            ("online", "Online"),
                            ("offline", "Offline"),
                            ("hybrid", "Hybrid"),
                        ],
                        max_length=10,
                    ),
                ),
                ("audience", models.TextField()),
                ("agenda", models.JSONField(default=list)),
                ("organizer", models.TextField()),
                ("tags", models.JSONField(default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="events_created_at_idx"),
                ],
            },
        ),
    ]
