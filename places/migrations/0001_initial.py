import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Place",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("city", models.CharField(choices=[("melbourne", "Melbourne"), ("sydney", "Sydney"), ("brisbane", "Brisbane")], default="melbourne", max_length=20)),
                ("addresses", models.JSONField(default=list)),
                ("category", models.CharField(choices=[("cafe", "Cafe"), ("restaurant", "Restaurant")], default="cafe", max_length=20)),
                ("coffee_by", models.CharField(blank=True, max_length=100, null=True)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("note_en", models.TextField(blank=True, null=True)),
                ("note_ko", models.TextField(blank=True, null=True)),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
                ("instagram_url", models.URLField(blank=True, max_length=500, null=True)),
                ("reels_url", models.URLField(blank=True, max_length=500, null=True)),
                ("tiktok_url", models.URLField(blank=True, max_length=500, null=True)),
                ("is_public", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["is_public", "created_at"], name="places_public_created_idx")],
            },
        ),
    ]
