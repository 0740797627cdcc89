import uuid

from django.db import models


class Place(models.Model):
    class City(models.TextChoices):
        MELBOURNE = "melbourne", "Melbourne"
        SYDNEY = "sydney", "Sydney"
        BRISBANE = "brisbane", "Brisbane"

    class Category(models.TextChoices):
        CAFE = "cafe", "Cafe"
        RESTAURANT = "restaurant", "Restaurant"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    city = models.CharField(max_length=20, choices=City.choices, default=City.MELBOURNE)
    # [{"address": str, "latitude": float, "longitude": float}, ...] 첫 항목이 대표 주소
    addresses = models.JSONField(default=list)
    category = models.CharField(max_length=20, choices=Category.choices, default=Category.CAFE)
    coffee_by = models.CharField(max_length=100, blank=True, null=True)
    tags = models.JSONField(default=list, blank=True)
    note_en = models.TextField(blank=True, null=True)
    note_ko = models.TextField(blank=True, null=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    instagram_url = models.URLField(max_length=500, blank=True, null=True)
    reels_url = models.URLField(max_length=500, blank=True, null=True)
    tiktok_url = models.URLField(max_length=500, blank=True, null=True)
    is_public = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_public", "created_at"], name="places_public_created_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.category})"

    @property
    def primary_address(self):
        if self.addresses:
            return self.addresses[0].get("address", "")
        return ""

    @property
    def latitude(self):
        if self.addresses:
            return self.addresses[0].get("latitude")
        return None

    @property
    def longitude(self):
        if self.addresses:
            return self.addresses[0].get("longitude")
        return None
