from django import forms
from django.contrib import admin
from django.utils.html import format_html
from django.utils.translation import gettext
from django.utils.translation import gettext_lazy as _

from .errors import INVALID_TAGS, error_message
from .models import Place
from .services import invalidate_place_views
from .validators import is_tag_input, parse_addresses, parse_tags


class PlaceAdminForm(forms.ModelForm):
    """관리자 화면 저장도 API 와 같은 주소/태그 규칙을 따른다."""

    class Meta:
        model = Place
        fields = "__all__"

    def clean_addresses(self):
        addresses, error = parse_addresses(self.cleaned_data.get("addresses"))
        if error:
            raise forms.ValidationError(error_message(error), code=error)
        return addresses

    def clean_tags(self):
        tags = self.cleaned_data.get("tags")
        if tags is None:
            return []
        if not is_tag_input(tags):
            raise forms.ValidationError(error_message(INVALID_TAGS), code=INVALID_TAGS)
        return parse_tags(tags)


@admin.register(Place)
class PlaceAdmin(admin.ModelAdmin):
    form = PlaceAdminForm
    list_display = ("name", "category", "city", "primary_address", "coffee_by", "is_public", "image_preview", "created_at")
    list_filter = ("category", "city", "is_public")
    search_fields = ("name", "coffee_by")
    readonly_fields = ("id", "created_at", "updated_at")
    actions = ["make_public", "make_private"]

    def image_preview(self, obj):
        if obj.image_url:
            return format_html('<img src="{}" style="max-height: 60px;"/>', obj.image_url)
        return "-"
    image_preview.short_description = _("Image")

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        invalidate_place_views()

    def delete_model(self, request, obj):
        super().delete_model(request, obj)
        invalidate_place_views()

    def delete_queryset(self, request, queryset):
        super().delete_queryset(request, queryset)
        invalidate_place_views()

    def make_public(self, request, queryset):
        updated = queryset.update(is_public=True)
        invalidate_place_views()
        self.message_user(request, gettext("%(count)d place(s) published.") % {"count": updated})
    make_public.short_description = _("Publish selected places")

    def make_private(self, request, queryset):
        updated = queryset.update(is_public=False)
        invalidate_place_views()
        self.message_user(request, gettext("%(count)d place(s) hidden.") % {"count": updated})
    make_private.short_description = _("Hide selected places")
