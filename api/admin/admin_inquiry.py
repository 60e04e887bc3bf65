from django.contrib import admin

from api.models.models_inquiry import FollowUp, Inquiry


class FollowUpInline(admin.TabularInline):
    """Existing follow-ups are shown read-only; new ones can still be added."""

    model = FollowUp
    extra = 0
    can_delete = False
    fields = ("note", "next_follow_up_date", "created_at")
    readonly_fields = ("created_at",)
    ordering = ("-created_at", "-id")

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(Inquiry)
class InquiryAdmin(admin.ModelAdmin):
    list_display = ("reference_code", "name", "phone", "service_type", "status", "follow_up_count", "created_at")
    list_display_links = ("reference_code", "name")
    list_filter = ("status", "service_type", "created_at")
    list_editable = ("status",)
    search_fields = ("reference_code", "name", "phone", "email")
    readonly_fields = ("reference_code", "name", "phone", "email", "service_type", "message", "created_at", "updated_at")
    inlines = [FollowUpInline]

    fieldsets = (
        (None, {
            "fields": ("reference_code", "status", "created_at", "updated_at"),
        }),
        ("Contact", {
            "fields": ("name", "phone", "email"),
        }),
        ("Request", {
            "fields": ("service_type", "message"),
        }),
    )

    def follow_up_count(self, obj):
        return obj.follow_ups.count()
    follow_up_count.short_description = "Follow-ups"

    def has_add_permission(self, request):
        return False  # Inquiries come from the public form


@admin.register(FollowUp)
class FollowUpAdmin(admin.ModelAdmin):
    list_display = ("inquiry", "short_note", "next_follow_up_date", "created_at")
    list_filter = ("next_follow_up_date", "created_at")
    search_fields = ("note", "inquiry__reference_code")
    autocomplete_fields = ("inquiry",)
    readonly_fields = ("created_at", "updated_at")

    def short_note(self, obj):
        return obj.note if len(obj.note) <= 60 else f"{obj.note[:57]}..."
    short_note.short_description = "Note"

    # Follow-ups are append-only once written
    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
