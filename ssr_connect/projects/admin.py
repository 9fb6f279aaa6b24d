from django.contrib import admin

from .models import Attachment
from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ["title", "team", "status", "location_type", "city", "modified"]
    list_filter = ["status", "location_type"]
    search_fields = ["title", "team__team_number", "team__project_title"]
    raw_id_fields = ["team"]


@admin.register(Attachment)
class AttachmentAdmin(admin.ModelAdmin):
    list_display = ["original_filename", "owner", "content_type", "size", "created"]
    search_fields = ["original_filename", "owner__email"]
    readonly_fields = ["size", "content_type"]
    raw_id_fields = ["owner"]
