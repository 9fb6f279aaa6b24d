from django.contrib import admin

from .models import Proposal


@admin.register(Proposal)
class ProposalAdmin(admin.ModelAdmin):
    list_display = ["title", "team", "author", "state", "reviewed_by", "reviewed_at", "created"]
    list_filter = ["state"]
    search_fields = ["title", "team__team_number", "author__email"]
    readonly_fields = ["state", "reviewed_at", "reviewed_by"]
    raw_id_fields = ["team", "author"]
    ordering = ["-created"]
