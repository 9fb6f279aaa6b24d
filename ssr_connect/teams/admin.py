from django.contrib import admin

from .models import Team
from .models import TeamMember


class TeamMemberInline(admin.TabularInline):
    model = TeamMember
    extra = 0
    fields = ["name", "email", "roll_number", "role", "user"]
    raw_id_fields = ["user"]


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ["team_number", "project_title", "batch", "pillar", "leader", "mentor", "status", "created"]
    list_filter = ["status", "batch", "pillar"]
    search_fields = ["team_number", "project_title", "leader__email", "mentor__email"]
    readonly_fields = ["status"]
    raw_id_fields = ["leader", "mentor"]
    inlines = [TeamMemberInline]
    ordering = ["-created"]


@admin.register(TeamMember)
class TeamMemberAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "roll_number", "role", "team"]
    list_filter = ["role"]
    search_fields = ["name", "email", "roll_number", "team__team_number"]
