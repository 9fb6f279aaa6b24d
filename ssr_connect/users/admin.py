from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _

from .forms import UserAdminChangeForm
from .forms import UserAdminCreationForm
from .models import MentorVerification
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    form = UserAdminChangeForm
    add_form = UserAdminCreationForm
    fieldsets = (
        (None, {"fields": ("email", "password")}),
        (_("Personal info"), {"fields": ("first_name", "last_name", "roll_number", "phone")}),
        (_("Portal"), {"fields": ("role", "is_registered", "can_login")}),
        (
            _("Permissions"),
            {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")},
        ),
        (_("Important dates"), {"fields": ("last_login", "date_joined")}),
    )
    add_fieldsets = (
        (None, {"classes": ("wide",), "fields": ("email", "first_name", "password1", "password2")}),
    )
    readonly_fields = ["role"]
    list_display = ["email", "first_name", "last_name", "role", "is_registered", "can_login"]
    list_filter = ["role", "is_registered", "can_login", "is_staff"]
    search_fields = ["email", "first_name", "last_name", "roll_number"]
    ordering = ["email"]


@admin.register(MentorVerification)
class MentorVerificationAdmin(admin.ModelAdmin):
    list_display = ["email", "first_name", "last_name", "created"]
    search_fields = ["email", "first_name", "last_name"]
