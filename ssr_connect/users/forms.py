from django.contrib.auth import forms as admin_forms
from django.forms import EmailField
from django.utils.translation import gettext_lazy as _

from ssr_connect.core.roles import Role
from ssr_connect.core.roles import role_for_email

from .models import User


class UserAdminChangeForm(admin_forms.UserChangeForm):
    class Meta(admin_forms.UserChangeForm.Meta):  # type: ignore[name-defined]
        model = User
        field_classes = {"email": EmailField}


class UserAdminCreationForm(admin_forms.AdminUserCreationForm):
    """
    Form for user creation in the admin area.
    The role follows from the email domain when the user is saved.
    """

    class Meta(admin_forms.UserCreationForm.Meta):  # type: ignore[name-defined]
        model = User
        fields = ("email", "first_name")
        field_classes = {"email": EmailField}
        error_messages = {
            "email": {"unique": _("This email has already been taken.")},
        }

    def save(self, commit=True):
        user = super().save(commit=False)
        user.role = role_for_email(user.email)
        user.is_staff = user.role in (Role.ADMIN, Role.MENTOR)
        if commit:
            user.save()
        return user
