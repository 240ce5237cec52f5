from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ['username', 'email', 'points_total', 'is_staff', 'is_active', 'created_at']
    list_filter = ['is_staff', 'is_active', 'created_at']
    search_fields = ['username', 'email']
    filter_horizontal = ['bookmarks', 'groups', 'user_permissions']
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Profile', {'fields': ('picture_url', 'bookmarks')}),
    )
