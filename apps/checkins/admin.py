from django.contrib import admin
from .models import Checkin


@admin.register(Checkin)
class CheckinAdmin(admin.ModelAdmin):
    list_display = ['user', 'place', 'distance', 'checkin_date', 'timestamp']
    list_filter = ['checkin_date']
    search_fields = ['user__username', 'place__name']
    readonly_fields = ['user', 'place', 'longitude', 'latitude', 'distance', 'checkin_date', 'timestamp']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
