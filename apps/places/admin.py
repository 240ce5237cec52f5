from django.contrib import admin
from .models import Place


@admin.register(Place)
class PlaceAdmin(admin.ModelAdmin):
    list_display = ['name', 'latitude', 'longitude', 'redemption_eligible', 'redemption_points_cost', 'created_at']
    list_filter = ['redemption_eligible', 'created_at']
    search_fields = ['name', 'description']
    list_editable = ['redemption_eligible']
    readonly_fields = ['created_at', 'updated_at']
