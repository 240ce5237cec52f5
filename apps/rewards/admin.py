from django.contrib import admin
from .models import Reward, RewardRedemption


@admin.register(Reward)
class RewardAdmin(admin.ModelAdmin):
    list_display = ['name', 'type', 'points_cost', 'is_active', 'valid_until', 'created_at']
    list_filter = ['type', 'is_active', 'created_at']
    search_fields = ['name', 'short_description']
    list_editable = ['is_active']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(RewardRedemption)
class RewardRedemptionAdmin(admin.ModelAdmin):
    list_display = ['user', 'name', 'points_cost', 'redeemed_at', 'used', 'used_at']
    list_filter = ['used', 'redeemed_at']
    search_fields = ['user__username', 'name']
    readonly_fields = ['user', 'reward', 'name', 'short_description', 'points_cost', 'redeemed_at']

    def has_add_permission(self, request):
        return False  # Redemptions are created by RewardRedemptionService
