from django.contrib import admin
from .models import PointsAccount, PointsTransaction


@admin.register(PointsAccount)
class PointsAccountAdmin(admin.ModelAdmin):
    list_display = ['user', 'total_points', 'lifetime_earned', 'lifetime_redeemed', 'updated_at']
    list_filter = ['created_at', 'updated_at']
    search_fields = ['user__username', 'user__email']
    readonly_fields = ['total_points', 'lifetime_earned', 'lifetime_redeemed', 'created_at', 'updated_at']

    def has_add_permission(self, request):
        return False  # Points accounts are created automatically


@admin.register(PointsTransaction)
class PointsTransactionAdmin(admin.ModelAdmin):
    list_display = ['account', 'transaction_type', 'amount', 'balance_after', 'reason', 'created_at']
    list_filter = ['transaction_type', 'created_at']
    search_fields = ['account__user__username', 'reason', 'reference_id']
    readonly_fields = ['created_at']

    def has_add_permission(self, request):
        return False  # Ledger entries are written by PointsAccount.apply_delta

    def has_change_permission(self, request, obj=None):
        return False  # Ledger entries are immutable

    def has_delete_permission(self, request, obj=None):
        return False
