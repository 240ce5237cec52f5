from django.urls import path
from . import views

app_name = 'rewards'

urlpatterns = [
    path('', views.RewardListView.as_view(), name='list'),
    path('admin/all/', views.AdminRewardListView.as_view(), name='admin_all'),
    path('redemptions/<int:redemption_id>/use/', views.RedemptionUseView.as_view(), name='redemption_use'),
    path('<int:reward_id>/', views.RewardDetailView.as_view(), name='detail'),
    path('<int:reward_id>/redeem/', views.RewardRedeemView.as_view(), name='redeem'),
]
