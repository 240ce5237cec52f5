from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    path('profile/', views.UserProfileView.as_view(), name='profile'),
    path('leaderboard/', views.LeaderboardView.as_view(), name='leaderboard'),
    path('<int:user_id>/rewards/', views.UserRewardHistoryView.as_view(), name='reward_history'),
]
