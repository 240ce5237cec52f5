from django.urls import path
from . import views

app_name = 'places'

urlpatterns = [
    path('', views.PlaceListView.as_view(), name='list'),
    path('admin/all/', views.AdminPlaceListView.as_view(), name='admin_all'),
    path('bookmarks/me/', views.BookmarkListView.as_view(), name='bookmarks'),
    path('<int:place_id>/', views.PlaceDetailView.as_view(), name='detail'),
    path('<int:place_id>/bookmark/', views.PlaceBookmarkView.as_view(), name='bookmark'),
    path('<int:place_id>/redeem/', views.PlaceRedeemView.as_view(), name='redeem'),
]
