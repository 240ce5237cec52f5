from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Custom User model; is_staff doubles as the admin role"""
    email = models.EmailField(unique=True)
    picture_url = models.CharField(max_length=500, blank=True, default='')
    bookmarks = models.ManyToManyField('places.Place', blank=True, related_name='bookmarked_by')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.username or f"User {self.id}"

    @property
    def is_admin(self):
        return self.is_staff

    @property
    def points_total(self):
        """Current balance held by the user's points account (0 before one exists)"""
        account = getattr(self, 'points_account', None)
        return account.total_points if account is not None else 0
