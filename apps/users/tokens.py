from rest_framework_simplejwt.tokens import AccessToken, BlacklistMixin


class BlacklistableAccessToken(BlacklistMixin, AccessToken):
    """Access token that stops authenticating once logout blacklists it"""
