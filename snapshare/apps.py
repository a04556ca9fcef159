from django.apps import AppConfig


class SnapshareConfig(AppConfig):
    """Django app config for snapshare; exposes the seed management command."""
    name = "snapshare"
    verbose_name = "SnapShare store"
