"""Settings read by the store, with the defaults used when a project omits them."""

from django.conf import settings

DEFAULTS = {
    "SNAPSHARE_SEED_DEMO_DATA": False,
    "SNAPSHARE_UNIQUE_LIKES": True,
    "SNAPSHARE_UNKNOWN_USERNAME": "Unknown",
    "SNAPSHARE_UPLOAD_DIR": "uploads",
    "SNAPSHARE_DEMO_PASSWORD": "demo123",
}


def get_setting(name):
    """Return a SNAPSHARE_* setting, falling back to its default."""
    return getattr(settings, name, DEFAULTS[name])
