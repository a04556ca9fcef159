from itertools import count

from snapshare.client import SnapshareClient

_sequence = count(1)


def make_client(**kwargs):
    """Return an isolated client with an empty store."""
    return SnapshareClient(**kwargs)


def make_user(client, **kwargs):
    """Sign up a user through the client and return it; leaves that user signed in."""
    number = next(_sequence)
    email = kwargs.pop("email", f"user{number}@example.org")
    password = kwargs.pop("password", "Password123")
    username = kwargs.pop("username", f"user{number}")
    result = client.sign_up(email, password, username)
    assert result.error is None, result.error
    return result.data["user"]


def make_post(client, user, *, image_url="https://example.org/photo.jpg", caption="test post"):
    """Create and return a post owned by ``user``."""
    result = client.create_post(user.id, image_url, caption)
    assert result.error is None, result.error
    return result.data
