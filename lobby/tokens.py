import secrets


def generate_token(nbytes=32):
    """Return a URL-safe random token suitable for confirmation links."""
    return secrets.token_urlsafe(nbytes)
