import uuid


def generate_uuid() -> str:
    return str(uuid.uuid4())


def generate_token() -> str:
    """Opaque, URL-safe single-use token: a random UUID with the separators stripped."""
    return uuid.uuid4().hex
