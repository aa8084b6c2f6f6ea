import uuid


def new_id() -> str:
    return str(uuid.uuid4())


def is_valid_id(value) -> bool:
    """True when value is a string holding a canonical UUID"""
    if not isinstance(value, str):
        return False
    try:
        return str(uuid.UUID(value)) == value.lower()
    except ValueError:
        return False
