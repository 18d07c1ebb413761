"""Normalizers shared by the Settings field validators."""


def to_uppercase(value: str | None) -> str | None:
    """Strip and upper-case a raw env value, passing None through."""
    if value is None:
        return None
    return value.strip().upper()


def to_lowercase(value: str | None) -> str | None:
    """Strip and lower-case a raw env value, passing None through."""
    if value is None:
        return None
    return value.strip().lower()
