from app.logging.logger import Log

# role code -> category codes offered to that role; the first is the default
ROLE_CATEGORY_OPTIONS: dict[str, tuple[str, ...]] = {
    "STATION_CTRL": ("INCIDENT", "SAFETY", "TRAINING"),
    "ROLLING_STOCK": ("MAINTENANCE", "TRAINING"),
    "PROCUREMENT": ("PROCUREMENT", "FINANCIAL"),
    "HR": ("HR_POLICY", "TRAINING"),
    "SAFETY": ("REGULATORY", "SAFETY"),
    "EXECUTIVE": ("INCIDENT", "REGULATORY", "FINANCIAL"),
}


def resolve_category_code(role_code: str, requested: str | None = None) -> str | None:
    """Pick the category for an upload made under ``role_code``.

    An explicit choice is honoured when the role offers it; otherwise the
    role's default is used. Roles without options get no category.
    """
    options = ROLE_CATEGORY_OPTIONS.get(role_code, ())
    if requested is not None:
        if requested in options:
            return requested
        Log.warning(f"Category '{requested}' is not offered to role {role_code}, using default")
    return options[0] if options else None
