from . import transactions  # noqa: F401
