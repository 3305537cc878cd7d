"""Handler registry for JoyDoc.

Handlers take a JoyDocValidator and an argument dict and return a
JSON-serialisable dict.
"""

from joydoc.handlers import validation


# Unified handler registry
HANDLERS = {
    **validation.HANDLERS,
}


def get_handler(name: str):
    """Get a handler function by name.

    Args:
        name: The handler name to look up

    Returns:
        The handler function, or None if not found
    """
    return HANDLERS.get(name)


def list_handlers() -> list[str]:
    """List all registered handler names."""
    return list(HANDLERS.keys())
