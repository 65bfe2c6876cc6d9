"""Exception classes for Parsley.

Parsing never raises for Markdown input: malformed constructs degrade to the
next interpretation in line. These exceptions cover misuse of the API.
"""

from __future__ import annotations


class ParsleyError(Exception):
    """Base exception for all Parsley errors.

    Subclass this for specific error categories.
    """

    pass


class OptionsError(ParsleyError, ValueError):
    """Invalid value supplied for a parse option.

    Raised by ``set_options``, ``ParseOptions.merge`` and the ``Markdown``
    constructor when a recognised option receives a value of the wrong type.
    """

    def __init__(self, key: str, value: object, message: str | None = None) -> None:
        """Initialize options error.

        Args:
            key: Name of the offending option
            value: The rejected value
            message: Optional description (defaults to a type complaint)
        """
        self.key = key
        self.value = value
        detail = message or f"expected bool, got {type(value).__name__}"
        super().__init__(f"Option '{key}': {detail}")


class RenderError(ParsleyError):
    """Error during HTML rendering.

    Raised when the renderer is handed an object that is not a known AST
    node, which only happens with hand-built trees.
    """

    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"Cannot render node of type {type(node).__name__}")
