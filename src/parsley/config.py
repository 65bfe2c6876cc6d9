"""Parse options for Parsley.

One process-wide options record is read by every ``parse()`` call that does
not pass its own. It is replaced, never mutated, so a parse that already
captured the record is unaffected by a later ``set_options()``.

Thread Safety:
    Reads are safe from any thread. Writers (``set_options``,
    ``reset_options``, ``options_context``) are not synchronised; callers
    serialise option changes relative to in-flight parses. Code that needs
    different settings concurrently should pass ``options=`` explicitly or
    use a ``Markdown`` instance, which owns its own record.

Usage:
    from parsley import parse, set_options

    set_options(breaks=True)
    html = parse("line one\\nline two")

    # Temporary override (restored on exit)
    with options_context(breaks=False):
        html = parse("line one\\nline two")

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace

from parsley.errors import OptionsError
from parsley.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Immutable parse options.

    Attributes:
        gfm: GitHub-flavoured extensions. Kept for interface compatibility;
            tables, strikethrough, task lists and autolinks are always on.
        breaks: Render single newlines inside a paragraph as ``<br>``.

    """

    gfm: bool = True
    breaks: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, object]) -> ParseOptions:
        """Create ParseOptions from a dictionary.

        Unknown keys are ignored (and logged); recognised keys must be bools.

        Example:
            >>> ParseOptions.from_dict({"breaks": True, "sanitize": True}).breaks
            True

        """
        return _DEFAULT_OPTIONS.merge(config_dict)

    def merge(self, overrides: Mapping[str, object]) -> ParseOptions:
        """Return a copy with ``overrides`` applied on top of this record."""
        valid = {f.name for f in fields(self)}
        accepted: dict[str, bool] = {}
        for key, value in overrides.items():
            if key not in valid:
                logger.warning("Ignoring unknown parse option %r", key)
                continue
            if not isinstance(value, bool):
                raise OptionsError(key, value)
            accepted[key] = value
        if not accepted:
            return self
        return replace(self, **accepted)

    def to_dict(self) -> dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Module-level default (reused, never recreated)
_DEFAULT_OPTIONS: ParseOptions = ParseOptions()

_options: ParseOptions = _DEFAULT_OPTIONS


def get_options() -> ParseOptions:
    """Get the process-wide options record."""
    return _options


def set_options(options: Mapping[str, object] | None = None, **overrides: object) -> ParseOptions:
    """Merge options into the process-wide record.

    Keys given both positionally and as keywords take the keyword value.
    Keys not mentioned keep their current value; nothing is reset between
    calls.

    Args:
        options: Mapping of option names to values
        **overrides: Option values as keyword arguments

    Returns:
        The new process-wide ParseOptions

    Raises:
        OptionsError: A recognised option was given a non-bool value

    Example:
        >>> set_options({"breaks": True}).breaks
        True
        >>> set_options(gfm=False).breaks
        True

    """
    global _options
    merged: dict[str, object] = dict(options or {})
    merged.update(overrides)
    _options = _options.merge(merged)
    logger.debug("Parse options set to %s", _options.to_dict())
    return _options


def reset_options() -> None:
    """Restore the default options record."""
    global _options
    _options = _DEFAULT_OPTIONS


@contextmanager
def options_context(**overrides: object) -> Iterator[ParseOptions]:
    """Context manager for temporary option changes.

    Useful for tests and isolated conversions.

    Yields:
        The ParseOptions active inside the block

    Example:
        >>> with options_context(breaks=True) as opts:
        ...     opts.breaks
        True

    """
    global _options
    previous = _options
    _options = previous.merge(overrides)
    try:
        yield _options
    finally:
        _options = previous


__all__ = [
    "ParseOptions",
    "get_options",
    "set_options",
    "reset_options",
    "options_context",
]
