"""Renderers for Parsley AST."""

from parsley.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
