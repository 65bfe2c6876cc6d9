"""Typed AST: collect headings for a table of contents."""

from parsley import Heading, List, parse_ast


def _inline_text(node) -> str:
    if hasattr(node, "content"):
        return node.content
    if hasattr(node, "code"):
        return node.code
    if hasattr(node, "children"):
        return "".join(_inline_text(c) for c in node.children)
    return ""


def collect_headings(blocks) -> list[tuple[int, str]]:
    headings: list[tuple[int, str]] = []
    for block in blocks:
        match block:
            case Heading():
                headings.append((block.level, _inline_text(block)))
            case List():
                continue
            case _ if hasattr(block, "children"):
                headings.extend(collect_headings(block.children))
    return headings


source = """# Introduction

Welcome to the guide.

## Getting Started

> ### Quoted `heading`

## Advanced *Topics*
"""

print("Table of Contents:")
for level, text in collect_headings(parse_ast(source).children):
    print(f"{'  ' * (level - 1)}{'#' * level} {text}")
