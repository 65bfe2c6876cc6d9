"""Convert Markdown in one call, then with a processor that keeps its own options."""

from parsley import Markdown, parse

print(parse("# Hello **World**"))

md = Markdown(breaks=True)
print(md("- [x] done\n- [ ] todo\n\nline one\nline two"))
