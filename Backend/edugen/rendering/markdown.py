"""A minimal line-based markdown renderer for study guides.

Only the subset the study guide prompt asks for is understood: three
heading levels, flat bullet lists, blank-line breaks and inline
``**bold**`` / ``*italic*``. There are no nested lists, links or code blocks.
"""
import html
import re
from dataclasses import dataclass
from typing import List

BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
ITALIC_RE = re.compile(r"\*(.*?)\*")

HEADING_PREFIXES = (("### ", "h3"), ("## ", "h2"), ("# ", "h1"))
LIST_PREFIXES = ("* ", "- ")


@dataclass(frozen=True)
class Block:
    kind: str  # h1, h2, h3, li, br or p
    text: str = ""


def format_inline(line: str) -> str:
    # Escape first so that only our own tags reach the page
    escaped = html.escape(line, quote=False)
    escaped = BOLD_RE.sub(r"<strong>\1</strong>", escaped)
    return ITALIC_RE.sub(r"<em>\1</em>", escaped)


def parse_line(line: str) -> Block:
    for prefix, kind in HEADING_PREFIXES:
        if line.startswith(prefix):
            return Block(kind, line[len(prefix):])
    if line.startswith(LIST_PREFIXES):
        return Block("li", line[2:])
    if line.strip() == "":
        return Block("br")
    return Block("p", line)


def parse_markdown(text: str) -> List[Block]:
    return [parse_line(line) for line in text.split("\n")]


def block_html(block: Block) -> str:
    if block.kind == "br":
        return "<br>"
    if block.kind == "p":
        return f"<p>{format_inline(block.text)}</p>"
    return f"<{block.kind}>{html.escape(block.text, quote=False)}</{block.kind}>"


def render_markdown_html(text: str) -> str:
    parts = []
    in_list = False
    for block in parse_markdown(text):
        # consecutive list items share one <ul>
        if block.kind == "li" and not in_list:
            parts.append("<ul>")
            in_list = True
        elif block.kind != "li" and in_list:
            parts.append("</ul>")
            in_list = False
        parts.append(block_html(block))
    if in_list:
        parts.append("</ul>")
    return "\n".join(parts)
