"""Convert GitHub-flavoured Markdown to Jira wiki markup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import mistletoe
from mistletoe import block_token, span_token
from mistletoe.base_renderer import BaseRenderer

if TYPE_CHECKING:
    from mistletoe.token import Token

logger: logging.Logger = logging.getLogger(__name__)


class JiraWikiRenderer(BaseRenderer):
    """Renders a mistletoe Markdown document as Jira wiki markup."""

    def __init__(self, *extras: type[Token]) -> None:
        # Nesting markers of the lists being rendered, e.g. ["*", "#"] for a numbered list inside a bullet list
        self._list_markers: list[str] = []
        super().__init__(block_token.HtmlBlock, span_token.HtmlSpan, *extras)

    def render_strong(self, token: span_token.Strong) -> str:
        return f"*{self.render_inner(token)}*"

    def render_emphasis(self, token: span_token.Emphasis) -> str:
        return f"_{self.render_inner(token)}_"

    def render_inline_code(self, token: span_token.InlineCode) -> str:
        return f"{{{{{self.render_inner(token)}}}}}"

    def render_strikethrough(self, token: span_token.Strikethrough) -> str:
        return f"-{self.render_inner(token)}-"

    def render_image(self, token: span_token.Image) -> str:
        return f"!{token.src}!"

    def render_link(self, token: span_token.Link) -> str:
        # Square brackets would end the Jira link early
        text = self.render_inner(token).replace("[", "(").replace("]", ")")
        return f"[{text}|{token.target}]"

    def render_auto_link(self, token: span_token.AutoLink) -> str:
        return f"[{token.target}]"

    def render_escape_sequence(self, token: span_token.EscapeSequence) -> str:
        return self.render_inner(token)

    def render_raw_text(self, token: span_token.RawText) -> str:
        return token.content

    def render_html_span(self, token: span_token.HtmlSpan) -> str:
        return token.content

    def render_line_break(self, token: span_token.LineBreak) -> str:
        return "\n"

    def render_heading(self, token: block_token.Heading) -> str:
        return f"h{token.level}. {self.render_inner(token)}\n\n"

    def render_quote(self, token: block_token.Quote) -> str:
        return f"{{quote}}\n{self.render_inner(token).rstrip()}\n{{quote}}\n\n"

    def render_paragraph(self, token: block_token.Paragraph) -> str:
        if self._list_markers:
            return f"{self.render_inner(token)}\n"
        return f"{self.render_inner(token)}\n\n"

    def render_block_code(self, token: block_token.BlockCode) -> str:
        language = f":{token.language}" if token.language else ""
        code = self.render_inner(token)
        if not code.endswith("\n"):
            code += "\n"
        return f"{{code{language}}}\n{code}{{code}}\n\n"

    def render_list(self, token: block_token.List) -> str:
        self._list_markers.append("#" if token.start is not None else "*")
        try:
            rendered = self.render_inner(token)
        finally:
            self._list_markers.pop()
        return rendered if self._list_markers else f"{rendered}\n"

    def render_list_item(self, token: block_token.ListItem) -> str:
        prefix = "".join(self._list_markers)
        inner = self.render_inner(token)
        if not inner.endswith("\n"):
            inner += "\n"
        return f"{prefix} {inner}"

    def render_table(self, token: block_token.Table) -> str:
        header = ""
        if getattr(token, "header", None) is not None:
            header = self.render_table_row(token.header, is_header=True)
        return f"{header}{self.render_inner(token)}\n"

    def render_table_row(self, token: block_token.TableRow, is_header: bool = False) -> str:
        separator = "||" if is_header else "|"
        cells = "".join(self.render_table_cell(cell, is_header) for cell in token.children)
        return f"{cells}{separator}\n"

    def render_table_cell(self, token: block_token.TableCell, in_header: bool = False) -> str:
        separator = "||" if in_header else "|"
        return f"{separator}{self.render_inner(token) or ' '}"

    def render_thematic_break(self, token: block_token.ThematicBreak) -> str:
        return "----\n\n"

    def render_html_block(self, token: block_token.HtmlBlock) -> str:
        return f"{token.content}\n"

    def render_document(self, token: block_token.Document) -> str:
        return self.render_inner(token).rstrip("\n")


def to_wiki_markup(markdown: str | None) -> str:
    """Convert Markdown to Jira wiki markup.

    Never raises: if the conversion fails the original Markdown is returned
    unchanged and the failure is logged.

    Args:
        markdown: GitHub-flavoured Markdown (issue or comment body)

    Returns:
        Jira wiki markup, or the original text if it could not be converted
    """
    if not markdown:
        return ""

    try:
        return mistletoe.markdown(markdown, JiraWikiRenderer)
    except Exception:  # noqa: BLE001 - any renderer failure falls back to the raw text
        logger.warning(
            f"Failed to convert the following markdown to Wiki format, falling back to raw markdown:\n{markdown!r}"
        )
        return markdown
