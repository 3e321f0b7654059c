"""Translate prompt template sources into Jinja2 syntax.

Prompt templates use a dot-rooted action syntax::

    Hello, {{.Name}}!                      interpolation
    {* reviewer notes *}                   comment
    {{if isBullish(.Price, .EMA)}}         conditional
      up {{formatCurrency(.Balance)}}      function call
    {{else if .Flat}}
      flat
    {{else}}
      down
    {{end}}

``translate`` rewrites such a source into an equivalent Jinja2 source whose
data context is bound to ``ROOT_NAME``. ``.A.B`` becomes ``_dot["A"]["B"]``:
Jinja2 subscripts try mapping keys first and fall back to attributes, so the
data may be a dict or a nested dataclass record. Comments keep their line
breaks so Jinja2 error line numbers match the template source.
"""

from __future__ import annotations

import json
import re
from typing import List, Optional

from jinja2 import TemplateSyntaxError

ROOT_NAME = "_dot"

_EXPRESSION_TOKEN = re.compile(
    r"""
      (?P<string>"(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*'|`[^`]*`)
    | (?P<number>\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)
    | (?P<field>\.[A-Za-z_]\w*)
    | (?P<dot>\.)
    | (?P<name>[A-Za-z_]\w*)
    | (?P<op>&&|\|\||!=|!)
    | (?P<space>\s+)
    | (?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_KEYWORD = re.compile(r"(else\s+if|if|else|end)\b\s*(.*)\Z", re.DOTALL)
# Block actions of the wider action language; ``range(...)`` and ``range (...)`` stay calls.
_UNSUPPORTED = re.compile(
    r"(range|block|yield|include|import|extends|return|try|catch)(?!\s*\()(?:\s|\Z)"
)

# Tokens after which ``.Name`` is member access rather than a root lookup.
_ACCESSIBLE = {"name", "field", ")", "]"}

_OPERATORS = {"&&": " and ", "||": " or ", "!": " not ", "!=": "!="}
_NAMES = {"nil": "none"}


def translate(source: str, name: Optional[str] = None) -> str:
    """Return the Jinja2 equivalent of ``source``.

    Raises ``jinja2.TemplateSyntaxError`` for malformed markup.
    """
    translator = _Translator(source, name)
    return translator.run()


def translate_expression(expression: str) -> str:
    """Rewrite a single action expression into Jinja2 expression syntax."""
    parts: List[str] = []
    previous: Optional[str] = None
    for match in _EXPRESSION_TOKEN.finditer(expression):
        kind = match.lastgroup
        text = match.group()
        if kind == "string" and text.startswith("`"):
            text = json.dumps(text[1:-1], ensure_ascii=False)
        elif kind == "field":
            member = f'["{text[1:]}"]'
            text = member if previous in _ACCESSIBLE else ROOT_NAME + member
        elif kind == "dot":
            text = "." if previous in _ACCESSIBLE else ROOT_NAME
        elif kind == "name":
            text = _NAMES.get(text, text)
        elif kind == "op":
            text = _OPERATORS[text]
        parts.append(text)
        previous = text if kind == "other" else kind
    return "".join(parts).strip()


class _Translator:
    def __init__(self, source: str, name: Optional[str]) -> None:
        self.source = source
        self.name = name
        self.output: List[str] = []
        # One entry per open ``if``: [line number, else seen].
        self.blocks: List[List[object]] = []
        self.lineno = 1
        self.pos = 0

    def run(self) -> str:
        source = self.source
        while self.pos < len(source):
            start = _next_delimiter(source, self.pos)
            if start < 0:
                self._text(source[self.pos :])
                break
            self._text(source[self.pos : start])
            if source.startswith("{*", start):
                end = source.find("*}", start + 2)
                if end < 0:
                    self._fail("unclosed comment")
                body = source[start + 2 : end]
                if "\n" in body:
                    self.output.append("{#" + "\n" * body.count("\n") + "#}")
                self.lineno += body.count("\n")
                self.pos = end + 2
            else:
                end = _find_action_end(source, start + 2)
                if end < 0:
                    self._fail("unclosed action")
                inner = source[start + 2 : end]
                self.output.append(self._action(inner))
                self.lineno += inner.count("\n")
                self.pos = end + 2
        if self.blocks:
            self.lineno = int(self.blocks[-1][0])
            self._fail("unclosed if block, missing {{end}}")
        return "".join(self.output)

    def _text(self, segment: str) -> None:
        if not segment:
            return
        self.lineno += segment.count("\n")
        if "{%" in segment or "{#" in segment or segment.endswith("{"):
            segment = "{% raw %}" + segment + "{% endraw %}"
        self.output.append(segment)

    def _action(self, inner: str) -> str:
        left = right = ""
        if inner.startswith("-") and inner[1:2].isspace():
            left, inner = "-", inner[1:]
        if inner.endswith("-") and inner[-2:-1].isspace():
            right, inner = "-", inner[:-1]
        body = inner.strip()
        if not body:
            self._fail("empty action")

        match = _KEYWORD.match(body)
        if match is None:
            unsupported = _UNSUPPORTED.match(body)
            if unsupported is not None:
                self._fail(f"unsupported action {unsupported.group(1)!r}")
            return f"{{{{{left} {translate_expression(body)} {right}}}}}"

        keyword = " ".join(match.group(1).split())
        rest = match.group(2).strip()
        if keyword == "if":
            if not rest:
                self._fail("missing condition in {{if}}")
            self.blocks.append([self.lineno, False])
            return self._statement(left, f"if {translate_expression(rest)}", right)
        if keyword == "else if":
            block = self._open_block(keyword)
            if not rest:
                self._fail("missing condition in {{else if}}")
            if block[1]:
                self._fail("{{else if}} after {{else}}")
            return self._statement(left, f"elif {translate_expression(rest)}", right)
        if keyword == "else":
            block = self._open_block(keyword)
            if rest:
                self._fail("unexpected text after {{else}}")
            if block[1]:
                self._fail("duplicate {{else}}")
            block[1] = True
            return self._statement(left, "else", right)
        # end
        if rest:
            self._fail("unexpected text after {{end}}")
        self._open_block(keyword)
        self.blocks.pop()
        return self._statement(left, "endif", right)

    def _open_block(self, keyword: str) -> List[object]:
        if not self.blocks:
            self._fail(f"unexpected {{{{{keyword}}}}} outside {{{{if}}}}")
        return self.blocks[-1]

    @staticmethod
    def _statement(left: str, body: str, right: str) -> str:
        return f"{{%{left} {body} {right}%}}"

    def _fail(self, message: str) -> None:
        raise TemplateSyntaxError(message, self.lineno, self.name)


def _next_delimiter(source: str, pos: int) -> int:
    candidates = [index for index in (source.find("{{", pos), source.find("{*", pos)) if index >= 0]
    return min(candidates) if candidates else -1


def _find_action_end(source: str, pos: int) -> int:
    """Index of the ``}}`` closing the action starting at ``pos``, or -1."""
    quote: Optional[str] = None
    index = pos
    while index < len(source):
        char = source[index]
        if quote is not None:
            if char == "\\" and quote != "`":
                index += 2
                continue
            if char == quote:
                quote = None
        elif char in "\"'`":
            quote = char
        elif source.startswith("}}", index):
            return index
        index += 1
    return -1


__all__ = ["ROOT_NAME", "translate", "translate_expression"]
