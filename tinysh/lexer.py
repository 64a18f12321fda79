"""Quote and escape aware tokenizer for tinysh.

The lexer is a three-state automaton. Quote characters switch states and are
never copied into a word; backslashes are handled differently per state.

Transition table (c is the character after a backslash):

    state         input           action                      next state
    ------------  --------------  --------------------------  ------------
    NORMAL        '               consume                     SINGLE_QUOTE
    NORMAL        "               consume                     DOUBLE_QUOTE
    NORMAL        \\c             append c                    NORMAL
    NORMAL        \\ at end       drop                        NORMAL
    NORMAL        \\ newline      drop both                   NORMAL
    NORMAL        space           end word if non-empty       NORMAL
    SINGLE_QUOTE  '               consume                     NORMAL
    SINGLE_QUOTE  anything else   append verbatim             SINGLE_QUOTE
    DOUBLE_QUOTE  "               consume                     NORMAL
    DOUBLE_QUOTE  \\c, c in \\$"  append c                    DOUBLE_QUOTE
    DOUBLE_QUOTE  \\c otherwise   append backslash            DOUBLE_QUOTE
    DOUBLE_QUOTE  \\ at end       drop                        DOUBLE_QUOTE
    any           newline         ignore                      unchanged
    any           other           append                      unchanged

An unterminated quote is not an error: the word simply ends with the input.
"""

from enum import Enum
from typing import List


class LexState(Enum):
    """Scanner modes; exactly one is active at a time."""
    NORMAL = "normal"
    SINGLE_QUOTE = "single_quote"
    DOUBLE_QUOTE = "double_quote"


# Characters a backslash may escape inside double quotes
DOUBLE_QUOTE_ESCAPABLE = frozenset('\\$"')


class ShellLexer:
    """Split one input line into shell words.

    Example:
        >>> ShellLexer("echo 'a  b' c").tokenize()
        ['echo', 'a  b', 'c']
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.state = LexState.NORMAL
        self._current: List[str] = []
        self._words: List[str] = []

    def peek(self) -> str:
        """Return the character after the current one, or '' at end."""
        if self.pos + 1 < len(self.text):
            return self.text[self.pos + 1]
        return ''

    def tokenize(self) -> List[str]:
        """Run the automaton over the whole line and return the words."""
        self.pos = 0
        self.state = LexState.NORMAL
        self._current = []
        self._words = []

        while self.pos < len(self.text):
            char = self.text[self.pos]
            if char == '\n':
                self.pos += 1
                continue

            if self.state is LexState.NORMAL:
                self._step_normal(char)
            elif self.state is LexState.SINGLE_QUOTE:
                self._step_single_quote(char)
            else:
                self._step_double_quote(char)
            self.pos += 1

        self._end_word()
        return self._words

    def _step_normal(self, char: str):
        if char == "'":
            self.state = LexState.SINGLE_QUOTE
        elif char == '"':
            self.state = LexState.DOUBLE_QUOTE
        elif char == '\\':
            escaped = self.peek()
            if escaped:
                if escaped != '\n':
                    self._current.append(escaped)
                self.pos += 1
        elif char == ' ':
            self._end_word()
        else:
            self._current.append(char)

    def _step_single_quote(self, char: str):
        if char == "'":
            self.state = LexState.NORMAL
        else:
            self._current.append(char)

    def _step_double_quote(self, char: str):
        if char == '"':
            self.state = LexState.NORMAL
        elif char == "\\":
            escaped = self.peek()
            if escaped in DOUBLE_QUOTE_ESCAPABLE:
                self._current.append(escaped)
                self.pos += 1
            elif escaped:
                self._current.append(char)
        else:
            self._current.append(char)

    def _end_word(self):
        if self._current:
            self._words.append(''.join(self._current))
            self._current = []

    def __repr__(self):
        return f"ShellLexer({self.text!r}, state={self.state.value})"


def tokenize(line: str) -> List[str]:
    """Tokenize a single input line.

    Args:
        line: Raw input, with or without its trailing newline

    Returns:
        Ordered list of words with quotes removed and escapes applied
    """
    return ShellLexer(line).tokenize()
