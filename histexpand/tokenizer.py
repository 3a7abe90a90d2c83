# This file is part of Histexpand.
#
# Histexpand is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation, either version 3 of the License, (or at your
# option) any later version.
#
# Histexpand is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License
# along with Histexpand.  If not, see <https://www.gnu.org/licenses/>.

# Splits a command line into argv-style words. Quoted and bracketed groups are kept
# whole, including any whitespace inside them. This is not a shell grammar: operators,
# redirections and so on are just characters inside words.

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
QUOTES = SINGLE_QUOTE + DOUBLE_QUOTE
ESCAPE_CHAR = '\\'
OPEN = '([{'
CLOSE = ')]}'
MATCHING_CLOSE = dict(zip(OPEN, CLOSE))


class Token(object):

    def __init__(self, source, start, end):
        self.source = source
        self.start = start
        self.end = end

    def __repr__(self):
        return f'Token([{self.start}:{self.end}]{self.text})'

    def __eq__(self, other):
        return (isinstance(other, Token) and
                self.source == other.source and
                self.start == other.start and
                self.end == other.end)

    def __hash__(self):
        return hash((self.source, self.start, self.end))

    @property
    def text(self):
        return self.source[self.start:self.end]


class Scanner(object):

    def __init__(self, text, position=0):
        self.text = text
        self.end = position

    def more(self):
        return self.end < len(self.text)

    def peek(self):
        return self.text[self.end] if self.end < len(self.text) else None

    def skip_whitespace(self):
        while self.more() and self.peek().isspace():
            self.end += 1

    # Consume one word starting at the current position. closers is a stack of the
    # characters that will close the groups currently open. An unterminated group
    # extends to the end of the text.
    def scan_word(self):
        start = self.end
        closers = []
        while self.more():
            c = self.peek()
            quoted = len(closers) > 0 and closers[-1] in QUOTES
            if quoted:
                if c == closers[-1]:
                    closers.pop()
                elif c == ESCAPE_CHAR and closers[-1] == DOUBLE_QUOTE:
                    self.end += 1
            elif c == ESCAPE_CHAR:
                self.end += 1
            elif c in QUOTES:
                closers.append(c)
            elif c in OPEN:
                closers.append(MATCHING_CLOSE[c])
            elif len(closers) > 0 and c == closers[-1]:
                closers.pop()
            elif len(closers) == 0 and c.isspace():
                break
            self.end += 1
        self.end = min(self.end, len(self.text))
        return Token(self.text, start, self.end)


def tokenize(text):
    tokens = []
    scanner = Scanner(text)
    scanner.skip_whitespace()
    while scanner.more():
        tokens.append(scanner.scan_word())
        scanner.skip_whitespace()
    return tokens


def words(text):
    return [token.text for token in tokenize(text)]
