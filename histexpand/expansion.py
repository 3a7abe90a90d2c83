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

"""Expansion of history references in a command line.

A history reference starts with ! and has three parts, the last two optional:

    !event[[:]word][:modifier...]

For example, C{!!} is the previous command, C{!-2:$} is the last word of the command
before that, and C{!vi:1:h} is the directory of the first argument of the most recent
command starting with vi. A line of the form C{^old^new^} is shorthand for
C{!!:s^old^new^}, i.e., the previous command with old replaced by new.

Expansion does not modify the history ring. If any reference in a line cannot be
resolved, the whole expansion fails with a L{histexpand.exception.HistoryError}
identifying the reference.
"""

import re
import string

import histexpand.context
import histexpand.event
import histexpand.exception
import histexpand.modifier
import histexpand.tokenizer
import histexpand.word

BANG = '!'
ESCAPE_CHAR = '\\'
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
# A reference can start at the beginning of a word, or following one of these.
BREAK_CHARS = string.whitespace + ';&|<>(){}[]"`='
# A ! followed by one of these, or at the end of the line, is just a !.
NOT_A_REFERENCE = string.whitespace + '=('
EVENT_STRING_TERMINATORS = string.whitespace + ':^$*%;&|<>(){}[]"\'`'
WORD_SHORTHAND = '^$*%'
WORD_START = string.digits + WORD_SHORTHAND + '-'
QUICK_SUBSTITUTION = re.compile(r'\s*\^([^^]+)\^([^^]*)\^?\s*')


class Reference(object):

    def __init__(self, line, start, end, event, word, steps):
        self.line = line
        self.start = start
        self.end = end
        self.event = event
        self.word = word
        self.steps = steps

    def __repr__(self):
        return f'Reference([{self.start}:{self.end}]{self.text})'

    @property
    def text(self):
        return self.line[self.start:self.end]


class Expansion(object):

    def __init__(self, text, print_only=False, changed=False):
        self.text = text
        self.print_only = print_only
        self.changed = changed

    def __repr__(self):
        flags = ' (print only)' if self.print_only else ''
        return f'Expansion({self.text}){flags}'


class Expander(object):
    """Expands history references against a ring. An Expander belongs to one session:
    it remembers the most recent substitution from one line to the next, for :& and ^^.
    """

    def __init__(self, ring, trace=None):
        self.ring = ring
        self.trace = trace
        self.substitution = None

    def __repr__(self):
        return f'Expander({self.ring})'

    def expand(self, line):
        context = histexpand.context.initial(self.ring, self.substitution)
        text = line
        quick = QUICK_SUBSTITUTION.fullmatch(line)
        if quick:
            old, new = quick.groups()
            text = f'{BANG}{BANG}:s^{old}^{new}^'
        changed = quick is not None
        # References are found in the unexpanded text. Replacements are never scanned, so
        # they are not expanded again, and their quotes can't hide later references.
        pieces = []
        position = 0
        while True:
            try:
                reference = find_reference(text, position)
            except histexpand.exception.HistoryError as e:
                self.write_trace('FAILED', line, str(e))
                raise
            if reference is None:
                break
            try:
                replacement, context = resolve_reference(reference, context)
            except histexpand.exception.HistoryError as e:
                e.reference = line.strip() if quick else reference.text
                self.write_trace('FAILED', line, str(e))
                raise
            pieces.append(text[position:reference.start])
            pieces.append(replacement)
            position = reference.end
            changed = True
        pieces.append(text[position:])
        text = ''.join(pieces)
        self.substitution = context.substitution
        if changed:
            self.write_trace('EXPAND', line, text)
        return Expansion(text, context.print_only, changed)

    def write_trace(self, phase, line, output):
        if self.trace is not None and self.trace.is_enabled():
            self.trace.write(phase, line, output)


def expand_line(line, ring):
    return Expander(ring).expand(line).text


def resolve_reference(reference, context):
    event = histexpand.event.resolve_event(reference.event, context.ring)
    if reference.word is None:
        # No word designator: the whole event, exactly as recorded.
        text = event.text
    else:
        tokens = histexpand.tokenizer.tokenize(event.text)
        text = histexpand.word.resolve_word(tokens, reference.word)
    return histexpand.modifier.apply_steps(text, reference.steps, context)


# Returns the first Reference starting at or after position, or None.
def find_reference(line, position):
    n = len(line)
    for token in histexpand.tokenizer.tokenize(line):
        if token.end <= position:
            continue
        single_quoted = False
        double_quoted = False
        i = token.start
        while i < token.end:
            c = line[i]
            if c == ESCAPE_CHAR and not single_quoted:
                i += 2
                continue
            if c == SINGLE_QUOTE and not double_quoted:
                single_quoted = not single_quoted
            elif c == DOUBLE_QUOTE and not single_quoted:
                double_quoted = not double_quoted
            elif (c == BANG and
                  not single_quoted and
                  i >= position and
                  (i == token.start or line[i - 1] in BREAK_CHARS) and
                  i + 1 < n and
                  line[i + 1] not in NOT_A_REFERENCE):
                reference = parse_reference(line, i)
                if reference is not None:
                    return reference
            i += 1
    return None


# Returns the Reference starting with the ! at line[start], or None if what follows
# the ! is not an event designator.
def parse_reference(line, start):
    assert line[start] == BANG, (line, start)
    event, position = parse_event_designator(line, start + 1)
    if event is None:
        return None
    word = None
    n = len(line)
    if position + 1 < n and line[position] == ':' and line[position + 1] in WORD_START:
        word, position = parse_word_designator(line, position + 1)
    elif position < n and line[position] in WORD_SHORTHAND:
        word, position = parse_word_designator(line, position)
    steps, position = histexpand.modifier.parse_modifiers(line, position)
    return Reference(line, start, position, event, word, steps)


# Returns (designator, end), designator excluding the leading !. designator is None
# if there isn't one at position.
def parse_event_designator(line, position):
    n = len(line)
    if position >= n:
        return None, position
    c = line[position]
    if c in (BANG, '#'):
        return c, position + 1
    # !$, !:1, etc. are short for !!$, !!:1.
    if c in WORD_SHORTHAND or (c == ':' and position + 1 < n and not line[position + 1].isspace()):
        return BANG, position
    match = histexpand.event.INTEGER.match(line, position)
    if match:
        return match.group(), match.end()
    end = position
    if c == '?':
        end += 1
        # Runs to the closing ?, or the end of the line.
        while end < n and line[end] != '?':
            end += 1
        if end < n and line[end] == '?':
            end += 1
        return line[position:end], end
    while end < n and line[end] not in EVENT_STRING_TERMINATORS:
        end += 1
    return (line[position:end], end) if end > position else (None, position)


def parse_word_designator(line, position):
    match = histexpand.word.WORD_DESIGNATOR.match(line, position)
    return match.group(), match.end()
