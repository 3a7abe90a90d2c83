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

import shlex

import histexpand.context
import histexpand.exception
import histexpand.tokenizer

PATH_SEPARATOR = '/'
EXTENSION_SEPARATOR = '.'
MODIFIER_SEPARATOR = ':'
ESCAPE_CHAR = '\\'
AMPERSAND = '&'


class Modifier(object):
    CODE = None

    def __repr__(self):
        return f'{MODIFIER_SEPARATOR}{self.CODE}'

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __hash__(self):
        return hash(repr(self))

    # Returns (text, context)
    def apply(self, text, context):
        return self.transform(text), context

    def transform(self, text):
        raise NotImplementedError()


class StripHead(Modifier):
    CODE = 'h'

    def transform(self, text):
        separator = text.rfind(PATH_SEPARATOR)
        return text[:separator] if separator >= 0 else ''


class StripTail(Modifier):
    CODE = 't'

    def transform(self, text):
        return text[text.rfind(PATH_SEPARATOR) + 1:]


class StripExtension(Modifier):
    CODE = 'e'

    def transform(self, text):
        tail = text[text.rfind(PATH_SEPARATOR) + 1:]
        dot = tail.rfind(EXTENSION_SEPARATOR)
        return tail[dot + 1:] if dot >= 0 else ''


class StripBase(Modifier):
    CODE = 'r'

    def transform(self, text):
        dot = text.rfind(EXTENSION_SEPARATOR)
        return text[:dot] if dot > text.rfind(PATH_SEPARATOR) else text


class PrintOnly(Modifier):
    CODE = 'p'

    def apply(self, text, context):
        return text, context._replace(print_only=True)


class Quote(Modifier):
    CODE = 'q'

    def transform(self, text):
        return shlex.quote(text)


class RemoveOneWord(Modifier):
    CODE = 'x'

    def transform(self, text):
        tokens = histexpand.tokenizer.tokenize(text)
        return text[tokens[1].start:] if len(tokens) > 1 else ''


class GlobalApply(Modifier):
    CODE = 'g'

    def __init__(self, modifier):
        self.modifier = modifier

    def __repr__(self):
        return f'{MODIFIER_SEPARATOR}{self.CODE}{self.modifier.CODE}'

    def apply(self, text, context):
        pieces = []
        for token in histexpand.tokenizer.tokenize(text):
            piece, context = self.modifier.apply(token.text, context)
            pieces.append(piece)
        return ' '.join(pieces), context


class Substitute(Modifier):
    """Replace the first occurrence of pattern by replacement, or every occurrence if
    global_ is true. Both are plain text, not regular expressions. In the replacement,
    & stands for the pattern and \\& is a literal &. An empty pattern reuses the pattern
    of the previous substitution.
    """

    CODE = 's'

    def __init__(self, pattern, replacement, global_=False):
        self.pattern = pattern
        self.replacement = replacement
        self.global_ = global_

    def __repr__(self):
        g = 'g' if self.global_ else ''
        return f'{MODIFIER_SEPARATOR}{g}{self.CODE}/{self.pattern}/{self.replacement}/'

    def apply(self, text, context):
        pattern = self.pattern
        if len(pattern) == 0:
            if context.substitution is None:
                raise histexpand.exception.NoPriorSubstitution()
            pattern = context.substitution.pattern
        replacement = Substitute.expand_replacement(self.replacement, pattern)
        text = text.replace(pattern, replacement, -1 if self.global_ else 1)
        substitution = histexpand.context.Substitution(pattern, self.replacement)
        return text, context._replace(substitution=substitution)

    @staticmethod
    def expand_replacement(replacement, pattern):
        if AMPERSAND not in replacement:
            return replacement
        buffer = []
        i = 0
        n = len(replacement)
        while i < n:
            c = replacement[i]
            if c == ESCAPE_CHAR and i + 1 < n and replacement[i + 1] == AMPERSAND:
                buffer.append(AMPERSAND)
                i += 1
            elif c == AMPERSAND:
                buffer.append(pattern)
            else:
                buffer.append(c)
            i += 1
        return ''.join(buffer)


class RepeatSubstitution(Modifier):
    CODE = '&'

    def __init__(self, global_=False):
        self.global_ = global_

    def __repr__(self):
        g = 'g' if self.global_ else ''
        return f'{MODIFIER_SEPARATOR}{g}{self.CODE}'

    def apply(self, text, context):
        if context.substitution is None:
            raise histexpand.exception.NoPriorSubstitution()
        substitution = context.substitution
        return Substitute(substitution.pattern, substitution.replacement, self.global_).apply(text, context)


SIMPLE_MODIFIERS = {modifier.CODE: modifier for modifier in (StripHead,
                                                              StripTail,
                                                              StripExtension,
                                                              StripBase,
                                                              PrintOnly,
                                                              Quote,
                                                              RemoveOneWord)}


# Parsing

def parse_modifiers(text, position):
    """Parse zero or more :X modifiers starting at position. Returns (steps, end), where
    end is the position following the last modifier. A colon followed by whitespace or
    the end of text is not a modifier.
    """
    steps = []
    while (position + 1 < len(text) and
           text[position] == MODIFIER_SEPARATOR and
           not text[position + 1].isspace()):
        step, position = parse_modifier(text, position + 1)
        steps.append(step)
    return steps, position


def parse_modifier(text, position):
    c = text[position]
    if c == GlobalApply.CODE:
        position += 1
        c = text[position] if position < len(text) else ''
        if c == Substitute.CODE:
            return parse_substitute(text, position + 1, True)
        if c == RepeatSubstitution.CODE:
            return RepeatSubstitution(True), position + 1
        if c in SIMPLE_MODIFIERS and c != PrintOnly.CODE:
            return GlobalApply(SIMPLE_MODIFIERS[c]()), position + 1
        raise histexpand.exception.ModifierSyntaxError(f'Bad modifier: :g{c}')
    if c == Substitute.CODE:
        return parse_substitute(text, position + 1, False)
    if c == RepeatSubstitution.CODE:
        return RepeatSubstitution(False), position + 1
    if c in SIMPLE_MODIFIERS:
        return SIMPLE_MODIFIERS[c](), position + 1
    raise histexpand.exception.ModifierSyntaxError(f'Bad modifier: :{c}')


# :s<d>pattern<d>replacement[<d>]. Any character can be the delimiter, d. The final
# delimiter may be omitted, in which case the replacement runs to the end of text.
def parse_substitute(text, position, global_):
    if position >= len(text) or text[position].isspace():
        raise histexpand.exception.ModifierSyntaxError('Substitution delimiter missing')
    delimiter = text[position]
    pattern, position, terminated = scan_delimited(text, position + 1, delimiter)
    if not terminated:
        raise histexpand.exception.ModifierSyntaxError(f'Unterminated substitution pattern: {pattern}')
    replacement, position, _ = scan_delimited(text, position, delimiter)
    return Substitute(pattern, replacement, global_), position


# Returns (text, end, terminated). A backslash before the delimiter makes it literal.
def scan_delimited(text, position, delimiter):
    buffer = []
    n = len(text)
    while position < n:
        c = text[position]
        if c == ESCAPE_CHAR and position + 1 < n and text[position + 1] == delimiter:
            buffer.append(delimiter)
            position += 2
        elif c == delimiter:
            return ''.join(buffer), position + 1, True
        else:
            buffer.append(c)
            position += 1
    return ''.join(buffer), position, False


# Applying

def apply_steps(text, steps, context):
    for step in steps:
        text, context = step.apply(text, context)
    return text, context


def apply_modifiers(text, steps, context=None):
    if context is None:
        context = histexpand.context.initial()
    text, _ = apply_steps(text, steps, context)
    return text
