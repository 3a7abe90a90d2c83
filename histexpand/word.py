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

import re

import histexpand.exception

# A word designator is one of:
#     ^         The first word (index 0).
#     $         The last word.
#     *         All words but the first.
#     %         The word matched by the most recent ?str? search. Not supported.
#     N         Word N.
#     N-M       Words N through M. ^ and $ may be used for either end.
#     N- or N*  Words N through the last.
#     -M        Words 0 through M.
WORD_DESIGNATOR = re.compile(r'(?P<first>\d+|[\^$%])?(?:(?P<dash>-)(?P<last>\d+|[\^$%])?|(?P<star>\*))?')


class WordRange(object):

    # first and last are inclusive.
    def __init__(self, first, last):
        self.first = first
        self.last = last

    def __repr__(self):
        return f'WordRange({self.first}, {self.last})'

    def __eq__(self, other):
        return isinstance(other, WordRange) and self.first == other.first and self.last == other.last

    def __hash__(self):
        return hash((self.first, self.last))

    def is_single(self):
        return self.first == self.last

    def select(self, tokens):
        return ' '.join(token.text for token in tokens[self.first:self.last + 1])


def word_range(designator, n_tokens):
    def bad():
        return histexpand.exception.NoSuchWord(reference=designator)

    def index_of(x):
        return (0 if x == '^' else
                n_tokens - 1 if x == '$' else
                int(x))

    match = WORD_DESIGNATOR.fullmatch(designator)
    if len(designator) == 0 or match is None:
        raise bad()
    first = match.group('first')
    last = match.group('last')
    if '%' in (first, last):
        raise histexpand.exception.DesignatorNotImplemented(reference=designator)
    if match.group('star') and first is None:
        # Plain *. Asking for the arguments of a command that has none is an error.
        if n_tokens < 2:
            raise bad()
        first_index = 1
        last_index = n_tokens - 1
    elif match.group('star') or match.group('dash'):
        if first is None and last is None:
            raise bad()
        first_index = 0 if first is None else index_of(first)
        last_index = n_tokens - 1 if last is None else index_of(last)
    else:
        first_index = last_index = index_of(first)
    if not (0 <= first_index <= last_index < n_tokens):
        raise bad()
    return WordRange(first_index, last_index)


def resolve_word(tokens, designator):
    return word_range(designator, len(tokens)).select(tokens)
