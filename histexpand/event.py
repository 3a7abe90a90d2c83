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

INTEGER = re.compile(r'-?\d+')


class Event(object):

    # index is into the history ring, oldest first.
    def __init__(self, index, text):
        self.index = index
        self.text = text

    def __repr__(self):
        return f'Event({self.index}: {self.text})'

    def __eq__(self, other):
        return isinstance(other, Event) and self.index == other.index and self.text == other.text

    def __hash__(self):
        return hash((self.index, self.text))


# designator is an event designator with its leading ! removed:
#     !         The most recent command.
#     -N        N commands back, -1 being the most recent.
#     N         Command N, numbering from 1 at the oldest surviving command.
#     ?str[?]   The most recent command containing str.
#     str       The most recent command starting with str.
#     #         The line being typed. Not supported.
def resolve_event(designator, ring):
    if designator == '#':
        raise histexpand.exception.DesignatorNotImplemented(reference=f'!{designator}')
    ring.check_not_empty()
    n = ring.length()
    if designator == '!':
        index = n - 1
    elif INTEGER.fullmatch(designator):
        number = int(designator)
        index = (n + number if number < 0 else
                 number - 1 if number > 0 else
                 None)
        if index is None or not (0 <= index < n):
            raise histexpand.exception.NoSuchEvent(reference=f'!{designator}')
    elif designator.startswith('?'):
        search = designator[1:-1] if len(designator) > 1 and designator.endswith('?') else designator[1:]
        if len(search) == 0:
            raise histexpand.exception.NoSuchEvent(reference=f'!{designator}')
        index = ring.most_recent_matching(lambda entry: search in entry)
    elif len(designator) > 0:
        index = ring.most_recent_matching(lambda entry: entry.startswith(designator))
    else:
        raise histexpand.exception.NoSuchEvent(reference='!')
    if index is None:
        raise histexpand.exception.NoSuchEvent(reference=f'!{designator}')
    return Event(index, ring.get(index))
