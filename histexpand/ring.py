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

import collections
from enum import Enum, auto

import histexpand.exception


class IgnorePolicy(Enum):
    ALWAYS = auto()
    FILTERED = auto()
    IGNORE_DUPS = auto()
    ERASE_DUPS = auto()

    def skips_blank(self):
        return self is not IgnorePolicy.ALWAYS

    @staticmethod
    def parse(value):
        # Also accepts the values of Eshell's eshell-hist-ignoredups: nil, t, erase.
        if isinstance(value, IgnorePolicy):
            return value
        if value is None or value is False:
            return IgnorePolicy.FILTERED
        if value is True:
            return IgnorePolicy.IGNORE_DUPS
        try:
            return POLICY_NAMES[str(value).lower()]
        except KeyError:
            raise histexpand.exception.KillCommandException(f'Unknown history ignore policy: {value}')


POLICY_NAMES = {
    'always': IgnorePolicy.ALWAYS,
    'filtered': IgnorePolicy.FILTERED,
    'ignoredups': IgnorePolicy.IGNORE_DUPS,
    'erasedups': IgnorePolicy.ERASE_DUPS,
    'erase': IgnorePolicy.ERASE_DUPS
}


class Direction(Enum):
    OLDER = -1
    NEWER = 1


# Index 0 is the oldest surviving entry, len - 1 the newest. Pushing onto a full ring
# evicts the oldest entry.
class HistoryRing(object):

    def __init__(self, capacity, entries=()):
        if type(capacity) is not int or capacity < 1:
            raise histexpand.exception.KillCommandException(
                f'History capacity must be a positive integer: {capacity}')
        self.capacity = capacity
        self._entries = collections.deque(entries, maxlen=capacity)
        self.new_since_persist = 0

    def __repr__(self):
        return f'HistoryRing({len(self._entries)}/{self.capacity})'

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    def length(self):
        return len(self._entries)

    def entries(self):
        return list(self._entries)

    def push(self, line, policy=IgnorePolicy.FILTERED, input_filter=None):
        """Record line as the newest entry, unless policy says to skip it. Returns True
        if the line was added.
        """
        policy = IgnorePolicy.parse(policy)
        if policy.skips_blank():
            if len(line.strip()) == 0:
                return False
            if input_filter is not None and not input_filter(line):
                return False
        if policy is IgnorePolicy.IGNORE_DUPS:
            if len(self._entries) > 0 and self._entries[-1] == line:
                return False
        elif policy is IgnorePolicy.ERASE_DUPS:
            if line in self._entries:
                # Erased copies that were never persisted no longer count as new.
                self.new_since_persist -= self.new_entries().count(line)
                self._entries = collections.deque((entry for entry in self._entries if entry != line),
                                                  maxlen=self.capacity)
        self._entries.append(line)
        self.new_since_persist += 1
        return True

    def get(self, index):
        self.check_not_empty()
        if type(index) is not int or not (0 <= index < len(self._entries)):
            raise IndexError(f'History index out of range: {index}')
        return self._entries[index]

    def newest(self):
        self.check_not_empty()
        return self._entries[-1]

    def most_recent_matching(self, predicate, start=None, direction=Direction.OLDER):
        """Scan from start (default: the newest entry) in the given direction, wrapping
        around the ring at most once. Returns the index of the first entry satisfying
        predicate, or None.
        """
        self.check_not_empty()
        n = len(self._entries)
        if start is None:
            start = n - 1
        if not (0 <= start < n):
            raise IndexError(f'History index out of range: {start}')
        step = direction.value
        for i in range(n):
            index = (start + i * step) % n
            if predicate(self._entries[index]):
                return index
        return None

    def new_entries(self):
        n = min(self.new_since_persist, len(self._entries))
        return list(self._entries)[len(self._entries) - n:]

    def mark_persisted(self):
        self.new_since_persist = 0

    def check_not_empty(self):
        if len(self._entries) == 0:
            raise histexpand.exception.EmptyHistory()
