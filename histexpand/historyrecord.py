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

class HistoryRecord(object):

    # id is the number accepted by !N: 1 for the oldest surviving command.
    def __init__(self, id, command):
        self.id = id
        self.command = command

    def __repr__(self):
        return self.render()

    def __eq__(self, other):
        return isinstance(other, HistoryRecord) and self.id == other.id

    def __ne__(self, other):
        return not (self == other)

    def __lt__(self, other):
        return self.id < other.id

    def __hash__(self):
        return hash(self.id)

    def render(self):
        return HistoryRecord.format(self.id, self.command)

    @staticmethod
    def format(id, command):
        return f'  {id}:  {command}'

    # The last n records of ring, oldest first. All of them if n is None.
    @staticmethod
    def records(ring, n=None):
        length = ring.length()
        first = 0 if n is None else max(length - n, 0)
        return [HistoryRecord(i + 1, ring.get(i)) for i in range(first, length)]
