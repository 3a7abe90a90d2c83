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

import pathlib

import histexpand.exception
import histexpand.ring

# The history file has one entry per line. A newline inside an entry is written as
# DEL, so that it isn't mistaken for the end of the entry.
NEWLINE = '\n'
NEWLINE_PLACEHOLDER = '\x7f'


class HistoryFile(object):

    def __init__(self, path):
        self.path = pathlib.Path(path)

    def __repr__(self):
        return f'{self.__class__.__name__}({self.path})'

    def __hash__(self):
        return hash(self.path)

    def __eq__(self, other):
        return self is other or (type(self) is type(other) and self.path == other.path)

    # Returns entries, oldest first.
    def load(self):
        try:
            with open(self.path, 'r', newline=NEWLINE) as file:
                return [HistoryFile.decode(line.rstrip(NEWLINE))
                        for line in file
                        if len(line.rstrip(NEWLINE)) > 0]
        except FileNotFoundError:
            return []
        except (IsADirectoryError, PermissionError, UnicodeDecodeError) as e:
            raise histexpand.exception.KillCommandException(f'Unable to read history file {self.path}: {e}')

    def flush(self, entries, append_only):
        """Write entries, oldest first. If append_only, the entries are added to the end of
        the file. This is how multiple sessions share one history file: each appends what
        it added. Otherwise the file is replaced by entries.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'a' if append_only else 'w', newline=NEWLINE) as file:
                for entry in entries:
                    file.write(HistoryFile.encode(entry))
                    file.write(NEWLINE)
        except OSError as e:
            raise histexpand.exception.KillCommandException(f'Unable to write history file {self.path}: {e}')

    # Write out ring's entries: just those added since the last save if append_only,
    # all of them otherwise.
    def save(self, ring, append_only):
        self.flush(ring.new_entries() if append_only else ring.entries(), append_only)
        ring.mark_persisted()

    def read_ring(self, capacity):
        return histexpand.ring.HistoryRing(capacity, self.load())

    @staticmethod
    def encode(entry):
        return entry.replace(NEWLINE, NEWLINE_PLACEHOLDER)

    @staticmethod
    def decode(line):
        return line.replace(NEWLINE_PLACEHOLDER, NEWLINE)
