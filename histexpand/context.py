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

from collections import namedtuple

# State carried from one step of an expansion to the next. Never modified in place:
# steps that change it return a new Context (via _replace).
#     ring:         The history ring references are resolved against.
#     substitution: The most recent Substitution, for :& and empty :s patterns.
#     print_only:   Set by :p. The expanded line is to be shown and recorded, not run.
Context = namedtuple('Context', ['ring', 'substitution', 'print_only'])

Substitution = namedtuple('Substitution', ['pattern', 'replacement'])


def initial(ring=None, substitution=None):
    return Context(ring, substitution, False)
