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

import histexpand.event
import histexpand.exception

from test_base import fail, check_match, ring

Event = histexpand.event.Event
resolve_event = histexpand.event.resolve_event


def history():
    return ring('ls -la', 'echo hi', 'ls -R')


def check_event(designator, index, text):
    check_match(resolve_event(designator, history()), Event(index, text))


def check_no_such_event(designator, r=None):
    try:
        resolve_event(designator, r if r is not None else history())
        fail()
    except histexpand.exception.NoSuchEvent:
        pass


def test_last():
    check_event('!', 2, 'ls -R')


def test_relative():
    check_event('-1', 2, 'ls -R')
    check_event('-2', 1, 'echo hi')
    check_event('-3', 0, 'ls -la')
    check_no_such_event('-4')
    check_no_such_event('-0')


def test_absolute():
    check_event('1', 0, 'ls -la')
    check_event('3', 2, 'ls -R')
    check_no_such_event('0')
    check_no_such_event('4')


def test_last_is_length():
    r = history()
    check_match(resolve_event('!', r), resolve_event(str(r.length()), r))
    check_match(resolve_event('!', r).text, r.newest())


def test_prefix():
    # Most recent match wins
    check_event('ls', 2, 'ls -R')
    check_event('ls -l', 0, 'ls -la')
    check_event('ec', 1, 'echo hi')
    check_no_such_event('cat')


def test_substring():
    check_event('?hi?', 1, 'echo hi')
    check_event('?hi', 1, 'echo hi')
    check_event('?-', 2, 'ls -R')
    check_event('?-l?', 0, 'ls -la')
    check_no_such_event('?cat?')
    check_no_such_event('??')


def test_current_line():
    for r in (history(), ring()):
        try:
            resolve_event('#', r)
            fail()
        except histexpand.exception.DesignatorNotImplemented:
            pass


def test_empty_history():
    for designator in ('!', '1', '-1', 'ls', '?ls?'):
        try:
            resolve_event(designator, ring())
            fail()
        except histexpand.exception.EmptyHistory:
            pass


def test_ring_unchanged():
    r = history()
    before = r.entries()
    resolve_event('ls', r)
    check_no_such_event('nope', r)
    check_match(r.entries(), before)
    check_match(r.new_since_persist, 0)
