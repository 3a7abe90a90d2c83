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

import os
import shutil
import tempfile

import histexpand.ring

HOME_VARS = ('HOME', 'XDG_CONFIG_HOME', 'XDG_DATA_HOME', 'HISTEXPAND_TRACE')


def fail():
    assert False


def check_match(actual, expected):
    assert actual == expected, f'actual: {actual}\nexpected: {expected}'


def ring(*entries, capacity=100):
    return histexpand.ring.HistoryRing(capacity, entries)


# Points HOME and the XDG directories at a temporary directory for the duration of a test.
class TemporaryHome(object):

    def __init__(self):
        self.dir = None
        self.saved = None

    def __enter__(self):
        self.dir = tempfile.mkdtemp(prefix='histexpand_test_')
        self.saved = {var: os.environ.get(var, None) for var in HOME_VARS}
        os.environ['HOME'] = self.dir
        os.environ.pop('XDG_CONFIG_HOME', None)
        os.environ.pop('XDG_DATA_HOME', None)
        os.environ.pop('HISTEXPAND_TRACE', None)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        for var, value in self.saved.items():
            if value is None:
                os.environ.pop(var, None)
            else:
                os.environ[var] = value
        shutil.rmtree(self.dir, ignore_errors=True)

    def path(self, *parts):
        return os.path.join(self.dir, *parts)

    def write_startup(self, source):
        config_dir = self.path('.config', 'histexpand')
        os.makedirs(config_dir, exist_ok=True)
        with open(os.path.join(config_dir, 'startup.py'), 'w') as file:
            file.write(source)
