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
import pathlib
import sys

import histexpand.configscript
import histexpand.exception
import histexpand.locations
import histexpand.ring
import histexpand.version

TRACE_VAR = 'HISTEXPAND_TRACE'


class Environment(object):
    DEFAULT_PROMPT = f'H {histexpand.version.VERSION} $ '
    DEFAULT_HISTORY_SIZE = 128

    def __init__(self, locations=None, trace=None):
        self.locations = locations if locations else histexpand.locations.Locations()
        self.trace = trace if trace else Trace()
        self.namespace = self.initial_namespace()

    def __repr__(self):
        return f'Environment({self.locations})'

    def initial_namespace(self):
        return {
            'HISTEXPAND_VERSION': histexpand.version.VERSION,
            'HOME': self.locations.home.as_posix(),
            'HISTORY_SIZE': Environment.DEFAULT_HISTORY_SIZE,
            'HISTORY_FILE': None,  # None: use the XDG data directory
            'HISTORY_IGNORE_POLICY': 'filtered',
            'HISTORY_INPUT_FILTER': None,
            'HISTORY_APPEND': False,
            'EXPAND_HISTORY_REFERENCES': True,
            'PROMPT': Environment.DEFAULT_PROMPT
        }

    def hasvar(self, var):
        return var in self.namespace

    def getvar(self, var):
        return self.namespace.get(var, None)

    def setvar(self, var, value):
        if var in Environment.never_mutable():
            raise histexpand.exception.KillCommandException(f'Cannot modify the value of {var}.')
        self.namespace[var] = value

    def history_size(self):
        size = self.getvar('HISTORY_SIZE')
        if type(size) is not int or size < 1:
            raise histexpand.exception.KillCommandException(
                f'HISTORY_SIZE must be a positive integer: {size}')
        return size

    def history_path(self):
        path = self.getvar('HISTORY_FILE')
        return pathlib.Path(path).expanduser() if path else self.locations.data_hist()

    def ignore_policy(self):
        return histexpand.ring.IgnorePolicy.parse(self.getvar('HISTORY_IGNORE_POLICY'))

    def input_filter(self):
        input_filter = self.getvar('HISTORY_INPUT_FILTER')
        if input_filter is not None and not callable(input_filter):
            raise histexpand.exception.KillCommandException(
                f'HISTORY_INPUT_FILTER must be a function of one argument: {input_filter}')
        return input_filter

    def append_history(self):
        return bool(self.getvar('HISTORY_APPEND'))

    def expand_references(self):
        return bool(self.getvar('EXPAND_HISTORY_REFERENCES'))

    def prompt(self):
        prompt = self.getvar('PROMPT')
        try:
            return str(prompt() if callable(prompt) else prompt)
        except Exception as e:
            print(f'Bad prompt definition in {prompt}: ({type(e)}) {e}', file=sys.stderr)
            return Environment.DEFAULT_PROMPT

    @classmethod
    def create(cls, locations=None, trace=None, run_startup=True):
        env = cls(locations=locations, trace=trace)
        if run_startup:
            config = histexpand.configscript.ConfigScript(env.locations, Environment.never_mutable())
            env.namespace.update(config.run(env.namespace))
        trace_target = os.environ.get(TRACE_VAR, None)
        if trace_target and not env.trace.is_enabled():
            env.trace.enable(sys.stdout if trace_target == 'stdout' else trace_target)
        return env

    # Vars that the startup script can't modify.
    @staticmethod
    def never_mutable():
        return {'HISTEXPAND_VERSION', 'HOME'}


class Trace(object):

    def __init__(self):
        self.tracefile = None
        self.description = None

    def is_enabled(self):
        return self.tracefile is not None

    def enable(self, target):
        if target is sys.stdout:
            self.tracefile = sys.stdout
            self.description = 'stdout'
        else:
            try:
                self.tracefile = open(target, 'a')
                self.description = target
            except Exception as e:
                raise histexpand.exception.KillCommandException(
                    f'Unable to start tracing to {target}: {e}')

    def disable(self):
        if self.tracefile and self.tracefile is not sys.stdout:
            self.tracefile.close()
        self.tracefile = None
        self.description = None

    # output: the result of the phase, if any
    def write(self, phase, subject, output=None):
        assert self.tracefile
        if output is None:
            print(f'{phase} {subject}', file=self.tracefile, flush=True)
        else:
            print(f'{phase} {subject} -> {output}', file=self.tracefile, flush=True)

    def print_status(self):
        if self.tracefile is None:
            print('tracing is off')
        else:
            print(f'tracing to {self.description}')
