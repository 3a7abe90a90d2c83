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

import atexit
import sys

import histexpand.env
import histexpand.exception
import histexpand.expansion
import histexpand.historyfile
import histexpand.historyrecord
import histexpand.reader
import histexpand.tokenizer
import histexpand.util


def echo(command):
    print(command)


class Main(object):
    """A session: one history ring, loaded from the history file at startup and saved
    on shutdown, plus the expander resolving references against it. Running commands
    is delegated to runner, a function of the expanded command line.
    """

    HISTORY_N_DEFAULT = 20

    def __init__(self, env, runner=None):
        self.env = env
        self.runner = runner if runner else echo
        self.history_file = histexpand.historyfile.HistoryFile(env.history_path())
        self.ring = self.history_file.read_ring(env.history_size())
        self.expander = histexpand.expansion.Expander(self.ring, env.trace)
        self.builtins = {'history': self.history,
                         'trace': self.trace}
        atexit.register(self.shutdown)

    def __repr__(self):
        return f'Main({self.ring}, {self.history_file})'

    def shutdown(self):
        try:
            self.history_file.save(self.ring, self.env.append_history())
        except histexpand.exception.KillCommandException as e:
            histexpand.util.print_to_stderr(e)
        self.env.trace.disable()
        atexit.unregister(self.shutdown)

    def expand(self, line):
        return (self.expander.expand(line)
                if self.env.expand_references() else
                histexpand.expansion.Expansion(line))

    def record(self, line):
        return self.ring.push(line, self.env.ignore_policy(), self.env.input_filter())

    # Handle one line of input not coming through the Reader: expand, record, run.
    def process(self, line):
        try:
            expansion = self.expand(line)
            self.record(expansion.text)
            if expansion.print_only:
                print(expansion.text)
            else:
                self.execute(expansion.text)
        except histexpand.exception.KillCommandException as e:
            histexpand.util.print_to_stderr(e)

    def execute(self, command):
        words = histexpand.tokenizer.words(command)
        if len(words) == 0:
            return
        builtin = self.builtins.get(words[0], None)
        if builtin:
            builtin(words[1:])
        else:
            self.runner(command)

    # Builtins

    def history(self, args):
        if len(args) > 1:
            raise histexpand.exception.KillCommandException('Usage: history [N]')
        n = Main.HISTORY_N_DEFAULT
        if args:
            try:
                n = int(args[0])
            except ValueError:
                n = -1
            if n < 1:
                raise histexpand.exception.KillCommandException(f'N must be a positive integer: {args[0]}')
        for record in histexpand.historyrecord.HistoryRecord.records(self.ring, n):
            print(record.render())

    def trace(self, args):
        trace = self.env.trace
        if len(args) == 0:
            trace.print_status()
        elif len(args) > 1:
            raise histexpand.exception.KillCommandException('Usage: trace [off | stdout | FILENAME]')
        else:
            trace.disable()
            if args[0] == 'stdout':
                trace.enable(sys.stdout)
            elif args[0] != 'off':
                trace.enable(args[0])

    # Input loops

    def run_interactive(self):
        history = histexpand.reader.RingHistory(self.ring, self.env.ignore_policy(), self.env.input_filter())
        reader = histexpand.reader.Reader(self.env, self.expander, history)
        try:
            while True:
                try:
                    command = reader.input()
                    self.execute(command)
                except histexpand.exception.KillCommandException as e:
                    histexpand.util.print_to_stderr(e)
                except KeyboardInterrupt:  # ctrl-C
                    print()
        except EOFError:  # ctrl-d
            print()

    def run_script(self, lines):
        for line in lines:
            self.process(line.rstrip('\n'))


def main():
    try:
        env = histexpand.env.Environment.create()
        main = Main(env)
        if sys.stdin.isatty():
            main.run_interactive()
        else:
            main.run_script(sys.stdin)
        main.shutdown()
    except (histexpand.exception.KillShellException,
            histexpand.exception.KillCommandException) as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
