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

from prompt_toolkit.completion import Completer, Completion

import histexpand.tokenizer

DEBUG = False
BANG = '!'


def debug(message):
    if DEBUG:
        print(message, flush=True)


# Completes !prefix to the names of commands in the history, newest first. The ring
# is only read.
class TabCompleter(Completer):

    def __init__(self, ring):
        super().__init__()
        self.ring = ring

    def __repr__(self):
        return f'TabCompleter({self.ring})'

    def get_completions(self, document, complete_event):
        word = document.get_word_before_cursor(WORD=True)
        debug(f'get_completions: word=<{word}>')
        if word.startswith(BANG) and not word.startswith(BANG + BANG):
            for candidate in self.candidates(word[len(BANG):]):
                yield Completion(BANG + candidate, start_position=-len(word))

    def candidates(self, prefix):
        candidates = []
        for index in range(self.ring.length() - 1, -1, -1):
            tokens = histexpand.tokenizer.tokenize(self.ring.get(index))
            if len(tokens) > 0:
                command = tokens[0].text
                if command.startswith(prefix) and command not in candidates:
                    candidates.append(command)
        return candidates
