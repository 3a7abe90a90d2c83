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

import prompt_toolkit
import prompt_toolkit.history
import prompt_toolkit.key_binding
from prompt_toolkit.application import run_in_terminal
from prompt_toolkit.shortcuts import CompleteStyle

import histexpand.exception
import histexpand.expansion
import histexpand.tabcompleter
import histexpand.util


# Presents a HistoryRing to prompt_toolkit. Lines accepted by the prompt are pushed
# onto the ring, subject to its ignore policy.
class RingHistory(prompt_toolkit.history.History):

    def __init__(self, ring, policy, input_filter=None):
        super().__init__()
        self.ring = ring
        self.policy = policy
        self.input_filter = input_filter

    # Newest first, as prompt_toolkit expects.
    def load_history_strings(self):
        for index in range(self.ring.length() - 1, -1, -1):
            yield self.ring.get(index)

    def store_string(self, string):
        self.ring.push(string, self.policy, self.input_filter)

    # The ring is the only copy of the history. The ignore policy may have skipped a
    # string, or erased older copies of it, so strings are always read from the ring.
    def get_strings(self):
        return self.ring.entries()

    async def load(self):
        for string in self.load_history_strings():
            yield string


class Reader(object):

    def __init__(self, env, expander, history):
        self._env = env
        self._expander = expander
        self._history = history
        self._session = prompt_toolkit.PromptSession(
            complete_while_typing=False,
            complete_style=CompleteStyle.MULTI_COLUMN,
            completer=histexpand.tabcompleter.TabCompleter(expander.ring),
            history=history,
            key_bindings=self.setup_key_bindings())

    # Returns a command input by the user, with history references expanded.
    def input(self):
        return self._session.prompt(self._env.prompt())

    def expand(self, text):
        return (self._expander.expand(text)
                if self._env.expand_references() else
                histexpand.expansion.Expansion(text))

    # Enter expands history references before the line is accepted. If expansion fails,
    # the line stays in the buffer for editing. A line expanded with :p is shown and
    # recorded, but not returned by input().
    def setup_key_bindings(self):
        kb = prompt_toolkit.key_binding.KeyBindings()

        @kb.add('enter')
        def _(event):
            buffer = event.current_buffer
            try:
                expansion = self.expand(buffer.document.text)
            except histexpand.exception.HistoryError as e:
                message = str(e)
                run_in_terminal(lambda: histexpand.util.print_to_stderr(message))
                return
            if expansion.print_only:
                self._history.append_string(expansion.text)
                run_in_terminal(lambda: print(expansion.text))
                buffer.reset()
                return
            if expansion.changed:
                buffer.text = expansion.text
            buffer.validate_and_handle()

        return kb
