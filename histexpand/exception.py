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

"""Exceptions raised while recording and expanding command history.

Every error raised by history expansion is a L{HistoryError}. These are local,
recoverable conditions: the command line being expanded is abandoned, the message
is shown to the user, and the session continues. The history ring itself is never
modified by a failed expansion.
"""


# Exception for terminating command. By extending BaseException, this exception
# cannot be caught by "except Exception".
class KillCommandException(BaseException):

    def __init__(self, cause):
        super().__init__(cause)
        self.cause = cause

    def __str__(self):
        return str(self.cause)


class StartupScriptException(KillCommandException):

    def __init__(self, config_path, startup_exception):
        super().__init__(f'Error during execution of startup script {config_path}: {startup_exception}')


class KillShellException(BaseException):

    def __init__(self, cause):
        super().__init__(cause)


class HistoryError(KillCommandException):
    MESSAGE = None

    def __init__(self, message=None, reference=None):
        super().__init__(message if message else self.MESSAGE)
        self.message = message if message else self.MESSAGE
        self.reference = reference

    def __str__(self):
        return (f'{self.reference}: {self.message}'
                if self.reference else
                self.message)


class EmptyHistory(HistoryError):
    MESSAGE = 'No history'


class NoSuchEvent(HistoryError):
    MESSAGE = 'Event not found'


class NoSuchWord(HistoryError):
    MESSAGE = 'Bad word designator'


class ModifierSyntaxError(HistoryError):
    MESSAGE = 'Bad modifier'


class NoPriorSubstitution(HistoryError):
    MESSAGE = 'No previous substitution'


# !# and the % word designator are recognized, but deliberately not supported.
class DesignatorNotImplemented(HistoryError):
    MESSAGE = 'Not implemented'
