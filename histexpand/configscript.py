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

import histexpand.exception
import histexpand.util


class ConfigScript(object):
    """Runs the user's startup script, returning the names it defines. A missing script
    defines nothing.
    """

    def __init__(self, locations, never_mutable=()):
        self.locations = locations
        self.never_mutable = never_mutable

    def run(self, namespace=None):
        locals = self.read_config(namespace if namespace is not None else {})
        never_mutable_assigned = sorted(var for var in self.never_mutable if var in locals)
        if never_mutable_assigned:
            raise histexpand.exception.KillCommandException(
                f'Startup script must not modify the value of variables'
                f' {", ".join(never_mutable_assigned)}.')
        return {var: value for var, value in locals.items() if not var.startswith('_')}

    def read_config(self, namespace):
        config_path = self.locations.config_startup()
        if not config_path.exists():
            return {}
        try:
            with open(config_path) as config_file:
                config_source = config_file.read()
        except OSError as e:
            raise histexpand.exception.KillCommandException(
                f'Unable to read config script {config_path}: {e}')
        # Execute the config file. Imported and newly-defined symbols go into locals.
        locals = dict()
        try:
            exec(config_source, dict(namespace), locals)
        except Exception as e:
            histexpand.util.print_stack_of_current_exception()
            raise histexpand.exception.StartupScriptException(config_path, e)
        return locals
