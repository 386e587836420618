# pylint: disable=missing-module-docstring
# pylint: disable=missing-function-docstring

from knack.commands import CommandGroup


def load_command_table(self, _):
    with CommandGroup(self, "token", "armcli.custom#{}") as g:
        g.command("get", "get_token_cmd")

    with CommandGroup(self, "", "armcli.custom#{}") as g:
        g.command("rest", "rest_cmd")
        g.command("version", "version_cmd")
