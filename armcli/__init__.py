import sys

from knack.cli import CLI
from knack.commands import CLICommandsLoader
from knack.log import get_logger
from knack.util import CLIError

from armcli._help import helps  # pylint: disable=unused-import
from .config import CLI_NAME, CONFIG_ENV_VAR_PREFIX, get_config_dir
from .exceptions.custom_exceptions import ArmCliException
from .version import VERSION

logger = get_logger(__name__)


class ArmCliCommandsLoader(CLICommandsLoader):

    def load_command_table(self, args):
        from armcli.commands import load_command_table

        load_command_table(self, args)
        return super().load_command_table(args)

    def load_arguments(self, command):
        from armcli._params import load_arguments

        load_arguments(self, command)
        super().load_arguments(command)


class ArmCli(CLI):

    def get_cli_version(self):
        return VERSION

    def exception_handler(self, ex):
        if isinstance(ex, ArmCliException):
            logger.error(ex)
            return ex.error_code
        if isinstance(ex, CLIError):
            logger.error(ex)
            return 1
        return super().exception_handler(ex)


def get_default_cli(out_file=None):
    return ArmCli(
        cli_name=CLI_NAME,
        config_dir=get_config_dir(),
        config_env_var_prefix=CONFIG_ENV_VAR_PREFIX,
        commands_loader_cls=ArmCliCommandsLoader,
        out_file=out_file or sys.stdout,
    )
