# pylint: disable=line-too-long
# pylint: disable=missing-module-docstring
# pylint: disable=missing-function-docstring

from knack.arguments import ArgumentsContext, CLIArgumentType

HTTP_METHODS = ["get", "put", "post", "patch", "delete", "head", "options"]


def load_arguments(self, _):
    resource_type = CLIArgumentType(
        options_list=["--resource"],
        help="Resource (audience) the token is issued for. Defaults to core.resource.",
    )
    timeout_type = CLIArgumentType(
        options_list=["--timeout"],
        type=float,
        help="Seconds to wait for the server to respond. Defaults to core.timeout.",
    )

    with ArgumentsContext(self, "token get") as c:
        c.argument("resource", resource_type)
        c.argument("timeout", timeout_type)
        c.argument(
            "msi_port",
            options_list=["--msi-port"],
            type=int,
            help="Port of the local managed identity endpoint. Defaults to msi.port.",
        )

    with ArgumentsContext(self, "rest") as c:
        c.argument("resource", resource_type)
        c.argument("timeout", timeout_type)
        c.argument(
            "method",
            options_list=["--method", "-m"],
            type=str.lower,
            choices=HTTP_METHODS,
            help="HTTP request method.",
        )
        c.argument(
            "url",
            options_list=["--url", "--uri", "-u"],
            help="Request URL. A URL starting with '/' is resolved against core.endpoint.",
        )
        c.argument(
            "body",
            options_list=["--body", "-b"],
            help="JSON request body. Use @{file} to load from a file.",
        )
