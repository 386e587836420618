import sys

from armcli import get_default_cli
from armcli.config import tracing_enabled


def main(args=None):
    tracer_provider = None
    if tracing_enabled():
        from armcli.telemetry import initialize_tracing

        tracer_provider = initialize_tracing()

    try:
        cli = get_default_cli()
        return cli.invoke(sys.argv[1:] if args is None else args)
    finally:
        if tracer_provider is not None:
            tracer_provider.shutdown()


if __name__ == "__main__":
    sys.exit(main())
