import platform

from ..version import VERSION

USER_AGENT_HEADER = "user-agent"
CLI_NAME = "armcli"


def get_user_agent_data() -> dict:
    return {
        "cliVersion": VERSION,
        "osType": platform.system(),
        "osVersion": platform.release(),
        "pythonVersion": platform.python_version(),
    }


def get_user_agent() -> str:
    data = get_user_agent_data()
    return (
        f"{CLI_NAME}/{data['cliVersion']} "
        f"({data['osType']} {data['osVersion']}; Python {data['pythonVersion']})"
    )


def create(identifier: str):
    """
    Build an interceptor that stamps the user-agent header with identifier.

    Any existing value is overwritten, so registering a default and a
    user-supplied identifier leaves the last one on the request.
    """
    if not identifier:
        raise ValueError("User agent identifier must be non-empty.")

    def user_agent_interceptor(request, call_next):
        request.headers[USER_AGENT_HEADER] = identifier
        return call_next(request)

    return user_agent_interceptor
