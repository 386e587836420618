# pylint: disable=missing-function-docstring
# pylint: disable=missing-module-docstring

import json
import os

from knack.log import get_logger
from knack.util import CLIError

from .config import load_settings
from .connectors.httpconnectors import HttpConnector, build_pipeline
from .credentials import get_credentials
from .pipeline.user_agent import get_user_agent, get_user_agent_data

logger = get_logger(__name__)


def get_token_cmd(resource=None, msi_port=None, timeout=None):
    settings = load_settings(msi_port=msi_port, timeout=timeout)
    credentials = get_credentials(settings, resource=resource)
    token = credentials.retrieve_token(timeout=settings.timeout)
    return token.model_dump()


def rest_cmd(method, url, body=None, resource=None, timeout=None):
    settings = load_settings(timeout=timeout)
    credentials = get_credentials(settings, resource=resource)
    connector = HttpConnector(build_pipeline(settings, credentials))

    if url.startswith("/"):
        url = f"{settings.endpoint.rstrip('/')}{url}"

    json_data = _parse_body(body) if body is not None else None
    r = connector.send(method, url, json_data=json_data, timeout=settings.timeout)
    if not r.ok:
        raise CLIError(response_error_message(r))

    if not r.content:
        return None
    try:
        return r.json()
    except ValueError:
        logger.warning("Response is not JSON, returning it as text.")
        return r.text


def version_cmd():
    return {**get_user_agent_data(), "userAgent": get_user_agent()}


def response_error_message(r):
    return f"Request to {r.url} failed with {r.status_code} {r.reason}: {r.text}"


def _parse_body(body: str):
    if body.startswith("@"):
        path = os.path.expanduser(body[1:])
        if not os.path.exists(path):
            raise CLIError(f"File {path} does not exist.")
        with open(path, "r", encoding="utf-8") as f:
            body = f.read()
    try:
        return json.loads(body)
    except ValueError as e:
        raise CLIError(f"Request body is not valid JSON: {e}") from e
