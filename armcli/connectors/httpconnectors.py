import requests

from knack.log import get_logger
from opentelemetry import trace
from pydantic import ValidationError

from ..exceptions.custom_exceptions import (
    AuthenticationFailedError,
    MalformedResponseError,
    TransportError,
)
from ..models.credential import Credential, Token
from ..pipeline.chain import InterceptorChain

logger = get_logger(__name__)


class HttpConnector:
    """Sends requests through an interceptor chain over a requests session."""

    def __init__(self, chain: InterceptorChain | None = None, session=None):
        self.chain = chain if chain is not None else InterceptorChain()
        self.session = session if session is not None else requests.Session()

    def send(
        self,
        method,
        url,
        headers=None,
        params=None,
        data=None,
        json_data=None,
        timeout=None,
    ) -> requests.Response:
        prepared = self.session.prepare_request(
            requests.Request(
                method=method.upper(),
                url=url,
                headers=headers,
                params=params,
                data=data,
                json=json_data,
            )
        )

        def _transport(request):
            try:
                return self.session.send(request, timeout=timeout)
            except requests.RequestException as e:
                raise TransportError(
                    f"{request.method} {request.url} failed: {e}"
                ) from e

        return self.chain.run(prepared, _transport)


class IdentityHttpConnector:
    token_path: str = "/oauth2/token"

    @staticmethod
    def token_url(port) -> str:
        return f"http://localhost:{port}{IdentityHttpConnector.token_path}"

    @staticmethod
    def fetch_token(credential: Credential, timeout=None, session=None) -> Token:
        tracer = trace.get_tracer("httpconnectors")
        http = session if session is not None else requests
        with tracer.start_as_current_span("fetch_msi_token") as span:
            url = IdentityHttpConnector.token_url(credential.endpointPort)
            span.set_attribute("url", url)
            span.set_attribute("resource", credential.resource)
            try:
                resp = http.post(
                    url,
                    headers={"Metadata": "true"},
                    data={"resource": credential.resource},
                    timeout=timeout,
                )
            except requests.RequestException as e:
                logger.debug("Fetching MSI token from %s failed: %s", url, e)
                span.set_status(
                    status=trace.StatusCode.ERROR,
                    description="Fetching MSI token failed",
                )
                span.record_exception(e)
                raise TransportError(f"Fetching MSI token from {url} failed: {e}") from e

            span.set_attribute("status_code", resp.status_code)
            try:
                if resp.status_code < 200 or resp.status_code >= 300:
                    raise AuthenticationFailedError(
                        resp.status_code,
                        f"Identity endpoint {url} returned {resp.status_code}: "
                        f"{resp.text}",
                    )
                return IdentityHttpConnector._parse_token(resp)
            except (AuthenticationFailedError, MalformedResponseError) as e:
                logger.debug("Fetching MSI token from %s failed: %s", url, e)
                span.set_status(
                    status=trace.StatusCode.ERROR,
                    description="Fetching MSI token failed",
                )
                span.record_exception(e)
                raise

    @staticmethod
    def _parse_token(resp) -> Token:
        try:
            entry = resp.json()
        except ValueError as e:
            raise MalformedResponseError(
                "Identity endpoint response is not valid JSON"
            ) from e

        if not isinstance(entry, dict):
            raise MalformedResponseError(
                f"Identity endpoint response is not a JSON object: {type(entry).__name__}"
            )
        try:
            return Token(
                tokenType=entry.get("token_type"),
                accessToken=entry.get("access_token"),
            )
        except ValidationError as e:
            raise MalformedResponseError(
                "Identity endpoint response is missing token_type or access_token"
            ) from e


def build_pipeline(settings, credentials) -> InterceptorChain:
    from ..pipeline import bearer, request_logger, user_agent

    chain = InterceptorChain()
    chain.add("user-agent", user_agent.create(user_agent.get_user_agent()))
    if settings.user_agent:
        chain.add("custom-user-agent", user_agent.create(settings.user_agent))
    chain.add("bearer-token", bearer.create(credentials, timeout=settings.timeout))
    chain.add("request-logger", request_logger.create())
    return chain
