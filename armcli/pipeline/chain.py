from typing import Callable

import requests

from ..exceptions.custom_exceptions import ChainProtocolViolation

Interceptor = Callable[
    [requests.PreparedRequest, Callable[[requests.PreparedRequest], requests.Response]],
    requests.Response,
]


class _NextStage:
    """Handle an interceptor uses to run the rest of the chain, at most once."""

    def __init__(self, chain, index, terminal, name):
        self._chain = chain
        self._index = index
        self._terminal = terminal
        self._name = name
        self.called = False
        self.error = None
        self.violation = None

    def __call__(self, request):
        if self.called:
            self.violation = ChainProtocolViolation(
                f"Interceptor '{self._name}' invoked the next stage more than once."
            )
            raise self.violation
        self.called = True
        try:
            return self._chain._dispatch(self._index, request, self._terminal)
        except Exception as e:
            self.error = e
            raise


class InterceptorChain:
    """
    Ordered, named interceptors applied to every outbound request.

    Each interceptor is called as handler(request, call_next). It either calls
    call_next(request) exactly once and returns its response, or raises to
    abort the request. Anything else is a ChainProtocolViolation.
    """

    def __init__(self, interceptors=None):
        self._interceptors: list[tuple[str, Interceptor]] = []
        self._sealed = False
        for name, handler in interceptors or []:
            self.add(name, handler)

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self._interceptors]

    def add(self, name: str, handler: Interceptor) -> "InterceptorChain":
        if self._sealed:
            raise ChainProtocolViolation(
                f"Cannot add interceptor '{name}' after requests have started flowing."
            )
        if not name:
            raise ValueError("Interceptor name must be non-empty.")
        if name in self.names:
            raise ValueError(f"Interceptor '{name}' is already registered.")
        self._interceptors.append((name, handler))
        return self

    def run(self, request, terminal):
        self._sealed = True
        return self._dispatch(0, request, terminal)

    def _dispatch(self, index, request, terminal):
        if index == len(self._interceptors):
            return terminal(request)

        name, handler = self._interceptors[index]
        stage = _NextStage(self, index + 1, terminal, name)
        try:
            response = handler(request, stage)
        except ChainProtocolViolation:
            raise
        except Exception as e:
            if stage.violation is not None:
                raise stage.violation from None
            if stage.called and stage.error is None:
                raise ChainProtocolViolation(
                    f"Interceptor '{name}' raised after the next stage completed."
                ) from e
            raise

        if stage.violation is not None:
            raise stage.violation
        if not stage.called:
            raise ChainProtocolViolation(
                f"Interceptor '{name}' returned without invoking the next stage."
            )
        if stage.error is not None:
            raise ChainProtocolViolation(
                f"Interceptor '{name}' swallowed an error from a later stage."
            ) from stage.error
        return response
