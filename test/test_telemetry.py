#!/usr/bin/env python3

import unittest
import unittest.mock as mock

from opentelemetry.instrumentation.requests import RequestsInstrumentor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)

from armcli.credentials import MsiTokenCredentials
from armcli.models.credential import Credential
from armcli.telemetry import initialize_tracing
from helpers import make_response


class TestTelemetry(unittest.TestCase):
    def test_token_fetch_is_traced(self):
        exporter = InMemorySpanExporter()
        tracer_provider = initialize_tracing(span_exporter=exporter)
        self.addCleanup(tracer_provider.shutdown)
        self.addCleanup(RequestsInstrumentor().uninstrument)

        session = mock.MagicMock()
        session.post.return_value = make_response(
            200, {"token_type": "Bearer", "access_token": "abc123"}
        )
        MsiTokenCredentials(
            Credential(resource="https://vault.azure.net", endpointPort=8290),
            session=session,
        ).retrieve_token()
        tracer_provider.force_flush()

        spans = [s for s in exporter.get_finished_spans() if s.name == "fetch_msi_token"]
        self.assertEqual(len(spans), 1)
        self.assertEqual(
            spans[0].attributes["url"], "http://localhost:8290/oauth2/token"
        )
        self.assertEqual(spans[0].attributes["status_code"], 200)


if __name__ == "__main__":
    unittest.main()
