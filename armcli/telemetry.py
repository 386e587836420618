from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from .config import CLI_NAME


def initialize_tracing(span_exporter=None) -> TracerProvider:
    """Install a global tracer provider and instrument the requests library."""
    from opentelemetry.instrumentation.requests import RequestsInstrumentor

    if span_exporter is None:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )

        span_exporter = OTLPSpanExporter()

    tracer_provider = TracerProvider(
        resource=Resource.create(
            {
                "service.name": CLI_NAME,
            }
        ),
    )
    tracer_provider.add_span_processor(BatchSpanProcessor(span_exporter))

    # Sets the global default tracer provider.
    trace.set_tracer_provider(tracer_provider)

    RequestsInstrumentor().instrument(tracer_provider=tracer_provider)
    return tracer_provider
