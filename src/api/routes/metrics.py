"""Metrics endpoint for Prometheus scraping.

Every request collects the exporter registry, which runs one termination
probe. The handler is a plain function so FastAPI runs it in its
threadpool: the probe blocks for up to the configured timeout and
concurrent scrapes must not queue behind each other on the event loop.
"""

from fastapi import APIRouter, Request, Response

from src.bootstrap.metrics import TerminationExporter


def get_metrics(request: Request) -> Response:
    """Get termination metrics in Prometheus format.

    Returns:
        Response with metrics in Prometheus exposition format:
        - metadata_service_available
        - termination_imminent{instance_action}
        - termination_in (only while a notice time is ahead)
    """
    termination_exporter: TerminationExporter = request.app.state.termination_exporter
    exporter = termination_exporter.exporter
    return Response(
        content=exporter.generate_metrics(),
        media_type=exporter.content_type,
    )


def build_metrics_router(metrics_path: str) -> APIRouter:
    """Create the router serving metrics at the configured path.

    Args:
        metrics_path: Path to serve the exposition on (e.g. "/metrics").

    Returns:
        Router with the metrics route registered.
    """
    router = APIRouter(tags=["metrics"])
    router.add_api_route(
        metrics_path,
        get_metrics,
        methods=["GET"],
        summary="Prometheus metrics endpoint",
        description="Probes the instance metadata service and returns termination metrics.",
        response_class=Response,
        responses={
            200: {
                "description": "Metrics in Prometheus format",
                "content": {"text/plain": {}},
            }
        },
    )
    return router
