"""
The Lambda Adapter for the Greeter service.

This module is the main entry point for the AWS Lambda function. It is
responsible for:
1.  Initializing and configuring AWS Lambda Powertools (Logger, Tracer and
    Metrics).
2.  Handing the raw event to the core logic (`respond`), which validates it
    and builds the greeting.
3.  Logging and counting rejected events before letting the error propagate
    to the Lambda runtime, which turns it into an error response.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from .config import get_config
from .core import respond
from .exceptions import GreeterError, get_error_context

# --- Global & Reusable Components ---
CONFIG = get_config()

logger = Logger(service=CONFIG.service_name, level=CONFIG.log_level)
tracer = Tracer(service=CONFIG.service_name)
metrics = Metrics(namespace=CONFIG.metrics_namespace, service=CONFIG.service_name)


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def handler(event: Any, context: LambdaContext) -> str:
    """Main Lambda handler: returns a greeting string or raises."""
    metrics.add_dimension("environment", CONFIG.environment)
    tracer.put_annotation(key="greeting_mode", value=CONFIG.greeting_mode)

    try:
        message = respond(event, CONFIG)
    except GreeterError as e:
        metrics.add_metric(name="RejectedEvents", unit=MetricUnit.Count, value=1)
        logger.warning(f"Rejected event: {e}", extra=get_error_context(e))
        raise

    metrics.add_metric(name="GreetingsServed", unit=MetricUnit.Count, value=1)
    logger.info(
        "Greeting produced",
        extra={
            "greeting_mode": CONFIG.greeting_mode,
            "release_version": CONFIG.release_version,
        },
    )
    return message
