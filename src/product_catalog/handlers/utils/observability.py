"""
Logging, tracing and metrics shared by every product catalog layer.

Handlers, the product service and the DynamoDB gateway all import these
instances so that one invocation produces a single correlated log stream,
trace and EMF metrics blob.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

# CloudWatch namespace for ProductCreated, ProductNotFound, ValidationFailed, ...
METRICS_NAMESPACE = 'ProductCatalog'

# Structured JSON logs; level from LOG_LEVEL, service from POWERTOOLS_SERVICE_NAME
logger: Logger = Logger()

# X-Ray segments for handlers and gateway calls; off when POWERTOOLS_TRACE_DISABLED is "true"
tracer: Tracer = Tracer()

# POWERTOOLS_METRICS_NAMESPACE overrides the namespace at deploy time
metrics = Metrics(namespace=METRICS_NAMESPACE)
