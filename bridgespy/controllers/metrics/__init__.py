"""Throughput metrics for Bridge Spy."""

from bridgespy.controllers.metrics.rate_sampler import (
    RateSample,
    RateSampler,
    payload_bytes,
)

__all__ = [
    "RateSample",
    "RateSampler",
    "payload_bytes",
]
