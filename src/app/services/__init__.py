"""Serviços compartilhados do pipeline de envio."""

from app.services.error_normalizer import (
    ErrorParser,
    ProviderErrorDetails,
    describe_failure,
    normalize_error,
    raise_normalized,
)
from app.services.fan_out import (
    FanOutReport,
    TargetFailure,
    TargetSuccess,
    dispatch_fan_out,
    dispatch_group,
    settle_outcomes,
)
from app.services.integration_check import check_integration
from app.services.transform_pipeline import split_bridge_data, transform_payload

__all__ = [
    "ErrorParser",
    "FanOutReport",
    "ProviderErrorDetails",
    "TargetFailure",
    "TargetSuccess",
    "check_integration",
    "describe_failure",
    "dispatch_fan_out",
    "dispatch_group",
    "normalize_error",
    "raise_normalized",
    "settle_outcomes",
    "split_bridge_data",
    "transform_payload",
]
