"""Core module - prompt building, upstream completion and reply normalization."""

from .errors import (
    MindCareError,
    ConfigError,
    GatewayError,
    InvalidUpstreamFormat,
    StoreError,
    SessionNotFound,
    InvalidRequest,
)
from .normalizer import ReplyResult, SummaryResult, normalize

__all__ = [
    'MindCareError', 'ConfigError', 'GatewayError', 'InvalidUpstreamFormat',
    'StoreError', 'SessionNotFound', 'InvalidRequest',
    'ReplyResult', 'SummaryResult', 'normalize',
]
