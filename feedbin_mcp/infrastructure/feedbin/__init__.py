"""Feedbin API client package."""

from .client import FeedbinClient, FeedbinResponse

__all__ = ["FeedbinClient", "FeedbinResponse"]
