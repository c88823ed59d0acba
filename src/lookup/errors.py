"""Errors raised by the lookup pipeline."""

from __future__ import annotations


class ProviderError(Exception):
    """An outbound provider call failed (transport, timeout, auth or non-2xx)."""

    def __init__(self, provider: str, stage: str, message: str) -> None:
        super().__init__(f"{provider} {stage.replace('_', ' ')} failed: {message}")
        self.provider = provider
        self.stage = stage
