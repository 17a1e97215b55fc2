"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translator_coordinator import DISPLAY_MESSAGES, TranslatorCoordinator, describe_failure

__all__ = [
    "DISPLAY_MESSAGES",
    "TranslatorCoordinator",
    "describe_failure",
]
