"""Bulk termination plan — a small confirmation-gated state machine.

States
------
``LOADED``
    Records have been read; nothing has been sent.
``CONFIRMED``
    The operator typed the confirmation literal exactly.
``EXECUTED``
    The single terminate request has been issued.
``ABORTED``
    Any other answer was given.  Terminal, no side effect.

Only ``CONFIRMED → EXECUTED`` talks to the provider, and it does so
exactly once with every loaded id.  Per-id failures reported by the
service are returned as-is; they are never retried.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from typing import Any

from wksp_admin.config import CONFIRMATION_LITERAL
from wksp_admin.core.models import (
    TerminationFailure,
    TerminationRecord,
    TerminationResult,
)
from wksp_admin.core.protocols import WorkspacesProvider
from wksp_admin.exceptions import (
    ProviderError,
    TerminationStateError,
    WkspAdminError,
)

logger = logging.getLogger(__name__)


class TerminationState(enum.Enum):
    LOADED = "loaded"
    CONFIRMED = "confirmed"
    EXECUTED = "executed"
    ABORTED = "aborted"


class TerminationPlan:
    """Workspaces queued for termination and the gate guarding them."""

    def __init__(self, records: Sequence[TerminationRecord]) -> None:
        self._records: tuple[TerminationRecord, ...] = tuple(records)
        self._state: TerminationState = TerminationState.LOADED

    @property
    def records(self) -> tuple[TerminationRecord, ...]:
        return self._records

    @property
    def workspace_ids(self) -> tuple[str, ...]:
        return tuple(record.workspace_id for record in self._records)

    @property
    def state(self) -> TerminationState:
        return self._state

    def __len__(self) -> int:
        return len(self._records)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def confirm(self, answer: str | None) -> bool:
        """Apply the operator's *answer* and return whether it matched.

        ``None`` (a cancelled prompt) is treated like any other
        mismatch.
        """
        self._require(TerminationState.LOADED, "confirm")
        if answer == CONFIRMATION_LITERAL:
            self._state = TerminationState.CONFIRMED
            return True
        logger.info("Confirmation not given; %d workspace(s) kept", len(self))
        self._state = TerminationState.ABORTED
        return False

    def execute(self, provider: WorkspacesProvider) -> TerminationResult:
        """Send one terminate request carrying every loaded id.

        Raises
        ------
        TerminationStateError
            If the plan has not been confirmed, or was already executed.
        ProviderError
            If the request fails.  Nothing is retried.
        """
        self._require(TerminationState.CONFIRMED, "execute")
        ids = self.workspace_ids
        logger.info("Terminating %d workspace(s)", len(ids))
        try:
            response = provider.terminate_workspaces(ids)
        except WkspAdminError:
            raise
        except Exception as exc:
            raise ProviderError(
                f"Unexpected error terminating workspaces: {exc}",
            ) from exc
        finally:
            # A request was attempted; never allow a second one.
            self._state = TerminationState.EXECUTED
        return self._parse_result(ids, response)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require(self, expected: TerminationState, action: str) -> None:
        if self._state is not expected:
            raise TerminationStateError(
                f"Cannot {action} a termination plan in state "
                f"'{self._state.value}'.",
            )

    @staticmethod
    def _parse_result(
        ids: tuple[str, ...],
        response: dict[str, Any],
    ) -> TerminationResult:
        raw_failures = response.get("FailedRequests") or []
        failures = tuple(
            TerminationFailure(
                workspace_id=str(raw.get("WorkspaceId") or ""),
                error_code=str(raw.get("ErrorCode") or ""),
                error_message=str(raw.get("ErrorMessage") or ""),
            )
            for raw in raw_failures
            if isinstance(raw, dict)
        )
        for failure in failures:
            logger.warning(
                "Termination of %s failed: %s %s",
                failure.workspace_id,
                failure.error_code,
                failure.error_message,
            )
        return TerminationResult(requested=ids, failures=failures)
