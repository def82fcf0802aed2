"""Outbound webhook to the external remediation dispatcher."""

import os
import logging
from typing import Optional

import requests

from .exceptions import NotificationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


class DispatcherClient:
    """Fire-and-forget notifier for failed check-ins.

    A client built without a webhook URL is disabled and silently skips
    notifications. Failures are logged and never retried.
    """

    def __init__(self, webhook_url: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        self.webhook_url = webhook_url or None
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return self.webhook_url is not None

    def send(self, payload: dict) -> int:
        """POST the payload as JSON and return the response status code.

        Raises:
            NotificationError: on transport errors or a non-2xx response.
        """
        if not self.enabled:
            raise NotificationError("", "Dispatcher webhook URL is not configured")
        try:
            resp = requests.post(self.webhook_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise NotificationError(self.webhook_url, f"Webhook request failed: {e}") from e
        if not 200 <= resp.status_code < 300:
            raise NotificationError(
                self.webhook_url, f"Webhook returned status {resp.status_code}"
            )
        return resp.status_code

    def notify_failed_checkin(self, student_id: int, quiz_score: float, focus_minutes: float) -> None:
        """Tell the dispatcher a student failed a check-in. Never raises."""
        if not self.enabled:
            logger.debug("Dispatcher webhook not configured; skipping notification")
            return
        payload = {
            "student_id": student_id,
            "quiz_score": quiz_score,
            "focus_minutes": focus_minutes,
        }
        logger.info(f"Triggering webhook: {self.webhook_url}")
        try:
            status_code = self.send(payload)
        except NotificationError as e:
            logger.error(f"Webhook failed for student {student_id}: {e.message}")
            return
        logger.info(f"Webhook sent for student {student_id}, status: {status_code}")


def get_dispatcher() -> DispatcherClient:
    """Dependency building the dispatcher client from the environment."""
    return DispatcherClient(
        webhook_url=os.getenv("DISPATCHER_WEBHOOK_URL"),
        timeout=float(os.getenv("DISPATCHER_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)),
    )
