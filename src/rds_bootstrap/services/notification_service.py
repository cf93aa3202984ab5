"""
Notification service for SNS alerts on critical bootstrap errors.
"""

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from typing import Optional

# SNS rejects subjects longer than 100 characters
SNS_SUBJECT_LIMIT = 100


class NotificationService:
    """Best-effort alerting through an SNS topic."""

    def __init__(self, topic_arn: Optional[str], region: str, logger, client=None):
        self.topic_arn = topic_arn
        self.region = region
        self.logger = logger
        self._client = client

    @property
    def enabled(self) -> bool:
        return bool(self.topic_arn)

    def _get_client(self):
        """Create the SNS client on first use."""
        if self._client is None:
            self._client = boto3.client("sns", region_name=self.region)
        return self._client

    def send_notification(self, subject: str, message: str) -> bool:
        """
        Publish an alert to the configured topic.

        Returns False when SNS is not configured or publishing fails; failures
        are logged and never raised.
        """
        if not self.enabled:
            return False

        self.logger.info(f"SNS Alert: {subject} - {message}")

        try:
            response = self._get_client().publish(
                TopicArn=self.topic_arn,
                Subject=subject[:SNS_SUBJECT_LIMIT],
                Message=message,
            )
            self.logger.debug(f"SNS message id: {response.get('MessageId')}")
            return True
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"Failed to send SNS notification: {str(e)}")
            return False
