"""
Infrastructure adapter: AWS Secrets Manager → ISecretStore.

Lets a deployment keep Langfuse keys and speech settings in one JSON secret
(GROCERY_SECRET_ARN) instead of a local .env file. Values already present in
the environment, including those loaded from .env, are never overwritten.
"""

import json
import logging
import os

import boto3

from grocery_assistant.domain.ports.secret_store_port import ISecretStore

logger = logging.getLogger(__name__)


class SecretsManagerAdapter(ISecretStore):
    def __init__(self, region: str | None = None) -> None:
        self._client = boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def get_secret(self, secret_arn: str) -> dict:
        response = self._client.get_secret_value(SecretId=secret_arn)
        return json.loads(response["SecretString"])

    def load_into_env(self, secret_arn: str) -> None:
        settings = self.get_secret(secret_arn)
        for key, value in settings.items():
            os.environ.setdefault(key, str(value))
        logger.info("Loaded %d settings from %s", len(settings), secret_arn)
