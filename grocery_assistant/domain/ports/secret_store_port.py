"""
Port (interface) for secret stores.
Infrastructure adapters (e.g. SecretsManagerAdapter) must implement this interface.
"""

from abc import ABC, abstractmethod


class ISecretStore(ABC):
    @abstractmethod
    def get_secret(self, secret_arn: str) -> dict:
        """Fetch and deserialize a secret by ARN. Returns the key-value pairs."""
        ...

    @abstractmethod
    def load_into_env(self, secret_arn: str) -> None:
        """Copy every key-value pair of the secret into the process environment."""
        ...
