"""Configuration handling for salt-pipeline."""

from dataclasses import dataclass
from pathlib import Path
import yaml


@dataclass
class Config:
    """Configuration settings for talking to a Salt API.

    Attributes:
        url: Salt API server URL.
        credentials_id: Id of the credential store entry to log in with.
        eauth: External authentication backend.
        timeout: HTTP request timeout in seconds.
        verify_ssl: Whether to verify the server's TLS certificate.
        credentials_store: Credential store kind (file, env).
        credentials_file: YAML credentials file for the file store.
        env_prefix: Variable prefix for the env store.
    """

    url: str | None = None
    credentials_id: str = "salt"
    eauth: str = "pam"
    timeout: float = 30.0
    verify_ssl: bool = True
    credentials_store: str = "file"
    credentials_file: str = "~/.salt-pipeline/credentials.yaml"
    env_prefix: str = "SALT_PIPELINE"

    def get_credentials_path(self) -> Path:
        """Get credentials file as expanded Path object."""
        return Path(self.credentials_file).expanduser()


def _section(data: dict, name: str) -> dict:
    """Return a config section, treating an empty one as no overrides."""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return section


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the file isn't valid YAML or a section isn't a mapping.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    # Extract sections
    salt = _section(data, "salt")
    http = _section(data, "http")
    credentials = _section(data, "credentials")

    return Config(
        url=salt.get("url", Config.url),
        credentials_id=salt.get("credentials_id", Config.credentials_id),
        eauth=salt.get("eauth", Config.eauth),
        timeout=http.get("timeout", Config.timeout),
        verify_ssl=http.get("verify_ssl", Config.verify_ssl),
        credentials_store=credentials.get("store", Config.credentials_store),
        credentials_file=credentials.get("file", Config.credentials_file),
        env_prefix=credentials.get("env_prefix", Config.env_prefix),
    )
