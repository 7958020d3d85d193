from pathlib import Path

import asyncssh

from core.domain.credential import Credential
from core.exceptions.credential_load_error import CredentialLoadError
from infra.config.config import SshConfig


def load_credential(ssh_config: SshConfig) -> Credential:
    """Build the run's credential, preferring key material from the environment.

    The key is parsed here so a bad key fails the run before any host is
    probed.
    """
    if not ssh_config.USERNAME:
        raise CredentialLoadError("SSH username is empty")

    if ssh_config.PRIVATE_KEY is not None:
        key_data = ssh_config.PRIVATE_KEY.get_secret_value()
    else:
        key_path = Path(ssh_config.PRIVATE_KEY_PATH)

        try:
            key_data = key_path.read_text(encoding="utf-8")
        except OSError as e:
            raise CredentialLoadError(f"cannot read private key file '{key_path}': {e.strerror or e}") from e

    passphrase = ssh_config.PASSPHRASE.get_secret_value() if ssh_config.PASSPHRASE is not None else None

    try:
        private_key = asyncssh.import_private_key(key_data, passphrase)
    except asyncssh.KeyImportError as e:
        # the message never contains the key itself
        raise CredentialLoadError(f"invalid private key: {type(e).__name__}") from e

    return Credential(username=ssh_config.USERNAME, private_key=private_key)
