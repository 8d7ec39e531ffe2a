"""
Deploy actions - Upload the packaged site to the hosting API.

Steps, each must succeed before the next:
1. Read the bearer token from the environment
2. Zip the output directory
3. POST the archive to the deploy endpoint
4. Remove the transient archive
"""

import http.client
import json
import logging
import os
import urllib.error
import urllib.request
from dataclasses import dataclass
from pathlib import Path

from ..constants import ARCHIVE_CONTENT_TYPE
from ..errors import ConfigurationError, ExternalToolError, MissingCredentialError
from .package import create_archive

logger = logging.getLogger(__name__)


@dataclass
class DeployResult:
    """Result of a deploy operation."""

    url: str
    status: int
    archive_size: int = 0
    files_packed: int = 0
    deploy_id: str | None = None
    deploy_url: str | None = None


def read_credential(env_var: str) -> str:
    """
    Read the deploy token from the environment.

    Raises:
        MissingCredentialError: variable unset or blank
    """
    token = os.environ.get(env_var, "").strip()
    if not token:
        raise MissingCredentialError(env_var)
    return token


def upload_archive(archive_path: Path, url: str, token: str) -> tuple[int, dict]:
    """
    POST archive bytes to the deploy endpoint.

    No timeout and no retry; any HTTP error status or transport failure
    is raised.

    Returns:
        Tuple of (http_status, parsed_json_body)

    Raises:
        ExternalToolError: HTTP error status or connection failure
    """
    data = archive_path.read_bytes()
    request = urllib.request.Request(
        url,
        data=data,
        method="POST",
        headers={
            "Content-Type": ARCHIVE_CONTENT_TYPE,
            "Authorization": f"Bearer {token}",
        },
    )

    logger.info("Uploading %d bytes to %s", len(data), url)
    try:
        with urllib.request.urlopen(request) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as e:
        raise ExternalToolError("upload", f"HTTP {e.code} {e.reason} from {url}") from e
    except urllib.error.URLError as e:
        raise ExternalToolError("upload", f"{e.reason} ({url})") from e
    except (http.client.HTTPException, OSError) as e:
        # Failures while reading the response are not wrapped in URLError
        raise ExternalToolError("upload", f"{e or type(e).__name__} ({url})") from e

    if not 200 <= status < 300:
        raise ExternalToolError("upload", f"HTTP {status} from {url}")

    try:
        payload = json.loads(body) if body else {}
    except ValueError:
        payload = {}
    return status, payload if isinstance(payload, dict) else {}


def deploy_site(output_dir: Path, archive_path: Path, url: str | None, token_env: str) -> DeployResult:
    """
    Package output_dir and upload it.

    The credential, then the deploy site, are checked before anything
    is packaged or sent.
    The archive is removed afterwards, whether or not the upload succeeded.

    Args:
        output_dir: Generated site directory
        archive_path: Where to write the transient zip
        url: Deploy endpoint (None when no site is configured)
        token_env: Name of the environment variable holding the token

    Returns:
        DeployResult with HTTP status and deploy details from the response
    """
    token = read_credential(token_env)
    if not url:
        raise ConfigurationError("Deploy site not configured (set deploy.site or BLOG_BUILD_SITE)")

    package = create_archive(output_dir, archive_path)
    try:
        archive_size = package.archive_size
        status, payload = upload_archive(archive_path, url, token)
    finally:
        archive_path.unlink(missing_ok=True)

    logger.info("Deploy accepted with HTTP %d", status)
    return DeployResult(
        url=url,
        status=status,
        archive_size=archive_size,
        files_packed=package.files_packed,
        deploy_id=payload.get("id"),
        deploy_url=payload.get("deploy_ssl_url") or payload.get("deploy_url"),
    )
