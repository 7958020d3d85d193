import argparse
import asyncio
import sys
from typing import Optional, Sequence

import structlog
import uvicorn

from core.exceptions.artifact_write_error import ArtifactWriteError
from core.exceptions.credential_load_error import CredentialLoadError
from core.exceptions.host_list_load_error import HostListLoadError
from infra.adapter.local_scheduler import get_local_scheduler
from infra.bootstrap import build_status_check_service, setup_logging
from infra.config.config import get_config

logger = structlog.stdlib.get_logger(__name__)


def run_check() -> int:
    config = get_config()
    setup_logging(config)

    logger.info("Starting server checks...")

    try:
        service = build_status_check_service(config, get_local_scheduler())
        asyncio.run(service.run_cycle())
    except (CredentialLoadError, HostListLoadError, ArtifactWriteError) as e:
        logger.error(str(e))
        return 1

    logger.info("Status and history updated successfully!")
    return 0


def run_server() -> int:
    from infra.web.app import create_app

    app = create_app()

    uvicorn.run(
        app=app,
        host=app.state.host,
        port=app.state.port,
        access_log=False,
        log_config=None,
    )

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="server-status-monitor", description="SSH reachability monitor")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("check", help="Check every server once and publish status and history")
    subparsers.add_parser("serve", help="Serve the status artifacts and check servers on a schedule")

    args = parser.parse_args(argv)

    if args.command == "check":
        return run_check()

    return run_server()


if __name__ == "__main__":
    sys.exit(main())
