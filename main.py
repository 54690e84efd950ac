#!/usr/bin/env python3
"""Main entry point for GearGuard.

Usage:
    python main.py device-trust --ip 8.8.8.8 --user-agent "Mozilla/5.0"
    python main.py check-rules config/detection_rules.yaml
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from gearguard.common.config import get_config, load_detection_rules
from gearguard.common.exceptions import GearGuardException
from gearguard.common.logging import get_logger
from gearguard.data.repository import InMemoryAccountRepository
from gearguard.factory import create_engine
from gearguard.governance.audit.store import InMemoryAuditSink

logger = get_logger(__name__)


def _device_trust(args: argparse.Namespace) -> int:
    engine = create_engine(
        repository=InMemoryAccountRepository(),
        audit_sink=InMemoryAuditSink(),
    )
    result = asyncio.run(
        engine.check_device_trust_level(args.ip, args.user_agent, args.fingerprint)
    )
    print(json.dumps(result.model_dump(mode="json"), indent=2))
    return 0


def _check_rules(args: argparse.Namespace) -> int:
    rules = load_detection_rules(Path(args.rules_file))
    logger.info(f"Rules file valid (version {rules.version})")
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(prog="gearguard", description=__doc__.splitlines()[0])
    subparsers = parser.add_subparsers(dest="command", required=True)

    trust = subparsers.add_parser("device-trust", help="Classify an IP/user agent pair")
    trust.add_argument("--ip", required=True)
    trust.add_argument("--user-agent", required=True)
    trust.add_argument("--fingerprint", default=None)
    trust.set_defaults(handler=_device_trust)

    rules = subparsers.add_parser("check-rules", help="Validate a detection rules YAML file")
    rules.add_argument("rules_file")
    rules.set_defaults(handler=_check_rules)

    args = parser.parse_args(argv)
    config = get_config()
    logger.info(f"GearGuard initialized in {config.environment.value} mode")

    try:
        return args.handler(args)
    except GearGuardException as e:
        logger.error(json.dumps(e.to_dict(), default=str))
        return 1


if __name__ == "__main__":
    sys.exit(main())
