#!/usr/bin/env python3
"""
corecontracts command line tool.

Decodes and validates a device service request document and prints it
normalized, so request payloads can be checked before they are sent.
"""

import argparse
import logging
import sys

from corecontracts import config
from corecontracts.api.models import AddDeviceServiceRequest, UpdateDeviceServiceRequest
from corecontracts.errors import ContractError

REQUEST_KINDS = {
    "add": AddDeviceServiceRequest,
    "update": UpdateDeviceServiceRequest,
}


def parse_args(argv=None):
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(description="Validate device service request documents")
    parser.add_argument("kind", choices=sorted(REQUEST_KINDS), help="Request kind")
    parser.add_argument("file", nargs="?", default="-", help="Request document (default: stdin)")
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL, help="Logging level")
    return parser.parse_args(argv)


def read_document(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def main(argv=None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    log_level = getattr(logging, args.log_level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=config.LOG_FORMAT)
    logger = logging.getLogger("corecontracts")

    request_cls = REQUEST_KINDS[args.kind]

    try:
        data = read_document(args.file)
    except OSError as e:
        logger.error(f"Cannot read {args.file}: {e}")
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    try:
        request = request_cls.from_json(data)
    except ContractError as e:
        logger.error(f"Rejected {request_cls.__name__} from {args.file}: {e.message}")
        print(f"{e.kind}: {e.message}", file=sys.stderr)
        return 1

    print(request.to_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
