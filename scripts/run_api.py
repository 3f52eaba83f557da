#!/usr/bin/env python3
"""Run the FastAPI marketplace server.

This script starts the uvicorn server for the collectible marketplace API.

Usage:
    python scripts/run_api.py [--host HOST] [--port PORT] [--no-seed]

Environment:
    MARKETPLACE_SEED_SAMPLES - Load sample collectibles on startup (default: true)
    MARKETPLACE_LOCK_TIMEOUT - Seconds to wait for exclusive state access (default: 5.0)
    MARKETPLACE_MAX_UPLOAD_BYTES - Upload size limit (default: 5 MiB)

Examples:
    python scripts/run_api.py
    python scripts/run_api.py --host 0.0.0.0 --port 3001
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

# Ensure imports work when invoked as a script
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


def main() -> int:
    """Run the API server."""
    parser = argparse.ArgumentParser(description="Run the FastAPI collectible marketplace server.")
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=3001,
        help="Port to bind to (default: 3001)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start with an empty marketplace instead of the sample collectibles",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Log level (default: info)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.no_seed:
        os.environ["MARKETPLACE_SEED_SAMPLES"] = "false"

    print(f"Starting marketplace API on {args.host}:{args.port}")
    print("Endpoints:")
    print(f"  - GET  http://{args.host}:{args.port}/nfts")
    print(f"  - POST http://{args.host}:{args.port}/nft/upload-xml")
    print(f"  - GET  http://{args.host}:{args.port}/marketplace/listings")
    print(f"  - GET  http://{args.host}:{args.port}/marketplace/stats")
    print()

    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn is not installed", file=sys.stderr)
        print("Install with: pip install -e .", file=sys.stderr)
        return 1

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())
