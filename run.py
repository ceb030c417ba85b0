#!/usr/bin/env python3
"""
Quick CLI runner for the Fibonacci API.

Usage:
    python run.py                    # Demo: print the record for the default index
    python run.py --n 20             # Demo for a given index
    python run.py --mode api         # Start FastAPI server
"""

import sys
import os
import argparse
import json
import logging

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("run")


def demo(raw=None):
    """Compute one record without going through HTTP and print it."""
    from engine import compute, RequestMeta

    path = f"/api/{raw}" if raw is not None else "/api"
    record = compute(raw, RequestMeta(path=path, full_uri=path))
    print(json.dumps(record.to_dict(), indent=2))
    return record


def start_api():
    import uvicorn
    from config.settings import settings
    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Fibonacci API")
    parser.add_argument(
        "--mode",
        choices=["demo", "api"],
        default="demo",
        help="Run mode: demo | api",
    )
    parser.add_argument(
        "--n",
        default=None,
        help="Raw index text for demo mode (same rules as /api/{n})",
    )
    args = parser.parse_args()

    if args.mode == "demo":
        demo(args.n)
    elif args.mode == "api":
        start_api()
