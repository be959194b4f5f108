#!/usr/bin/env python3
# =============================================================================
# scripts/serve.py - API Server Entry Point
# =============================================================================
# Starts the Bookshelf API.
#
# Usage:
#   python scripts/serve.py
#   python scripts/serve.py --host 127.0.0.1 --port 8080
#
# Host and port default to API_HOST / API_PORT (.env or environment).
# =============================================================================

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.server import serve


def main():
    """Parse arguments and start the server."""
    parser = argparse.ArgumentParser(description="Run the Bookshelf API")
    parser.add_argument("--host", default=None, help="Bind host (default: API_HOST)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default: API_PORT)")
    args = parser.parse_args()

    serve(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
