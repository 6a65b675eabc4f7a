#!/usr/bin/env python3
"""Hyrox Training Hub — gyms and training plans website.

Launch: python3 run_server.py
Serves at http://0.0.0.0:8000 (or PORT env var)
"""

import uvicorn

from training_hub.config import HOST, PORT, SUPABASE_ANON_KEY, SUPABASE_SERVICE_KEY, SUPABASE_URL


def main():
    print("=" * 60)
    print("  Hyrox Training Hub")
    print("=" * 60)

    # Validate required env vars
    if not SUPABASE_URL or not (SUPABASE_ANON_KEY or SUPABASE_SERVICE_KEY):
        print("\n  WARNING: Supabase not configured. Set environment variables:")
        print("    SUPABASE_URL, SUPABASE_ANON_KEY")
        print("  Directory pages will return errors until they are set.\n")

    print(f"Starting server on {HOST}:{PORT}")
    url = f"http://{HOST}:{PORT}"
    print(f"\n  Site: {url}")
    print("  Press Ctrl+C to stop\n")

    from training_hub.app import create_app
    app = create_app()
    uvicorn.run(app, host=HOST, port=PORT, log_level="info")


if __name__ == "__main__":
    main()
