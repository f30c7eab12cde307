#!/usr/bin/env python3
"""
Quick checks so the backend can start. Run from repo root or backend/:
  python backend/scripts/check_backend.py
"""
import os
import sys
from pathlib import Path

# Run from backend/
backend_dir = Path(__file__).resolve().parent.parent
os.chdir(backend_dir)
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

PORT = 8080


def main():
    errors = []

    # 1) .env
    env_file = backend_dir / ".env"
    if not env_file.exists():
        errors.append("backend/.env missing. Set DATABASE_URL, TICKETMASTER_API_KEY, GOOGLE_MAPS_API_KEY, etc.")
    else:
        print("OK  .env exists")

    # 2) DB connection and favorites table
    try:
        from sqlalchemy import inspect, text
        from eventfinder.db.session import engine
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("OK  Database connection (DATABASE_URL)")
        if "favorites" in inspect(engine).get_table_names():
            print("OK  favorites table exists")
        else:
            errors.append("favorites table missing. Run: cd backend && alembic upgrade head")
            print("FAIL favorites table missing")
    except Exception as e:
        errors.append(f"Database: {e}")
        print("FAIL Database:", e)

    # 3) Provider keys (missing keys only degrade features)
    from eventfinder.config import settings
    for name, value in (
        ("TICKETMASTER_API_KEY", settings.ticketmaster_api_key),
        ("GOOGLE_MAPS_API_KEY", settings.google_maps_api_key),
        ("SPOTIFY_CLIENT_ID", settings.spotify_client_id),
        ("SPOTIFY_CLIENT_SECRET", settings.spotify_client_secret),
    ):
        print(("OK  " if value else "WARN") + f" {name}" + ("" if value else " not set"))

    # 4) App import (catches missing deps, bad imports)
    try:
        from eventfinder.main import app  # noqa: F401
        print("OK  App import (eventfinder.main)")
    except Exception as e:
        errors.append(f"App import: {e}")
        print("FAIL App import:", e)
        print("\nFix the above, then run:")
        print(f"  cd backend && uvicorn eventfinder.main:app --reload --host 0.0.0.0 --port {PORT}")
        return 1

    # 5) Port
    try:
        import socket
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(("127.0.0.1", PORT))
        print(f"OK  Port {PORT} is free")
    except OSError:
        errors.append(f"Port {PORT} is in use. Stop the other process or use another port.")
        print(f"FAIL Port {PORT} is in use")

    if errors:
        print("\n---")
        for e in errors:
            print("•", e)
        return 1

    print(f"\nAll checks passed. Start with: cd backend && uvicorn eventfinder.main:app --host 0.0.0.0 --port {PORT}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
