"""Verify that backend/.env exists and defines the database settings."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import dotenv_values

from app.config import Settings

REQUIRED_VARS = ["DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME"]
OPTIONAL_VARS = ["SERVER_PORT", "SECRET_KEY", "LOG_LEVEL", "STATIC_DIR", "CLUB_ID"]


def _display(name: str, value: str) -> str:
    if name in ("DB_PASSWORD", "SECRET_KEY"):
        return "*" * min(len(value), 8)
    return value


def verify_env() -> int:
    env_path = Settings.Config.env_file
    print("Verifying .env configuration...\n")
    if not os.path.exists(env_path):
        print(".env file not found!")
        print(f"   Expected location: {env_path}")
        print("   Create it from .env.example: cp .env.example .env\n")
        return 1
    print(f".env file found: {env_path}\n")

    values = dotenv_values(env_path)
    all_valid = True

    print("Required variables:")
    for name in REQUIRED_VARS:
        value = values.get(name)
        if value is None or (value == "" and name != "DB_PASSWORD"):
            print(f"  x {name}: not set")
            all_valid = False
        else:
            print(f"  ok {name}: {_display(name, value)}")

    print("\nOptional variables:")
    for name in OPTIONAL_VARS:
        value = values.get(name)
        print(f"  {'ok' if value else '-'} {name}: {_display(name, value) if value else 'not set (default used)'}")

    if not all_valid:
        print("\nSome required variables are missing.")
        return 1
    print("\nAll required variables are set.")
    return 0


if __name__ == "__main__":
    sys.exit(verify_env())
