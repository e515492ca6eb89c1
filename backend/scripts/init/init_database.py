#!/usr/bin/env python3
"""
Initialize the database with tables and an admin user.

Safe to run multiple times (idempotent).

Admin credentials can be provided via:
1. Command line arguments: --user-id, --password, --name, --email
2. Environment variables: ADMIN_USER_ID, ADMIN_PASSWORD, ADMIN_NAME, ADMIN_EMAIL
3. Interactive prompts (if running interactively)
"""
import sys
import os
import getpass
import argparse

# Add backend directory to path
script_dir = os.path.dirname(os.path.abspath(__file__))
backend_dir = os.path.dirname(os.path.dirname(script_dir))
sys.path.insert(0, backend_dir)

from leavedesk.core.config import settings
from leavedesk.core.database import create_client
from leavedesk.core.database.seed import init_database


def get_admin_credentials(args=None):
    """Get admin credentials from args, environment variables, or prompt"""
    # Priority: command line args > environment variables > interactive prompt
    user_id = (args.user_id if args else None) or os.environ.get("ADMIN_USER_ID")
    password = (args.password if args else None) or os.environ.get("ADMIN_PASSWORD")
    name = (args.name if args else None) or os.environ.get("ADMIN_NAME")
    email = (args.email if args else None) or os.environ.get("ADMIN_EMAIL")

    if sys.stdin.isatty():
        if not user_id:
            user_id = input("Enter admin user_id (blank to skip): ").strip()
        if user_id and not password:
            password = getpass.getpass("Enter admin password (blank to keep existing): ")
            if password:
                password_confirm = getpass.getpass("Confirm admin password: ")
                if password != password_confirm:
                    print("[ERROR] Passwords do not match!")
                    sys.exit(1)

    return user_id or None, password or None, name, email


def main():
    """Main entry point with argument parsing"""
    parser = argparse.ArgumentParser(
        description="Initialize the database with tables and an admin user",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode (prompts for credentials)
  python init_database.py

  # With command line arguments
  python init_database.py --user-id admin --password MySecurePass123 --name "Admin"

  # Using environment variables
  ADMIN_USER_ID=admin ADMIN_PASSWORD=MySecurePass123 python init_database.py
        """
    )
    parser.add_argument("--user-id", "-u", help="Admin user_id")
    parser.add_argument("--password", "-p", help="Admin password (required when the user does not exist yet)")
    parser.add_argument("--name", "-n", help="Admin display name")
    parser.add_argument("--email", "-e", help="Admin email address")

    args = parser.parse_args()
    user_id, password, name, email = get_admin_credentials(args)

    client = create_client(settings)
    success = init_database(client, user_id, password=password, name=name, email=email)
    client.disconnect()

    if success:
        print("[OK] Database initialization complete")
    else:
        print("[ERROR] Database initialization failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
