#!/usr/bin/env python3
"""
Trello Token Generator

Run this script once to get a Trello access token for the configured
API key (TRELLO_KEY / KEY).

Usage:
    python scripts/get_token.py

Follow the prompts:
1. Click the generated URL
2. Allow access on Trello
3. Copy the token Trello shows you
4. Paste it into the terminal
5. Copy the token to your .env file
"""

import asyncio
import sys
from pathlib import Path
from urllib.parse import urlencode

# Add parent directory to path so we can import from heyflow_trello
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from heyflow_trello.config import Settings
from heyflow_trello.errors import RemoteCallError
from heyflow_trello.trello import TrelloClient

AUTHORIZE_URL = "https://trello.com/1/authorize"
APP_NAME = "Heyflow Webhook"


def authorize_url(key: str) -> str:
    params = {
        "expiration": "never",
        "scope": "read,write",
        "response_type": "token",
        "name": APP_NAME,
        "key": key,
    }
    return f"{AUTHORIZE_URL}?{urlencode(params)}"


async def main():
    settings = Settings()

    print("=" * 60)
    print("Trello Token Generator")
    print("=" * 60)
    print()

    if not settings.trello_key:
        print("ERROR: TRELLO_KEY (or KEY) is not set.")
        print("Get your API key from https://trello.com/power-ups/admin")
        sys.exit(1)

    print("Step 1: Visit this URL in your browser:")
    print()
    print(authorize_url(settings.trello_key))
    print()
    print("Step 2: Click 'Allow'. Trello will show a token on the next page.")
    print()

    token = input("Paste the token here: ").strip()

    print()
    print("Verifying token...")

    client = TrelloClient(settings.model_copy(update={"trello_token": token}))
    try:
        resp = await client.call("members/me", {"fields": "username,fullName"})
    except RemoteCallError as e:
        print()
        print("ERROR:", str(e))
        sys.exit(1)

    if not resp.is_success:
        print()
        print("ERROR:", resp.status_code, resp.text)
        print()
        print("Make sure you:")
        print("  1. Copied the entire token")
        print("  2. Authorized the same API key that is in .env")
        sys.exit(1)

    member = resp.json()
    print()
    print("=" * 60)
    print(f"SUCCESS! Token works for @{member.get('username')}")
    print("=" * 60)
    print()
    print("Add it to your .env file:")
    print(f"  TRELLO_TOKEN={token}")
    print()


if __name__ == "__main__":
    asyncio.run(main())
