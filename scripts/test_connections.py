#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify MongoDB and the AI provider are reachable.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from careercraft.core.config import get_settings
from careercraft.db.mongodb import connect_mongo, test_mongo_connection
from careercraft.services.openai_client import build_openai_client


def main():
    settings = get_settings()
    print("=" * 50)
    print("CAREERCRAFT - CONNECTION TEST")
    print("=" * 50)

    # Test MongoDB
    print("\n[1] Testing MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    try:
        client = connect_mongo()
    except Exception as e:
        print(f"    ❌ MongoDB: FAILED ({e})")
    else:
        if test_mongo_connection(client):
            db = client[settings.mongodb_db]
            print("    ✅ MongoDB: CONNECTED")
            print(f"    Collections: {', '.join(sorted(db.list_collection_names())) or '(none)'}")
        else:
            print("    ❌ MongoDB: FAILED")
        client.close()

    # Test AI provider (only if API key is set)
    print("\n[2] Testing AI provider...")
    ai_client = build_openai_client()
    if ai_client.is_configured:
        print(f"    Base URL: {settings.openai_base_url or 'https://api.openai.com/v1'}")
        print(f"    Model: {settings.ai_model}")
        if ai_client.test_connection():
            print("    ✅ AI provider: CONNECTED")
        else:
            print("    ❌ AI provider: FAILED")
    else:
        print("    ⚠️  AI provider: OPENAI_API_KEY not configured (AI routes will return 500)")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
