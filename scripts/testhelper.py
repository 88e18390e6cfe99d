#!/usr/bin/env python3
"""Testhelper CLI for Kyber Transit interoperability testing.

Usage:
    testhelper.py create-key NAME
    testhelper.py encrypt NAME PLAINTEXT
    testhelper.py decrypt NAME CIPHERTEXT ENCDATA
    testhelper.py health

The server URL is read from KYBER_TRANSIT_URL (default http://localhost:8080).
"""

import asyncio
import json
import os
import sys

from dotenv import load_dotenv

from kybertransit import ClientConfig, KyberTransitError, TransitApiClient


async def create_key(client: TransitApiClient, name: str) -> None:
    """Create a key and output its public key."""
    public_key = await client.create_key(name)
    print(json.dumps({"name": name, "publicKey": public_key}))


async def encrypt(client: TransitApiClient, name: str, plaintext: str) -> None:
    """Encrypt plaintext and output ciphertext and encdata."""
    result = await client.encrypt(name, plaintext)
    print(json.dumps({"ciphertext": result.ciphertext, "encdata": result.encdata}))


async def decrypt(client: TransitApiClient, name: str, ciphertext: str, encdata: str) -> None:
    """Decrypt a ciphertext/encdata pair and output the plaintext."""
    plaintext = await client.decrypt(name, ciphertext, encdata)
    print(json.dumps({"plaintext": plaintext}))


async def health(client: TransitApiClient) -> None:
    """Output server liveness."""
    print(json.dumps({"ok": await client.health()}))


COMMANDS = {
    "create-key": (create_key, 1),
    "encrypt": (encrypt, 2),
    "decrypt": (decrypt, 3),
    "health": (health, 0),
}


async def main() -> int:
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(__doc__, file=sys.stderr)
        return 2

    command, arity = COMMANDS[sys.argv[1]]
    args = sys.argv[2:]
    if len(args) != arity:
        print(f"{sys.argv[1]} expects {arity} argument(s)", file=sys.stderr)
        return 2

    load_dotenv()
    config = ClientConfig(base_url=os.getenv("KYBER_TRANSIT_URL", "http://localhost:8080"))
    async with TransitApiClient(config) as client:
        try:
            await command(client, *args)
        except KyberTransitError as e:
            print(json.dumps({"error": str(e)}))
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
