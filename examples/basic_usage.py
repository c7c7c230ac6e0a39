#!/usr/bin/env python3
"""
Basic usage example for the BotKit module.
"""
import asyncio
import json
import os
import tempfile

from BotKit import check_uin, deep_clone, deep_merge, get_stack, read, read_sync, write, write_sync


def print_json(data):
    """Print data as formatted JSON."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def async_round_trip(path, data):
    """Write and read back a file with the asyncio helpers."""
    await write(path, data)
    return await read(path)


def main():
    """Main function."""
    defaults = {
        "owner": 2854196310,
        "plugins": {"echo": {"enabled": True, "prefix": "!"}, "admin": {"enabled": False}},
    }
    local = {"plugins": {"admin": {"enabled": True}}}

    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "settings.yml")

        print("Merging local settings over defaults...")
        settings = deep_merge(deep_clone(defaults), local)
        print_json(settings)

        print("\nWriting and reading back settings.yml...")
        write_sync(path, settings)
        print_json(read_sync(path))

        print("\nSame thing with the asyncio helpers...")
        print_json(asyncio.run(async_round_trip(path, settings)))

    print("\nChecking account numbers...")
    for uin in (settings["owner"], 1234, 100000000000):
        print(f"{uin}: {check_uin(uin)}")

    print(f"\nCalled from: {get_stack()[0].function}")


if __name__ == '__main__':
    main()
