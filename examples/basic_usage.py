"""
Walk through a Craft document with the craftblocks SDK.

Point ``CRAFT_BASE_URL`` at a Craft API link, then run the script to print the
top-level structure, the total block count and a sample search.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from craftblocks import CraftClient  # noqa: E402
from craftblocks.errors import CraftError  # noqa: E402

PREVIEW_CHARS = 2000


def truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def main() -> int:
    base_url = os.getenv("CRAFT_BASE_URL")
    if not base_url:
        print("CRAFT_BASE_URL is not set", file=sys.stderr)
        return 1

    with CraftClient(base_url) as client:
        print("1. Fetching root document structure (depth=1)...")
        root = client.blocks.fetch(max_depth=1)
        print(f"   Document title: {root.markdown}")
        print(f"   Type: {root.type} | Style: {root.text_style}")
        print(f"   Top-level blocks: {len(root.content or [])}")

        print("2. Top-level blocks:")
        for i, block in enumerate(root.content or []):
            print(f"   [{i}] ID: {block.id} | Type: {block.type} | Style: {block.text_style}")
            if block.markdown:
                print(f"       Content: {truncate(block.markdown, 80)}")

        print("3. Fetching full document structure...")
        full = client.blocks.fetch()
        print(f"   Total blocks in document: {full.count()}")

        print("4. Searching for 'TODO' or 'task'...")
        try:
            matches = client.blocks.search("TODO|task", before_block_count=2, after_block_count=2)
        except CraftError as exc:
            print(f"   Search failed: {exc}")
        else:
            print(f"   Found {len(matches)} matches")
            for i, match in enumerate(matches[:3]):
                print(f"   [{i}] Block {match.block_id}: {truncate(match.markdown, 60)}")
            if len(matches) > 3:
                print(f"   ... and {len(matches) - 3} more")

        print("5. Full document structure (JSON):")
        dumped = json.dumps(full.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2)
        if len(dumped) > PREVIEW_CHARS:
            print(dumped[:PREVIEW_CHARS])
            print(f"\n... [truncated, full size: {len(dumped)} bytes]")
        else:
            print(dumped)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
