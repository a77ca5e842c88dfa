#!/usr/bin/env python3
"""
Source Space Export
Dumps the full contents of a space to a JSON file for migration tooling.

Features:
- Content model: content types, locales, editor interfaces
- Content: entries (drafts included), assets
- Webhooks
- Each part can be skipped with a flag or a SKIP_* variable in .env
"""

import os
import sys
import json
import argparse
import datetime
import logging

import requests
from slugify import slugify

sys.path.append(os.path.dirname(os.path.abspath(__file__)))
from space_export import config
from space_export.management_client import load_client
from space_export.get_full_source_space import get_full_source_space

COLLECTIONS = ("content_types", "editor_interfaces", "locales", "entries", "assets", "webhooks")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Export the full contents of a source space to JSON.")
    parser.add_argument("--space-id", help="Space to export (defaults to SOURCE_SPACE_ID)")
    parser.add_argument("--management-token", help="Management API token (defaults to SOURCE_MANAGEMENT_TOKEN)")
    parser.add_argument("--skip-content-model", action="store_true",
                        help="Skip content types, locales and editor interfaces")
    parser.add_argument("--skip-content", action="store_true", help="Skip entries and assets")
    parser.add_argument("--skip-webhooks", action="store_true", help="Skip webhooks")
    parser.add_argument("--output", help="Output file (defaults to source-space-<space id>-<timestamp>.json)")
    parser.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser.parse_args(argv)


def default_output_path(space_id):
    """Default file name, in the working directory."""
    safe_id = slugify(space_id, lowercase=False) or "space"
    stamp = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
    return f"source-space-{safe_id}-{stamp}.json"


def resolve_skip_flags(args):
    """Command-line switches win over .env, but can only turn skipping on."""
    flags = config.get_skip_flags()
    return {
        "skip_content_model": args.skip_content_model or flags["skip_content_model"],
        "skip_content": args.skip_content or flags["skip_content"],
        "skip_webhooks": args.skip_webhooks or flags["skip_webhooks"],
    }


def print_summary(data):
    print("\n📊 Summary:")
    for name in COLLECTIONS:
        print(f"  ✓ {name.replace('_', ' ').title():<18} {len(data[name]):>7,}")


def write_export(path, data):
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2, ensure_ascii=False)
        fh.write("\n")


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("=" * 80)
    print("SOURCE SPACE EXPORT")
    print("=" * 80)

    try:
        space_id = args.space_id or config.get_source_space_id()
        client = load_client(args.management_token)
        skip_flags = resolve_skip_flags(args)
    except ValueError as e:
        print(f"❌ Error: {e}")
        return 1

    print(f"\n🔗 Connecting to space {space_id} on {client.host}...")
    try:
        data = get_full_source_space(client, space_id, **skip_flags)
    except (requests.exceptions.HTTPError, RuntimeError) as e:
        print(f"❌ Export failed: {e}")
        return 1

    print_summary(data)

    output = args.output or default_output_path(space_id)
    try:
        write_export(output, data)
    except OSError as e:
        print(f"❌ Could not write {output}: {e}")
        return 1
    print(f"\n💾 Written to {output}")

    print("\n✅ COMPLETE!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
