#!/usr/bin/env python3
"""
Render a saved chat transcript (JSON list of messages) into citation panels.
"""

import argparse
import json
from pathlib import Path

from dotenv import load_dotenv

from citepanel import Message, MessageRenderer, RenderConfig, load_render_config


def main() -> None:
    parser = argparse.ArgumentParser(description="Render chat messages with cited sources.")
    parser.add_argument("transcript", help="Path to a JSON file with a list of messages")
    parser.add_argument("--config", help="Path to render config YAML")
    parser.add_argument("--stats", action="store_true", help="Print pipeline diagnostics")
    args = parser.parse_args()

    load_dotenv()
    base = load_render_config(args.config) if args.config else RenderConfig()
    renderer = MessageRenderer(RenderConfig.from_env(base))

    records = json.loads(Path(args.transcript).read_text())
    rendered = [renderer.render(Message.from_dict(record)) for record in records]
    print(json.dumps([item.to_dict() for item in rendered], indent=2))

    if args.stats:
        print(f"Citation coverage: {renderer.coverage.value:.2%}")
        print(f"Parse yield: {renderer.parse_yield.value:.2%}")
        print(f"Empty panel rate: {renderer.empty_panel_rate.value:.2%}")


if __name__ == "__main__":
    main()
