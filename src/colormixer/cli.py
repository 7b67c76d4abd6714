"""
Command-line interface for colormixer.

Provides commands for computing colors offline and for checking a running
color mixer app against the model.
"""

import argparse
import json
import logging
import os
import sys

from .clipboard import MemoryClipboard
from .color import Channel, Color
from .config import READER_TYPES, MixerConfig
from .errors import ColorMixerError
from .history import SessionLog
from .presets import PRESETS, Preset
from .state import ColorState


def presets_command(args):
    """List the preset table."""
    for preset, color in PRESETS.items():
        print(f"{preset.value:<8} {color.hex}  {color.rgb_text}")


def mix_command(args):
    """Apply a preset and/or channel values and print the result."""
    config = MixerConfig.from_env()
    if args.start:
        config.initial_color = Color.from_hex(args.start)
    if args.strict:
        config.channel_policy = "strict"

    clipboard = MemoryClipboard()
    state = ColorState(config=config, clipboard=clipboard)

    if args.preset:
        state.apply_preset(args.preset)
    for channel in Channel:
        value = getattr(args, channel.value)
        if value is not None:
            state.set_channel(channel, value)

    copied = None
    if args.copy:
        copied = state.copy_to_clipboard(args.copy)
    state.feedback.hide()

    if args.json:
        data = state.color.to_dict()
        if copied is not None:
            data["copied"] = copied
        print(json.dumps(data))
        return

    print(f"HEX: {state.to_hex()}")
    print(f"RGB: {state.to_rgb_text()}")
    if copied is not None:
        print(f"📋 Copied: {copied}")


def check_command(args):
    """Drive a running app and verify it against the color model."""
    from playwright.sync_api import Error as PlaywrightError
    from playwright.sync_api import sync_playwright

    from .assertions import ColorAssertions, wait_until
    from .clipboard import PageClipboard
    from .page import ColorMixerPage
    from .readers import create_reader

    config = MixerConfig.from_env()
    reader_type = args.reader or config.reader

    print("🎨 colormixer check")
    print(f"Target: {args.url}")
    print(f"Reader: {reader_type}")
    print()

    try:
        reader = create_reader(reader_type, api_key=args.api_key, model=args.model or config.model)
    except ValueError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)

    presets = [Preset.parse(p) for p in args.preset] if args.preset else list(Preset)
    log = SessionLog()
    failures = []

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=args.headless)
        try:
            page = browser.new_page()
            clipboard = PageClipboard(page)
            clipboard.grant_permissions()

            state = ColorState(config=config, clipboard=MemoryClipboard(), log=log)
            mixer = ColorMixerPage(page, state=state)
            check = ColorAssertions(reader, page, timeout=args.timeout)

            def step(description, fn):
                try:
                    fn()
                    print(f"  ✅ {description}")
                except AssertionError as e:
                    failures.append(f"{description}: {e}")
                    print(f"  ❌ {description}: {e}")

            mixer.open(args.url)
            step(f"initial color {state.to_hex()}", lambda: check.displays(state))

            for preset in presets:
                mixer.apply_preset(preset)
                step(f"preset {preset.value} -> {state.to_hex()}", lambda: check.displays(state))

            expected = mixer.copy("hex")

            def copied_hex():
                wait_until(
                    lambda: clipboard.read_text() == expected,
                    timeout=args.timeout,
                    poll_interval=0.1,
                    message=f"clipboard does not hold {expected!r}",
                )
                wait_until(
                    mixer.toast_visible,
                    timeout=args.timeout,
                    poll_interval=0.1,
                    message="copy toast not visible",
                )

            step(f"copy hex -> {expected}", copied_hex)
        except PlaywrightError as e:
            print(f"❌ Error: {e}")
            sys.exit(1)
        finally:
            browser.close()

    if args.report:
        log.save_report(args.report)
        print(f"\n📊 Report saved to: {args.report}")

    print()
    if failures:
        print(f"❌ {len(failures)} check(s) failed")
        sys.exit(1)
    print("✅ All checks passed")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="colormixer - RGB/Hex color model for the color mixer app",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show a preset
  colormixer mix --preset red

  # Adjust channels and copy the rgb text
  colormixer mix --r 10 --g 20 --b 30 --copy rgb

  # Check a running app with selectors
  colormixer check http://localhost:3000

  # Check it with AI vision instead
  colormixer check http://localhost:3000 --reader gemini
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    presets_parser = subparsers.add_parser("presets", help="List the color presets")
    presets_parser.set_defaults(func=presets_command)

    mix_parser = subparsers.add_parser("mix", help="Compute hex/rgb for a color")
    mix_parser.add_argument("--start", help="Starting color as hex (default: #FF5733)")
    mix_parser.add_argument("--preset", help="Preset to apply first (red, green, blue, yellow, black, white)")
    mix_parser.add_argument("--r", type=int, help="Red channel 0-255")
    mix_parser.add_argument("--g", type=int, help="Green channel 0-255")
    mix_parser.add_argument("--b", type=int, help="Blue channel 0-255")
    mix_parser.add_argument("--copy", choices=["hex", "rgb"], help="Copy the hex or rgb text")
    mix_parser.add_argument(
        "--strict", action="store_true", help="Reject out-of-range channels instead of clamping"
    )
    mix_parser.add_argument("--json", action="store_true", help="Print JSON")
    mix_parser.set_defaults(func=mix_command)

    check_parser = subparsers.add_parser("check", help="Verify a running app against the model")
    check_parser.add_argument("url", help="App URL (e.g., http://localhost:3000)")
    check_parser.add_argument(
        "--reader",
        choices=list(READER_TYPES),
        help="How to read the page (default: dom, or COLORMIXER_READER)",
    )
    check_parser.add_argument(
        "--api-key", help="API key for AI readers (or set GEMINI_API_KEY/OPENAI_API_KEY env var)"
    )
    check_parser.add_argument("--model", help="Model override for AI readers")
    check_parser.add_argument(
        "--preset", action="append", help="Preset to check (repeatable, default: all six)"
    )
    check_parser.add_argument(
        "--timeout", type=float, default=5.0, help="Seconds to wait per check (default: 5)"
    )
    check_parser.add_argument("--report", help="Write a session report to this path")
    check_parser.add_argument(
        "--headless",
        action="store_true",
        default=True,
        help="Run browser in headless mode (default: True)",
    )
    check_parser.add_argument(
        "--headed",
        action="store_false",
        dest="headless",
        help="Run browser in headed mode (show browser window)",
    )
    check_parser.set_defaults(func=check_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose or os.environ.get("COLORMIXER_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        args.func(args)
    except (ColorMixerError, ValueError) as e:
        print(f"❌ Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
