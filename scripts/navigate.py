#!/usr/bin/env python3
"""Drive the view controller from the terminal."""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from backend.navigation import View, ViewController


def show(state) -> None:
    print(f"\nView: {state.current_view.value}")
    for view, color in state.highlights.items():
        marker = "*" if view == state.current_view else " "
        print(f"  {marker} {view.value:<10} {color.value}")


def main():
    """Activate views interactively."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    print("=" * 60)
    print("Portfolio - Navigation")
    print("=" * 60)
    print(f"Views: {', '.join(v.value for v in View)} (type 'quit' to exit)")

    controller = ViewController()
    show(controller.state)

    while True:
        try:
            tag = input("\nView: ").strip()
            if tag.lower() in ('quit', 'exit', 'q'):
                break
            if not tag:
                continue

            show(controller.activate(tag))

        except (KeyboardInterrupt, EOFError):
            break

    print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
