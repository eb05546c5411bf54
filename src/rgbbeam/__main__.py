"""Entry point for `python -m rgbbeam` or the `rgbbeam` console script."""

import argparse
import logging

from rgbbeam.app import App


def main() -> None:
    parser = argparse.ArgumentParser(description="RGB Beam — match the falling block's color")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible block sequence")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = App(seed=args.seed)
    app.run()


if __name__ == "__main__":
    main()
