import argparse
import asyncio
import functools
import itertools
import logging
import sys
from pathlib import Path

from btui.animation import AnimateOptions, animate
from btui.converter import image_to_braille
from btui.demos import ANIMATIONS, DEMOS
from btui.terminal import get_terminal_size

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="btui", description="Draw in the terminal with braille characters")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    for name, demo in DEMOS.items():
        commands.add_parser(name, help=(demo.__doc__ or f"Run the {name} demo").splitlines()[0])

    for name in ANIMATIONS:
        sub = commands.add_parser(name, help=f"Animate the {name} demo")
        sub.add_argument("--frames", type=int, default=None, help="Stop after this many frames (default: run forever)")
        sub.add_argument(
            "--delay", type=float, default=1000 / 24, help="Delay between frames in milliseconds (default: 41.7)"
        )
        if name == "cube":
            sub.add_argument("-p", "--perspective", action="store_true", default=False, help="Perspective projection")

    image = commands.add_parser("image", help="Render an image as braille")
    image.add_argument("image", help="Path to input image")
    image.add_argument(
        "-s", "--size", type=int, default=None, help="Output width in columns (default: terminal width)"
    )
    image.add_argument(
        "-t", "--threshold", type=int, default=128, help="Brightness below which a pixel is drawn (default: 128)"
    )
    image.add_argument("-i", "--invert", action="store_true", default=False, help="Draw light pixels instead of dark")
    return parser


def run_animation(args: argparse.Namespace) -> int:
    make_canvas, source = ANIMATIONS[args.command]
    if getattr(args, "perspective", False):
        source = functools.partial(source, perspective=True)
    if args.frames is not None:
        unlimited = source

        def source():
            return itertools.islice(unlimited(), args.frames)

    return asyncio.run(animate(make_canvas(), source, AnimateOptions(delay=args.delay)))


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "image":
        image_path = Path(args.image)
        if not image_path.exists():
            print(f"File not found: {image_path}", file=sys.stderr)
            sys.exit(1)
        width = args.size if args.size is not None else get_terminal_size().width
        print(image_to_braille(image_path, width=width, threshold=args.threshold, invert=args.invert))
    elif args.command in ANIMATIONS:
        try:
            count = run_animation(args)
        except KeyboardInterrupt:
            sys.exit(130)
        logger.debug("Rendered %d frames", count)
    else:
        DEMOS[args.command](sys.stdout)


if __name__ == "__main__":
    main()
