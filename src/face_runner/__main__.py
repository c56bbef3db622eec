from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from . import __version__
from .app import App
from .runner.game import RunnerGame


def _build_provider(spec: str, model_path: Optional[str] = None):
    name, _, param = spec.partition(":")
    name = name.strip()
    arg = param.strip()

    if name == "keyboard":
        from .input_providers.keyboard import KeyboardProvider

        return KeyboardProvider()
    if name == "expression":
        from .input_providers.expression import ExpressionProvider

        camera_index = 0
        if arg:
            try:
                camera_index = int(arg)
            except ValueError as exc:
                raise SystemExit(f"Invalid camera index '{arg}' for expression provider") from exc
        try:
            return ExpressionProvider(camera_index=camera_index, model_path=model_path)
        except RuntimeError as exc:
            raise SystemExit(str(exc)) from exc
    raise SystemExit(f"Unknown provider: {name}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Expression Runner: dodge obstacles with your face")
    parser.add_argument(
        "--provider",
        action="append",
        metavar="SPEC",
        help="Input provider spec (e.g. expression or expression:1). Keyboard is always added.",
    )
    parser.add_argument("--model", default=None, help="Path to face_landmarker.task")
    parser.add_argument("--scale", type=int, default=1, help="Pyxel window scale")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for obstacle spawning")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.version:
        print(__version__)
        return

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    provider_specs: List[str] = list(args.provider) if args.provider else ["expression"]
    if not any(spec.split(":")[0].strip().lower() == "keyboard" for spec in provider_specs):
        provider_specs.append("keyboard")

    providers = [_build_provider(spec, model_path=args.model) for spec in provider_specs]

    rng = random.Random(args.seed)
    game = RunnerGame(rng=rng)
    app = App(game=game, providers=providers, scale=args.scale)
    app.run()


if __name__ == "__main__":
    main()
