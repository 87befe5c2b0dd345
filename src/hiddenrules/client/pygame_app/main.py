from __future__ import annotations

import argparse

import pygame  # type: ignore[import-not-found]

from hiddenrules.paths import get_paths
from hiddenrules.services.content import ContentService
from hiddenrules.services.telemetry import TelemetryService

from .app import App, GameContext
from .fonts import load_fonts
from .scenes.boot import BootScene


def main() -> int:
    parser = argparse.ArgumentParser(prog="hiddenrules")
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=768)
    parser.add_argument("--seed", type=int, default=None, help="Fix deck shuffles for every challenge.")
    parser.add_argument("--no-telemetry", action="store_true")
    args = parser.parse_args()

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Hidden Rules")

    clock = pygame.time.Clock()
    paths = get_paths()

    content = ContentService(data_dir=paths.data_dir, schema_dir=paths.schema_dir)
    telemetry = TelemetryService(paths.userdata_dir / "telemetry.jsonl", enabled=not args.no_telemetry)

    ctx = GameContext(
        screen=screen,
        clock=clock,
        paths=paths,
        fonts=load_fonts(),
        content=content,
        telemetry=telemetry,
        seed=args.seed,
    )

    app = App(ctx, BootScene(ctx))
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
