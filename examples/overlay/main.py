"""Overlay demo - falling letters behind a scrollable page.

Exercises the glyphfall driver against the pygame host.

Controls:
  Up/Down   Grow/shrink the page content (triggers a rebuild)
  Esc       Quit

Usage:
  python main.py ["Page title | Site name"] [--font path/to/GeistMono.ttf]
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import pygame

from glyphfall import OverlayConfig, OverlayError, mount
from glyphfall.pygame_host import PygameHost

logger = logging.getLogger("overlay")

# Timing
FPS = 60

# Layout
SCREEN_W = 960
SCREEN_H = 600
CONTENT_STEP = 120

# Colors
BG_COLOR = (12, 12, 18)
TEXT_COLOR = (220, 220, 230)
PRIMARY_RGB = "0, 255, 136"


def draw_page(screen: pygame.Surface, font: pygame.font.Font, title: str, content_h: int) -> None:
    """Stand-in page content drawn above the overlay."""
    lines = [
        title,
        "",
        f"content height: {content_h}px",
        "Up/Down resizes the page, Esc quits",
    ]
    for i, line in enumerate(lines):
        surf = font.render(line, True, TEXT_COLOR)
        screen.blit(surf, (40, 40 + i * 24))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("title", nargs="?", default="Falling Letters | glyphfall")
    parser.add_argument("--font", default=None, help="font file used for the letters")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption(args.title)
    clock = pygame.time.Clock()
    page_font = pygame.font.SysFont("monospace", 16)

    content_h = SCREEN_H
    host = PygameHost(
        title=args.title,
        primary_rgb=PRIMARY_RGB,
        font_path=args.font,
        content_size=(SCREEN_W, content_h),
    )

    try:
        asyncio.run(mount(host, OverlayConfig(), seed=args.seed))
    except OverlayError:
        # The page keeps working without its background.
        logger.exception("overlay setup failed")
    except OSError:
        logger.exception("could not load overlay font %s", args.font)

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            host.dispatch(event)
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    host.teardown()
                    running = False
                elif event.key == pygame.K_UP:
                    content_h += CONTENT_STEP
                    host.set_content_size(SCREEN_W, content_h)
                elif event.key == pygame.K_DOWN:
                    content_h = max(SCREEN_H, content_h - CONTENT_STEP)
                    host.set_content_size(SCREEN_W, content_h)

        # --- Tick ---
        host.run_frame()

        # --- Render ---
        screen.fill(BG_COLOR)
        if host.surface is not None:
            screen.blit(host.surface.canvas, (0, 0))
        draw_page(screen, page_font, args.title, content_h)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
