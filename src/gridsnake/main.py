# src/gridsnake/main.py
import argparse
from dataclasses import replace

import pygame # type: ignore
from .config import CFG, FPS, Mode
from .engine import GameEngine
from .highscore import JsonFileHighScore
from .input import InputRouter
from .driver import TickDriver
from .game import board_size, draw_game, draw_overlay


def build_config(args: argparse.Namespace):
    n = args.grid
    cfg = replace(
        CFG,
        grid_size=n,
        start=(n // 2, n // 2),
        idle_food=(min(n - 1, n * 3 // 4), min(n - 1, n * 3 // 4)),
        mode=Mode.TOROIDAL if args.wrap else Mode.BOUNDED,
        seed=args.seed,
    )
    return cfg


def main():
    parser = argparse.ArgumentParser(description="Snake on a grid.")
    parser.add_argument("--grid", type=int, default=CFG.grid_size, help="board is GRID x GRID cells")
    parser.add_argument("--wrap", action="store_true", help="start in wall pass (toroidal) mode")
    parser.add_argument("--seed", type=int, default=None, help="seed food placement")
    parser.add_argument(
        "--highscore",
        type=str,
        default="data/highscore.json",
        help="where the best score is kept",
    )
    args = parser.parse_args()

    engine = GameEngine(build_config(args), JsonFileHighScore(args.highscore))
    router = InputRouter(engine)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(board_size(engine.snapshot()))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()
    driver = TickDriver(engine, pygame.time.get_ticks())

    # Frames draw the newest snapshot the engine has published.
    latest = {"snap": engine.snapshot()}
    engine.subscribe(lambda snap: latest.__setitem__("snap", snap))

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    router.handle_key(event.key)

        # 2) update
        driver.poll(pygame.time.get_ticks())

        # 3) render
        snap = latest["snap"]
        draw_game(screen, font, snap)
        draw_overlay(screen, font, snap)
        pygame.display.flip()
        clock.tick(FPS)  # movement gated by the driver, not the frame rate

    print(f"[PLAY] Bye. score={engine.score}, high score={engine.high_score}")
    pygame.quit()

if __name__ == "__main__":
    main()
