#!/usr/bin/env python3
"""
Human Play Mode - Drive the snake engine from the keyboard.

Controls:
    Arrow Keys or WASD: Move the snake
    R: Restart game
    ESC: Quit
"""
import sys
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pygame
from snake_core.core.random_source import DefaultRandomSource
from snake_core.game.snake_game import GameState, Direction
from snake_core.utils.config_loader import Config, load_config


# Colors
BLACK = (0, 0, 0)
DARK_GRAY = (30, 30, 40)
SNAKE_HEAD_COLOR = (0, 220, 100)
SNAKE_BODY_COLOR = (0, 180, 80)
FOOD_COLOR = (220, 50, 50)
TEXT_COLOR = (220, 220, 220)

PADDING = 40


def direction_for_key(key: int) -> Optional[Direction]:
    """Map a pygame key code to a direction, or None for other keys."""
    if key in (pygame.K_UP, pygame.K_w):
        return Direction.UP
    if key in (pygame.K_DOWN, pygame.K_s):
        return Direction.DOWN
    if key in (pygame.K_LEFT, pygame.K_a):
        return Direction.LEFT
    if key in (pygame.K_RIGHT, pygame.K_d):
        return Direction.RIGHT
    return None


def new_game(config: Config) -> GameState:
    """Create a fresh game from the configured board and seed."""
    return GameState(
        config.game.grid_width,
        config.game.grid_height,
        random_source=DefaultRandomSource(config.game.seed),
    )


def draw(surface, game: GameState, cell_size: int):
    """Draw the board, food and snake."""
    board = pygame.Rect(PADDING, PADDING, game.width * cell_size, game.height * cell_size)
    pygame.draw.rect(surface, DARK_GRAY, board)

    food_rect = pygame.Rect(
        PADDING + game.food.x * cell_size + 2,
        PADDING + game.food.y * cell_size + 2,
        cell_size - 4,
        cell_size - 4
    )
    pygame.draw.rect(surface, FOOD_COLOR, food_rect, border_radius=4)

    for i, cell in enumerate(game.snake):
        color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
        rect = pygame.Rect(
            PADDING + cell.x * cell_size + 1,
            PADDING + cell.y * cell_size + 1,
            cell_size - 2,
            cell_size - 2
        )
        pygame.draw.rect(surface, color, rect, border_radius=3)


def main():
    """Main entry point for human play mode."""
    config = load_config()
    cell_size = config.host.cell_size

    game = new_game(config)

    pygame.init()
    window_width = game.width * cell_size + PADDING * 2
    window_height = game.height * cell_size + PADDING * 2 + 60
    surface = pygame.display.set_mode((window_width, window_height))
    pygame.display.set_caption(config.host.title)
    font = pygame.font.Font(None, 36)

    print("\n" + "=" * 50)
    print(f"{config.host.title} - Human Mode")
    print("=" * 50)
    print("Controls:")
    print("  Arrow Keys / WASD: Move")
    print("  R: Restart")
    print("  ESC: Quit")
    print("=" * 50 + "\n")

    running = True
    reported = False
    clock = pygame.time.Clock()
    last_tick_time = 0
    best_length = 1

    while running:
        current_time = pygame.time.get_ticks()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key == pygame.K_r:
                    game = new_game(config)
                    reported = False

                else:
                    direction = direction_for_key(event.key)
                    if direction is not None:
                        game.request_direction_change(direction)

        # Advance on a fixed interval
        if current_time - last_tick_time >= config.host.tick_interval_ms:
            game.tick()
            last_tick_time = current_time

        if game.finished and not reported:
            length = len(game.snake)
            best_length = max(best_length, length)
            print(f"[Game] Finished after {game.frame_count} ticks | "
                  f"Length: {length} | Best: {best_length}")
            reported = True

        surface.fill(BLACK)
        draw(surface, game, cell_size)

        length_text = font.render(f"Length: {len(game.snake)}", True, TEXT_COLOR)
        surface.blit(
            length_text,
            (window_width // 2 - length_text.get_width() // 2, window_height - 60)
        )

        if game.finished:
            over_text = font.render("GAME OVER - Press R to restart", True, (255, 100, 100))
            surface.blit(
                over_text,
                (window_width // 2 - over_text.get_width() // 2, window_height - 30)
            )

        pygame.display.flip()
        clock.tick(config.host.fps)

    pygame.quit()
    print(f"\nBest Length: {best_length}")


if __name__ == "__main__":
    main()
