"""
Entry point for Avoider.

Run the game with:
    python -m games.Avoider.main
    python -m games.Avoider.main --difficulty hard --show-hitboxes
"""

import argparse
import sys

import pygame

from avoider.games.input.input_manager import InputManager
from avoider.games.input.sources.pygame_source import PygameInputSource
from avoider.logging import configure_logging, get_logger

from games.Avoider import config, game_info
from games.Avoider.assets import AudioPlayer, ImageBank
from games.Avoider.controller import Controller
from games.Avoider.renderer import Renderer

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{game_info.NAME} - {game_info.DESCRIPTION}")
    for arg in game_info.ARGUMENTS:
        options = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **options)
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--fps', type=int, default=None, help='Display frame rate cap')
    parser.add_argument('--show-hitboxes', action='store_true', help='Draw collision boxes')
    parser.add_argument('--mute', action='store_true', help='Disable sound effects')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Log level (TRACE, DEBUG, INFO, WARNING, ERROR, OFF)')
    return parser


def main(argv=None) -> int:
    """Initialize and run Avoider."""
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure_logging(level=args.log_level)

    session = game_info.get_game_mode(
        width=args.width,
        height=args.height,
        difficulty=args.difficulty,
        seed=args.seed,
        show_hitboxes=args.show_hitboxes,
        mute=args.mute,
    )
    consts = session.consts
    fps = args.fps or config.FPS

    pygame.init()
    flags = pygame.FULLSCREEN if args.fullscreen else 0
    screen = pygame.display.set_mode(consts.resolution.as_tuple, flags)
    pygame.display.set_caption(game_info.NAME)

    images = ImageBank(consts)
    images.preload()
    audio = AudioPlayer(consts)
    renderer = Renderer(screen, consts, images)
    controller = Controller(session, InputManager(PygameInputSource()), audio, renderer)

    print("=" * 50)
    print(f"{game_info.NAME} v{game_info.VERSION}")
    print(f"  Screen: {consts.resolution} @ {fps} FPS")
    print(f"  Audio: {'on' if audio.enabled else 'off'}")
    print("  Controls:")
    print("    - Mouse moves the ship")
    print(f"    - {consts.play_key} or mouse button to start and fire")
    print(f"    - {consts.pause_key} to pause / resume")
    print("=" * 50)

    clock = pygame.time.Clock()
    try:
        while controller.running:
            frame_time = clock.tick(fps) / 1000.0
            controller.tick(frame_time)
            pygame.display.flip()
    finally:
        # Ensure pygame quits cleanly
        audio.stop_all()
        pygame.quit()

    log.info("Exited after %d frames, final score %d", controller.frames, session.score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
