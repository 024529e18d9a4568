"""Command-line entry point: check the map file, render it and show it."""

from __future__ import annotations

import errno
import sys
from collections.abc import Sequence

from fdfview.grid import DEFAULT_WINDOW_SIZE, MapError, load_grid
from fdfview.render import Canvas, draw_image

TITLE = "FDF - MAP"
IMAGE_OFFSET = (50, 50)
USAGE = "usage: ./executable filename.fdf"


class UsageError(Exception):
    """Bad command-line arguments or an unusable map file."""

    def __init__(self, message: str, code: int = errno.EINVAL) -> None:
        super().__init__(message)
        self.code = code


class _DisplayError(RuntimeError):
    def __init__(self, message: str, code: int = errno.EIO) -> None:
        super().__init__(message)
        self.code = code


def check_arguments(argv: Sequence[str]) -> str:
    """Return the map path from ``argv`` after checking it can be used.

    ``argv`` holds the arguments without the program name. The path must
    have ``.fdf`` as everything from its first dot on, and must name a
    readable, non-empty file.
    """
    if len(argv) != 1:
        raise UsageError(USAGE)
    path = argv[0]
    dot = path.find(".")
    if dot < 0 or path[dot:] != ".fdf":
        raise UsageError("file type must be .fdf")
    try:
        with open(path, "rb") as stream:
            first = stream.read(1)
    except OSError as exc:
        raise UsageError(
            "file doesn't exist or can't be opened", exc.errno or errno.EIO
        ) from exc
    if not first:
        raise UsageError("file can't be read or is empty", errno.EIO)
    return path


def show(canvas: Canvas, title: str = TITLE) -> None:
    """Show ``canvas`` in a window until it is closed or Escape is pressed."""
    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((canvas.width, canvas.height))
        pygame.display.set_caption(title)
        image = pygame.image.frombuffer(
            canvas.rgba_bytes(), (canvas.width, canvas.height), "RGBA"
        )
    except pygame.error as exc:
        pygame.quit()
        raise _DisplayError("error initialising display") from exc
    try:
        clock = pygame.time.Clock()
        screen.fill((0, 0, 0))
        screen.blit(image, IMAGE_OFFSET)
        pygame.display.flip()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_arguments(args)
        grid = load_grid(path, DEFAULT_WINDOW_SIZE)
        canvas = draw_image(grid, grid.window_size)
        show(canvas, TITLE)
    except (UsageError, MapError, _DisplayError) as exc:
        print(exc)
        return exc.code
    return 0


if __name__ == "__main__":
    sys.exit(main())