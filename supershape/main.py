import argparse
import logging
import sys

import pygame
from OpenGL import GL

from supershape.rendering.render_loop import CancellationToken, RenderLoop, TransformState
from supershape.rendering.renderer import Renderer
from supershape.rendering.shader import ShaderError
from supershape.world import World

logger = logging.getLogger("supershape")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render a spinning, spot-lit supershape.")
    parser.add_argument("scene", nargs="?", help="JSON scene file overriding the defaults")
    parser.add_argument("--meridians", type=int, help="longitude subdivisions")
    parser.add_argument("--parallels", type=int, help="latitude subdivisions")
    parser.add_argument("--fps", type=int, help="frame rate cap")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser.parse_args(argv)


def build_world(args) -> World:
    world = World(args.scene)
    if args.meridians is not None:
        world.meridians = args.meridians
    if args.parallels is not None:
        world.parallels = args.parallels
    if args.fps is not None:
        world.fps = args.fps
    return world


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    world = build_world(args)

    # ====================
    # Pygame / OpenGL init
    # ====================

    pygame.init()
    try:
        return _run(world)
    finally:
        pygame.quit()


def _run(world: World) -> int:
    pygame.display.set_caption("Supershape")

    pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
    pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
    pygame.display.gl_set_attribute(
        pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
    )

    pygame.display.set_mode((world.width, world.height), pygame.OPENGL | pygame.DOUBLEBUF)
    GL.glViewport(0, 0, world.width, world.height)

    version = GL.glGetString(GL.GL_VERSION)
    if version:
        logger.info("OpenGL: %s", version.decode())

    try:
        renderer = Renderer(GL, world)
    except ShaderError as e:
        logger.error("%s", e)
        return 1

    # ====================
    # Main Loop
    # ====================

    clock = pygame.time.Clock()
    token = CancellationToken()
    loop = RenderLoop(
        renderer,
        TransformState(renderer.base_model, world.initial_rotation),
        world.rotation_step,
    )

    def next_frame():
        pygame.display.flip()
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                token.cancel()
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                token.cancel()
        clock.tick(world.fps)

    ticks = loop.run(token, schedule=next_frame)
    logger.info("Stopped after %d frames", ticks)
    return 0


if __name__ == "__main__":
    sys.exit(main())
