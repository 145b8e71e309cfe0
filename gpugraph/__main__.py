#-*- coding: utf-8 -*-
"""
command line interface

    python -m gpugraph "sin(x) * x"

arrow keys pan the plot, = and - zoom in and out.
"""
import argparse
import logging
import sys

from gpugraph.config import DEFAULT_SUBDIVISIONS, DEFAULT_VIEWPORT, WINDOW_SIZE
from gpugraph.errors import EvaluationError, GlError
from gpugraph.logging_config import setup_logging
from gpugraph.plot.function import FunctionEvaluator
from gpugraph.plot.viewport import Viewport

logger = logging.getLogger('gpugraph')


def create_parser():
    parser = argparse.ArgumentParser(prog='gpugraph', description='plots a function of x')
    parser.add_argument('function', help='function to graph, e.g. "sin(x) * x"')
    parser.add_argument('--subdivisions', type=int, default=DEFAULT_SUBDIVISIONS,
                        help='samples per world unit (default: %(default)s)')
    parser.add_argument('--viewport', type=float, nargs=4, default=DEFAULT_VIEWPORT,
                        metavar=('MINX', 'MAXX', 'MINY', 'MAXY'),
                        help='initial visible rectangle')
    parser.add_argument('--size', type=int, nargs=2, default=WINDOW_SIZE,
                        metavar=('WIDTH', 'HEIGHT'), help='window size')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    parser.add_argument('--log-file', default=None)
    return parser


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.subdivisions < 1:
        parser.error('--subdivisions must be positive')

    try:
        viewport = Viewport.from_bounds(args.viewport)
    except ValueError as e:
        parser.error(str(e))

    # the expression must compile before any window exists
    try:
        evaluator = FunctionEvaluator(args.function)
    except EvaluationError as e:
        logger.error('%s', e)
        return 1

    from gpugraph.app import GraphApplication
    from gpugraph.gl.glfw import bootstrap_gl, GlfwWindow, PANZOOM_KEYS
    from gpugraph.gl.renderer import DrawableRenderer
    from gpugraph.gl.shader import create_program
    from gpugraph.plot.control import keyboard_panzoom

    application = GraphApplication(evaluator, viewport, args.subdivisions,
                                   handler=keyboard_panzoom(*PANZOOM_KEYS))
    window = None
    program = None
    try:
        bootstrap_gl()
        window = GlfwWindow(args.size, 'gpugraph: {}'.format(evaluator.expression))
        program = create_program('glsl/line.vert.glsl', 'glsl/line.frag.glsl')
        application.run(window, DrawableRenderer(program))
    except GlError as e:
        logger.error('%s', e)
        return 1
    finally:
        if program is not None:
            program.delete()
        if window is not None:
            window.close()

    return 0


if __name__ == '__main__':
    sys.exit(main())
