#-*- coding: utf-8 -*-
"""
GLFW window integration.

.. code ::

   bootstrap_gl()
   window = GlfwWindow((640, 480), 'sin(x)')
   while not window.should_close():
       ... draw ...
       window.swap()
   window.close()

the window keeps the set of currently held keys in
**active_keys** which is what the keyboard controls read.
"""
import logging

from glfw.GLFW import (
    glfwInit, glfwTerminate, glfwWindowHint, glfwCreateWindow, glfwDestroyWindow,
    glfwMakeContextCurrent, glfwSetKeyCallback, glfwSetErrorCallback,
    glfwSetFramebufferSizeCallback, glfwWindowShouldClose,
    glfwSwapBuffers, glfwPollEvents, glfwGetTime, glfwSwapInterval,
    GLFW_CONTEXT_VERSION_MAJOR, GLFW_CONTEXT_VERSION_MINOR, GLFW_OPENGL_FORWARD_COMPAT,
    GLFW_OPENGL_PROFILE, GLFW_OPENGL_CORE_PROFILE, GLFW_TRUE, GLFW_PRESS, GLFW_RELEASE,
    GLFW_KEY_LEFT, GLFW_KEY_RIGHT, GLFW_KEY_UP, GLFW_KEY_DOWN, GLFW_KEY_EQUAL,
    GLFW_KEY_MINUS, GLFW_KEY_KP_ADD, GLFW_KEY_KP_SUBTRACT)
from OpenGL.GL import glViewport

from gpugraph.config import GL_VERSION, WINDOW_SIZE, WINDOW_TITLE
from gpugraph.errors import ContextError

logger = logging.getLogger(__name__)

__all__ = ['bootstrap_gl', 'GlfwWindow', 'PANZOOM_KEYS']

# left, right, up, down, zoom in, zoom out
PANZOOM_KEYS = (GLFW_KEY_LEFT, GLFW_KEY_RIGHT, GLFW_KEY_UP, GLFW_KEY_DOWN,
                GLFW_KEY_EQUAL, GLFW_KEY_MINUS)

# keypad aliases for the zoom keys
KEY_ALIASES = {
    GLFW_KEY_KP_ADD: GLFW_KEY_EQUAL,
    GLFW_KEY_KP_SUBTRACT: GLFW_KEY_MINUS,
}


def _error_callback(error, description):
    if isinstance(description, bytes):
        description = description.decode('utf-8', errors='replace')
    logger.error('GLFW error %s: %s', error, description)


def bootstrap_gl(version=GL_VERSION):
    """
    initializes GLFW and requests a forward compatible
    core profile context of the given **version**.
    """
    glfwSetErrorCallback(_error_callback)
    if not glfwInit():
        raise ContextError('glfwInit() error')

    glfwWindowHint(GLFW_CONTEXT_VERSION_MAJOR, version[0])
    glfwWindowHint(GLFW_CONTEXT_VERSION_MINOR, version[1])
    glfwWindowHint(GLFW_OPENGL_FORWARD_COMPAT, GLFW_TRUE)
    glfwWindowHint(GLFW_OPENGL_PROFILE, GLFW_OPENGL_CORE_PROFILE)
    logger.debug('requested OpenGL %s.%s core profile', *version)


class GlfwWindow():
    """
    a glfw window with its own OpenGL context.
    """
    def __init__(self, size=WINDOW_SIZE, title=WINDOW_TITLE, vsync=True):
        self.size = (int(size[0]), int(size[1]))
        self.title = title
        self.active_keys = set()

        self._handle = glfwCreateWindow(self.size[0], self.size[1], title, None, None)
        if not self._handle:
            glfwTerminate()
            raise ContextError('glfwCreateWindow() error')

        glfwMakeContextCurrent(self._handle)
        glfwSwapInterval(1 if vsync else 0)
        glfwSetKeyCallback(self._handle, self.key_callback)
        glfwSetFramebufferSizeCallback(self._handle, self.resize_callback)

        logger.info('created window "%s" (%sx%s)', title, *self.size)

    def key_callback(self, window, keycode, scancode, action, mods):
        """ put glfw keyboard event data into the active key buffer """
        keycode = KEY_ALIASES.get(keycode, keycode)
        if action == GLFW_PRESS:
            self.active_keys.add(keycode)
        elif action == GLFW_RELEASE:
            self.active_keys.discard(keycode)

    def resize_callback(self, window, width, height):
        glViewport(0, 0, width, height)

    def should_close(self):
        return bool(glfwWindowShouldClose(self._handle))

    def time(self):
        """ seconds since glfw was initialized """
        return glfwGetTime()

    def swap(self):
        glfwSwapBuffers(self._handle)
        glfwPollEvents()

    def close(self):
        if self._handle is not None:
            glfwDestroyWindow(self._handle)
            self._handle = None
        glfwTerminate()
