#-*- coding: utf-8 -*-
"""
frame timing and keyboard controls for the viewport.

the viewport is rate agnostic: it applies exactly the delta or
factor it gets. this module turns held keys and the elapsed
frame time into those values, so holding a key moves the plot at
the same speed regardless of the frame rate.
"""
from time import perf_counter

from gpugraph.config import PAN_SPEED, ZOOM_RATE

__all__ = ['FrameClock', 'keyboard_panzoom', 'pan_delta', 'zoom_factor']


class FrameClock():
    """
    measures the time between two frames.

    .. code ::

       clock = FrameClock()
       while True:
           dt = clock.tick()

    """
    def __init__(self, time_source=perf_counter):
        self._time_source = time_source
        self._last = None

    def tick(self):
        """ returns the seconds elapsed since the previous tick.
            the first tick returns 0.0 """
        now = self._time_source()
        if self._last is None:
            self._last = now
            return 0.0

        delta = max(0.0, now - self._last)
        self._last = now
        return delta

    def reset(self):
        self._last = None


def pan_delta(extent, delta_time, pan_speed=PAN_SPEED):
    """ world distance to pan within **delta_time** seconds """
    return extent * pan_speed * delta_time


def zoom_factor(delta_time, zoom_in, zoom_rate=ZOOM_RATE):
    """ per frame zoom factor: zoom_rate ** -dt for zooming in,
        zoom_rate ** dt for zooming out """
    exponent = -delta_time if zoom_in else delta_time
    return zoom_rate ** exponent


def keyboard_panzoom(left, right, up, down, zoom_in, zoom_out,
                     pan_speed=PAN_SPEED, zoom_rate=ZOOM_RATE):
    """
    creates an input handler which pans and zooms a viewport
    according to a set of held keys.

    the returned handler has the signature

        handler(viewport, keys, delta_time) -> bool

    and returns whether the viewport was changed. pan speed
    depends on the visible width, so panning feels the same at
    every zoom level.
    """
    if zoom_rate <= 0 or zoom_rate == 1:
        raise ValueError('zoom_rate must be positive and not 1, got {}'.format(zoom_rate))

    def _handler(viewport, keys, delta_time):
        if delta_time <= 0:
            return False

        did_something = False
        speed = pan_delta(viewport.width, delta_time, pan_speed)

        if left in keys:
            did_something |= viewport.pan(-speed, 0.0)
        if right in keys:
            did_something |= viewport.pan(speed, 0.0)
        if up in keys:
            did_something |= viewport.pan(0.0, speed)
        if down in keys:
            did_something |= viewport.pan(0.0, -speed)
        if zoom_in in keys:
            did_something |= viewport.zoom(zoom_factor(delta_time, True, zoom_rate))
        if zoom_out in keys:
            did_something |= viewport.zoom(zoom_factor(delta_time, False, zoom_rate))

        return did_something
    return _handler
