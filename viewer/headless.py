import logging
import sys

from .color import to_hex
from .display import Display, DisplayError, key_name, key_up, quit_event

class Headless(Display):
    '''
    Display without a window. Key names are read one per line from stream,
    and the end of the stream closes the session.
    '''

    def __init__(self, stream):
        self.logger = logging.getLogger("headless")
        self.stream = stream
        self.color = None
        self.frames = []

    def paint(self, color):
        self.color = color
        self.frames.append(color)
        self.logger.debug(f'fill {to_hex(color)}')

    def wait_for_event(self):
        while True:
            try:
                line = self.stream.readline()
            except (OSError, ValueError) as e:
                raise DisplayError(f'failed to read events: {e}') from e

            if not line:
                return quit_event()

            key = key_name(line)
            if key:
                return key_up(key)

    def release(self):
        self.logger.debug(f'released after {len(self.frames)} frames')

def create_display(title, width, height, resizable=True, ontop=False, stream=None):
    return Headless(stream or sys.stdin)
