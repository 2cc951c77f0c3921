import logging
import sys

from .color import to_hex
from .display import QUIT, KEYUP, EXPOSE
from .display import QUIT_KEYS, NEXT_KEYS, PREVIOUS_KEYS

def print_line(text):
    print(text, file=sys.stdout, flush=True)

class Navigator:
    '''
    Step through a fixed list of colors, one shown at a time.

    The list never changes after construction. Only key releases move the
    index, so holding a key down doesn't race through the list.
    '''

    def __init__(self, entries, display, echo=print_line):
        self.logger = logging.getLogger("navigation")
        self.entries = tuple(entries)
        if not self.entries:
            raise ValueError('no colors provided')

        self.display = display
        self.echo = echo
        self.index = 0
        self.running = True

    @property
    def current(self):
        return self.entries[self.index]

    def _show(self, echo=True):
        entry = self.current
        self.logger.debug(f'paint {to_hex(entry.color)} ({self.index + 1}/{len(self.entries)})')
        self.display.paint(entry.color)
        if echo:
            self.echo(entry.text)

    def start(self):
        self.index = 0
        self.running = True
        self._show()

    def next(self):
        if self.index < len(self.entries) - 1:
            self.index += 1
            self._show()

    def previous(self):
        if self.index > 0:
            self.index -= 1
            self._show()

    def stop(self):
        self.logger.debug(f'quit at index {self.index}')
        self.running = False

    def handle_event(self, event):
        '''Apply one event and tell whether the session is still running.'''

        if not self.running:
            return False

        if event.type == QUIT:
            self.stop()

        elif event.type == KEYUP:
            if event.key in QUIT_KEYS:
                self.stop()
            elif event.key in NEXT_KEYS:
                self.next()
            elif event.key in PREVIOUS_KEYS:
                self.previous()

        elif event.type == EXPOSE:
            self._show(echo=False)

        return self.running

    def run(self):
        '''
        Show the first color, then dispatch events until quit.

        DisplayError raised by wait_for_event() ends the session and is left
        to the caller, which owns the display.
        '''

        self.start()
        while self.running:
            self.handle_event(self.display.wait_for_event())
        return self.index
