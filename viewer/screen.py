import logging
import os
import sys
from collections import deque

from PyQt5.QtWidgets import QApplication, QWidget, QMainWindow
from PyQt5.QtGui import QPainter, QColor
from PyQt5.QtCore import Qt, QEventLoop

from .color import to_hex
from .display import Display, DisplayError
from .display import key_down, key_up, quit_event, expose_event
from .display import KEY_Q, KEY_ESCAPE, KEY_SPACE, KEY_RETURN, KEY_RIGHT, KEY_J
from .display import KEY_BACKSPACE, KEY_LEFT, KEY_K

KEYS = {
    Qt.Key_Q: KEY_Q,
    Qt.Key_Escape: KEY_ESCAPE,
    Qt.Key_Space: KEY_SPACE,
    Qt.Key_Return: KEY_RETURN,
    Qt.Key_Enter: KEY_RETURN,
    Qt.Key_Right: KEY_RIGHT,
    Qt.Key_J: KEY_J,
    Qt.Key_Backspace: KEY_BACKSPACE,
    Qt.Key_Left: KEY_LEFT,
    Qt.Key_K: KEY_K,
}

class SwatchWidget(QWidget):
    def __init__(self, parent):
        super(SwatchWidget, self).__init__(parent)
        self.color = QColor(Qt.black)

    def paintEvent(self, event):
        qp = QPainter(self)
        qp.fillRect(self.rect(), self.color)

    def set_color(self, color):
        self.color = QColor(color.red, color.green, color.blue, color.alpha)
        self.update()

class Screen(QMainWindow, Display):
    def __init__(self, app, title, width, height, resizable, ontop):
        super().__init__()

        self.logger = logging.getLogger("screen")
        self.app = app
        self.events = deque()

        self.setWindowTitle(title)
        self.resize(width, height)
        if not resizable:
            self.setFixedSize(width, height)
        if ontop:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

        self.swatch = SwatchWidget(self)
        self.setCentralWidget(self.swatch)

        self.show()

    def _push(self, event):
        self.events.append(event)

    def _key_event(self, event, pressed):
        # releases generated by auto-repeat would advance the list while a
        # key is held
        if event.isAutoRepeat():
            return

        key = KEYS.get(event.key())
        if key is None:
            return

        self._push(key_down(key) if pressed else key_up(key))

    def keyPressEvent(self, event):
        self._key_event(event, True)

    def keyReleaseEvent(self, event):
        self._key_event(event, False)

    def closeEvent(self, event):
        self._push(quit_event())
        event.accept()

    def showEvent(self, event):
        self._push(expose_event())

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._push(expose_event())

    def moveEvent(self, event):
        self._push(expose_event())

    def paint(self, color):
        self.logger.debug(f'fill {to_hex(color)}')
        self.swatch.set_color(color)

    def wait_for_event(self):
        while not self.events:
            self.app.processEvents(QEventLoop.AllEvents | QEventLoop.WaitForMoreEvents)
        return self.events.popleft()

    def release(self):
        self.close()
        self.app.processEvents()
        self.events.clear()
        self.app.quit()

# platform plugins that draw without a display server
SERVERLESS_PLATFORMS = { 'offscreen', 'minimal', 'minimalegl', 'vnc', 'eglfs', 'linuxfb', 'vkkhrdisplay' }

def _platform_reachable(platform):
    if platform in SERVERLESS_PLATFORMS:
        return True
    if platform.startswith('xcb'):
        return bool(os.environ.get('DISPLAY'))
    if platform.startswith('wayland'):
        return bool(os.environ.get('WAYLAND_DISPLAY'))
    return True

def _check_platform():
    if not sys.platform.startswith('linux'):
        return

    requested = os.environ.get('QT_QPA_PLATFORM')
    if not requested:
        if not (os.environ.get('DISPLAY') or os.environ.get('WAYLAND_DISPLAY')):
            raise DisplayError('cannot open display: neither DISPLAY nor WAYLAND_DISPLAY is set')
        return

    # "wayland;xcb" lists fallbacks, "xcb:option" passes plugin arguments
    platforms = [ p.split(':')[0].strip() for p in requested.split(';') if p.strip() ]
    if not any(_platform_reachable(p) for p in platforms):
        raise DisplayError(f'cannot open display for platform {requested!r}: '
                           'DISPLAY or WAYLAND_DISPLAY is not set')

def create_display(title, width, height, resizable=True, ontop=False):
    _check_platform()

    app = QApplication.instance() or QApplication(sys.argv)
    return Screen(app, title, width, height, resizable, ontop)
