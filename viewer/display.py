from collections import namedtuple

Geometry = namedtuple('Geometry', 'title width height resizable')
DEFAULT_GEOMETRY = Geometry('colat', 400, 400, True)

QUIT    = 'quit'
KEYDOWN = 'keydown'
KEYUP   = 'keyup'
EXPOSE  = 'expose'

Event = namedtuple('Event', 'type key')

KEY_Q         = 'q'
KEY_ESCAPE    = 'escape'
KEY_SPACE     = 'space'
KEY_RETURN    = 'return'
KEY_RIGHT     = 'right'
KEY_J         = 'j'
KEY_BACKSPACE = 'backspace'
KEY_LEFT      = 'left'
KEY_K         = 'k'

QUIT_KEYS     = frozenset({ KEY_Q, KEY_ESCAPE })
NEXT_KEYS     = frozenset({ KEY_SPACE, KEY_RETURN, KEY_RIGHT, KEY_J })
PREVIOUS_KEYS = frozenset({ KEY_BACKSPACE, KEY_LEFT, KEY_K })

# other spellings accepted where key names are typed by hand
KEY_ALIASES = {
    'enter': KEY_RETURN,
    'esc': KEY_ESCAPE,
}

def key_name(name):
    name = name.strip().lower()
    return KEY_ALIASES.get(name, name)

def quit_event():
    return Event(QUIT, None)

def key_down(key):
    return Event(KEYDOWN, key)

def key_up(key):
    return Event(KEYUP, key)

def expose_event():
    return Event(EXPOSE, None)

class DisplayError(Exception):
    '''
    Raised when a display can't be created or stops delivering events. The
    message carries the platform diagnostic.
    '''

class Display:
    def __init__(self):
        pass

    def paint(self, color):
        '''Fill the whole surface with color and present it.'''
        pass

    def wait_for_event(self):
        '''Block until the next Event is available.'''
        raise NotImplementedError

    def release(self):
        pass
