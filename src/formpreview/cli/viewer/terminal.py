"""
Utilidades de terminal para el visor interactivo.

Funciones para limpiar pantalla y capturar teclas.
"""

import os
import sys

# Nombres de teclas especiales
_WINDOWS_ARROWS = {b'K': 'left', b'M': 'right', b'H': 'up', b'P': 'down'}
_UNIX_ARROWS = {'D': 'left', 'C': 'right', 'A': 'up', 'B': 'down'}
_SPECIAL = {
    '\r': 'enter',
    '\n': 'enter',
    '\t': 'tab',
    ' ': 'space',
    '\x7f': 'backspace',
    '\x08': 'backspace',
    '\x03': 'ctrl_c',
}


def clear_screen() -> None:
    """Limpia la pantalla de la terminal."""
    os.system('cls' if os.name == 'nt' else 'clear')


def get_key() -> str:
    """
    Captura una tecla del usuario.

    Returns:
        'up', 'down', 'left', 'right', 'enter', 'tab', 'space',
        'backspace', 'esc', 'ctrl_c', o el caracter tal cual
        (respetando mayúsculas, para la edición de texto)
    """
    if os.name == 'nt':
        # Windows
        import msvcrt
        key = msvcrt.getch()

        if key in (b'\xe0', b'\x00'):  # Tecla especial (flechas)
            return _WINDOWS_ARROWS.get(msvcrt.getch(), '')
        if key == b'\x1b':
            return 'esc'
        char = key.decode('utf-8', errors='ignore')
        return _SPECIAL.get(char, char)

    # Unix/Linux/Mac
    import tty
    import termios

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        key = sys.stdin.read(1)

        if key == '\x1b':  # Secuencia de escape
            key2 = sys.stdin.read(1)
            if key2 == '[':
                return _UNIX_ARROWS.get(sys.stdin.read(1), 'esc')
            return 'esc'
        return _SPECIAL.get(key, key)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
