"""
formpreview - Vista previa interactiva de formularios definidos en JSON.

Interpreta un esquema declarativo, valida cada campo en cada pulsación y
habilita el envío solo cuando el formulario es válido y fue modificado.
"""

__version__ = "0.1.0"
