"""
Tarea diferida cancelable.

Cada nueva programación cancela la pendiente, de modo que solo el último
valor se procesa cuando la entrada se detiene.
"""

import logging
import threading
from typing import Any, Callable, Optional, Tuple

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Ejecuta un callback tras una pausa en las llamadas a schedule().

    Args:
        callback: Función a invocar con los últimos argumentos
        delay: Espera en segundos
        timer_factory: Fábrica con la interfaz de threading.Timer
    """

    def __init__(
        self,
        callback: Callable[..., Any],
        delay: float = 0.5,
        timer_factory: Callable[..., Any] = threading.Timer,
    ):
        self.callback = callback
        self.delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        # Serializa las ejecuciones: una generación nueva espera a la anterior
        self._run_lock = threading.RLock()
        self._timer: Optional[Any] = None
        self._generation = 0
        self._pending_args: Optional[Tuple[Any, ...]] = None

    @property
    def pending(self) -> bool:
        """True si hay una tarea programada sin ejecutar."""
        return self._pending_args is not None

    def schedule(self, *args: Any) -> None:
        """Programa el callback, cancelando la tarea anterior."""
        with self._lock:
            self._cancel_locked()
            self._generation += 1
            self._pending_args = args
            timer = self._timer_factory(self.delay, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
        timer.start()

    def cancel(self) -> None:
        """Cancela la tarea pendiente, si existe."""
        with self._lock:
            self._cancel_locked()

    def flush(self) -> bool:
        """Ejecuta ya la tarea pendiente. Retorna True si había una."""
        with self._run_lock:
            with self._lock:
                args = self._pending_args
                self._cancel_locked()
            if args is None:
                return False
            self.callback(*args)
        return True

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            logger.debug("Tarea diferida cancelada (generación %d)", self._generation)
        self._timer = None
        self._pending_args = None
        # Invalida cualquier disparo en curso de la generación actual
        self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._run_lock:
            with self._lock:
                if generation != self._generation or self._pending_args is None:
                    return
                args = self._pending_args
                self._timer = None
                self._pending_args = None
            self.callback(*args)

    def __enter__(self) -> "Debouncer":
        return self

    def __exit__(self, *exc) -> None:
        self.cancel()
