"""
Tests para core/debounce.py - Tarea diferida cancelable.
"""

from formpreview.core.debounce import Debouncer


class TestDebouncer:
    """Tests para Debouncer."""

    def test_fires_after_delay(self, fake_timer):
        """Test el timer recibe la espera y ejecuta el callback."""
        calls = []
        debouncer = Debouncer(calls.append, delay=0.3, timer_factory=fake_timer)
        debouncer.schedule("a")

        timer = fake_timer.created[-1]
        assert timer.delay == 0.3
        assert timer.started
        assert timer.daemon
        assert debouncer.pending

        timer.fire()
        assert calls == ["a"]
        assert not debouncer.pending

    def test_only_last_value(self, fake_timer):
        """Test cada programación cancela la anterior."""
        calls = []
        debouncer = Debouncer(calls.append, timer_factory=fake_timer)
        debouncer.schedule("a")
        debouncer.schedule("ab")
        debouncer.schedule("abc")

        assert [t.cancelled for t in fake_timer.created] == [True, True, False]
        fake_timer.created[-1].fire()
        assert calls == ["abc"]

    def test_stale_fire_ignored(self, fake_timer):
        """Test un timer cancelado que igual dispara no ejecuta nada."""
        calls = []
        debouncer = Debouncer(calls.append, timer_factory=fake_timer)
        debouncer.schedule("viejo")
        debouncer.schedule("nuevo")

        fake_timer.created[0].fire()
        assert calls == []
        fake_timer.created[1].fire()
        assert calls == ["nuevo"]

    def test_fire_once(self, fake_timer):
        """Test un disparo repetido no vuelve a ejecutar."""
        calls = []
        debouncer = Debouncer(calls.append, timer_factory=fake_timer)
        debouncer.schedule("a")
        fake_timer.created[-1].fire()
        fake_timer.created[-1].fire()
        assert calls == ["a"]

    def test_cancel(self, fake_timer):
        """Test cancelar descarta la tarea."""
        calls = []
        debouncer = Debouncer(calls.append, timer_factory=fake_timer)
        debouncer.schedule("a")
        debouncer.cancel()
        fake_timer.created[-1].fire()
        assert calls == []
        assert not debouncer.pending

    def test_flush(self, fake_timer):
        """Test flush ejecuta de inmediato."""
        calls = []
        debouncer = Debouncer(calls.append, timer_factory=fake_timer)
        assert not debouncer.flush()
        debouncer.schedule("a")
        assert debouncer.flush()
        assert calls == ["a"]
        fake_timer.created[-1].fire()
        assert calls == ["a"]

    def test_context_manager_cancels(self, fake_timer):
        """Test salir del bloque cancela lo pendiente."""
        calls = []
        with Debouncer(calls.append, timer_factory=fake_timer) as debouncer:
            debouncer.schedule("a")
        assert fake_timer.created[-1].cancelled
        assert not debouncer.pending

    def test_real_timer(self):
        """Test con threading.Timer real."""
        import threading

        done = threading.Event()
        received = []

        def callback(value):
            received.append(value)
            done.set()

        debouncer = Debouncer(callback, delay=0.01)
        debouncer.schedule("x")
        assert done.wait(2.0)
        assert received == ["x"]

    def test_runs_are_serialized(self, fake_timer):
        """Test una generación nueva espera a que termine la anterior."""
        import threading

        calls = []
        started = threading.Event()
        release = threading.Event()

        def callback(value):
            if value == "viejo":
                started.set()
                release.wait(2.0)
            calls.append(value)

        debouncer = Debouncer(callback, timer_factory=fake_timer)
        debouncer.schedule("viejo")
        first = threading.Thread(target=fake_timer.created[0].fire)
        first.start()
        assert started.wait(2.0)

        debouncer.schedule("nuevo")
        second = threading.Thread(target=fake_timer.created[1].fire)
        second.start()
        second.join(0.1)
        assert calls == []

        release.set()
        first.join(2.0)
        second.join(2.0)
        assert calls == ["viejo", "nuevo"]
