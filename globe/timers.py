import logging
import threading

logger = logging.getLogger(__name__)


class PeriodicTimer:
    """
    Calls ``callback`` every ``interval`` seconds on a daemon thread.

    The timer stops when ``cancel()`` is called or when the callback returns
    False. ``cancel()`` is idempotent and waits for the thread to finish, so
    no tick can land after it returns (unless called from the callback itself).
    """

    def __init__(self, interval, callback, name="periodic-timer"):
        self.interval = interval
        self.callback = callback
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self):
        self._thread.start()
        return self

    def _run(self):
        while not self._stop.wait(self.interval):
            try:
                keep_going = self.callback()
            except Exception:
                logger.exception("%s callback failed, stopping", self._thread.name)
                break
            if keep_going is False:
                break
        self._stop.set()

    @property
    def active(self):
        return self._thread.is_alive() and not self._stop.is_set()

    def cancel(self):
        self._stop.set()
        if self._thread.is_alive() and threading.current_thread() is not self._thread:
            self._thread.join()

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.cancel()
