from config import TICK_INTERVAL, LOG_TICKS_EVERY

ACTIVE = 'active'
PAUSED = 'paused'
DISCARDED = 'discarded'


class RepeatingTask:
    """
    Tâche périodique annulable.
    start_task / sleep viennent de Flask-SocketIO (start_background_task, sleep)
    pour rester compatible eventlet.
    """

    def __init__(self, interval, callback, start_task, sleep):
        self.interval = interval
        self._callback = callback
        self._start_task = start_task
        self._sleep = sleep
        self._started = False
        self._cancelled = False

    @property
    def cancelled(self):
        return self._cancelled

    def start(self):
        if self._started:
            return
        self._started = True
        self._start_task(self._run)

    def cancel(self):
        self._cancelled = True

    def _run(self):
        while not self._cancelled:
            self._sleep(self.interval)
            # Annulée pendant le sleep : on ne tick plus
            if self._cancelled:
                break
            self._callback()


class SessionCounter:
    """Compte les secondes pendant que l'écran est visible"""

    def __init__(self, state, start_task, sleep, interval=TICK_INTERVAL, log_every=LOG_TICKS_EVERY):
        self.state = state
        self.interval = interval
        self.log_every = log_every
        self._start_task = start_task
        self._sleep = sleep
        self._task = None
        self.status = ACTIVE

    @property
    def elapsed_seconds(self):
        return self.state.elapsed_seconds

    @property
    def running(self):
        return self._task is not None and not self._task.cancelled

    def resume(self):
        if self.status == DISCARDED:
            return
        self.status = ACTIVE
        if self.running:
            return
        self._task = RepeatingTask(self.interval, self.tick, self._start_task, self._sleep)
        self._task.start()

    def pause(self):
        if self.status == DISCARDED:
            return
        self.status = PAUSED
        self._cancel_task()

    def discard(self):
        self.status = DISCARDED
        self._cancel_task()

    def tick(self):
        if self.status != ACTIVE:
            return
        self.state.elapsed_seconds += 1
        if self.log_every and self.state.elapsed_seconds % self.log_every == 0:
            print(f"⏱️ [TIMER] {self.state.elapsed_seconds}s écoulées")

    def _cancel_task(self):
        if self._task is not None:
            self._task.cancel()
            self._task = None
