import logging
from dataclasses import dataclass

LOG = logging.getLogger("numguess.games")


@dataclass(frozen=True)
class GameSnapshot:
    input: str
    attempts: int
    feedback: str
    game_over: bool


class GameBase:
    """Holds the listeners a game pushes field changes to.

    Listeners are plain callables taking ``(field_name, new_value)``.
    """

    observed_fields = ()

    def __init__(self):
        self._listeners = []

    def subscribe(self, callback):
        if callback not in self._listeners:
            self._listeners.append(callback)
        return callback

    def unsubscribe(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _values(self):
        return {field: getattr(self, field) for field in self.observed_fields}

    def _notify(self, field: str, value):
        for callback in list(self._listeners):
            try:
                callback(field, value)
            except Exception:
                LOG.exception("Listener %r failed on %s", callback, field)

    def _publish_changes(self, before: dict):
        after = self._values()
        for field in self.observed_fields:
            if before[field] != after[field]:
                self._notify(field, after[field])
