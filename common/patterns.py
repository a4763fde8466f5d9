# Observer pattern
class EventListener:
    def update(self, event_type, filename):
        pass

class EventManager:
    def __init__(self, *operations):
        self._listeners = {}
        for operation in operations:
            self._listeners[operation] = []

    def subscribe(self, event_type, listener):
        self._listeners.setdefault(event_type, []).append(listener)

    def unsubscribe(self, event_type, listener):
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def notify(self, event_type, filename):
        # Listener errors propagate and stop the rest of the pass
        for listener in list(self._listeners.get(event_type, [])):
            listener.update(event_type, filename)

    def listeners(self, event_type):
        return tuple(self._listeners.get(event_type, []))
