import threading


class CallCounter:
    def __init__(self):
        self.count = 0
        self.lock = threading.Lock()

    def increment(self):
        with self.lock:
            self.count += 1
            return self.count

    def reset(self):
        with self.lock:
            self.count = 0

    @property
    def value(self):
        with self.lock:
            return self.count
