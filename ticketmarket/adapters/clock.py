import time


class SystemClock:
    def now_unix(self) -> int:
        return int(time.time())
