import os
import sys
import time
from typing import Optional, TextIO


class StatusLogger:
    """
    Shows start_msg on a single console line while the block runs.
    On success, the line is replaced by finish_msg or cleared if there is none.
    """

    def __init__(
        self,
        start_msg: str,
        finish_msg: Optional[str] = None,
        stream: Optional[TextIO] = None,
        suppress_log: bool = False,
    ):
        self.start_msg = start_msg
        self.finish_msg = finish_msg
        self.stream = stream if stream is not None else sys.stdout
        self.suppress_log = suppress_log

    def __enter__(self):
        self._write("\r" + self.start_msg)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self._finish(self.finish_msg)

    def _finish(self, msg: Optional[str]):
        if msg is None:
            self._write("\r\033[K\r")
        else:
            self._write("\r\033[K" + msg + os.linesep)

    def _write(self, text: str):
        if self.suppress_log:
            return
        self.stream.write(text)
        self.stream.flush()


class TimedStatusLogger(StatusLogger):
    """
    Like StatusLogger, but prefixes finish_msg with the elapsed time.
    The elapsed time stays available as elapsed_secs after the block.
    """

    def __init__(
        self,
        start_msg: str,
        finish_msg: Optional[str] = None,
        stream: Optional[TextIO] = None,
        suppress_log: bool = False,
    ):
        super().__init__(start_msg, finish_msg, stream, suppress_log)
        self.start_time = time.perf_counter_ns()
        self.elapsed_secs: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter_ns()
        return super().__enter__()

    def __exit__(self, exc_type, exc_value, traceback):
        self.elapsed_secs = (time.perf_counter_ns() - self.start_time) / 1e9
        if exc_type is None:
            msg = None
            if self.finish_msg is not None:
                msg = f"Took {self.elapsed_secs:.3f}s: " + self.finish_msg
            self._finish(msg)
