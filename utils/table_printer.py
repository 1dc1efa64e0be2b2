# utils/table_printer.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Multi-threaded truth-table printing in canonical row order

"""Truth-table printing with worker threads.

The ``2**n`` assignment indices are cut into half-open slices
``[start, stop)`` that are dealt round-robin to the workers: slice ``k`` goes
to worker ``k % workers``. Each worker parses its own copy of the formula (so
no variable cells are shared between threads) and sends formatted rows on its
own bounded queue, closing every slice with an end marker.

The main thread drains the queues in the same round-robin order, one slice
at a time, so the output is ordered by assignment index exactly as the
single-threaded table. A worker that fails forwards its exception on its
queue; the main thread re-raises it.
"""

import queue
import sys
import threading
from typing import Iterator, List, Optional, TextIO, Tuple, Union

from rpn import Tree, parse
from core.truth_table import assignment_bits, format_header, format_row, iter_assignments
from .logger import get_logger


DEFAULT_WORKERS = 4
QUEUE_DEPTH = 64
SLICE_SIZE = 256

Slice = Tuple[int, int]


class _SliceEnd:
    """Marker closing one slice on a worker queue."""

    pass


_SLICE_END = _SliceEnd()


class _WorkerFailure:
    """Exception raised inside a worker, forwarded to the main thread."""

    def __init__(self, exception: BaseException):
        self.exception = exception


def make_slices(total: int, size: int = SLICE_SIZE) -> List[Slice]:
    """Cut ``range(total)`` into consecutive half-open slices."""
    if size < 1:
        raise ValueError(f"Slice size must be positive, got {size}")
    return [(start, min(start + size, total)) for start in range(0, total, size)]


class TableWorker(threading.Thread):
    """Formats the rows of its slices and sends them on its queue.

    Attributes:
        formula: RPN formula, parsed privately by the worker
        slices: Slices handled by this worker, in increasing order
        rows: Bounded queue carrying rows, slice markers and failures
    """

    def __init__(
        self,
        formula: str,
        slices: List[Slice],
        color: bool,
        stop: threading.Event,
        depth: int = QUEUE_DEPTH,
    ):
        super().__init__(daemon=True)
        self.formula = formula
        self.slices = slices
        self.color = color
        self.stop = stop
        self.rows: "queue.Queue" = queue.Queue(maxsize=max(1, depth))

    def _put(self, item) -> bool:
        """Block until ``item`` is queued; give up once the reader has stopped."""
        while not self.stop.is_set():
            try:
                self.rows.put(item, timeout=0.1)
                return True
            except queue.Full:
                continue
        return False

    def run(self):
        try:
            tree = parse(self.formula)
            var_list = tree.var_list
            width = len(var_list)

            for start, stop in self.slices:
                for index, result in iter_assignments(tree, range(start, stop)):
                    if not self._put(format_row(assignment_bits(index, width), result, self.color)):
                        return
                if not self._put(_SLICE_END):
                    return

        except Exception as e:
            self._put(_WorkerFailure(e))


def iter_table_lines(
    formula: Union[str, Tree],
    color: bool = False,
    workers: int = DEFAULT_WORKERS,
    slice_size: int = SLICE_SIZE,
) -> Iterator[str]:
    """Yield the lines of the truth table, computed by worker threads.

    Args:
        formula: RPN formula (or a tree, which is printed back to RPN)
        color: Colorize cells and separators with ANSI escapes
        workers: Number of worker threads (at least one is used)
        slice_size: Number of rows per slice

    Raises:
        ParseError: The formula is malformed
    """
    logger = get_logger()
    text = str(formula.root) if isinstance(formula, Tree) else formula
    var_list = parse(text).var_list

    slices = make_slices(1 << len(var_list), slice_size)
    count = max(1, min(workers, len(slices)))
    logger.debug(f"Printing {len(slices)} slice(s) of {text} with {count} worker(s)")

    stop = threading.Event()
    pool = [TableWorker(text, slices[k::count], color, stop) for k in range(count)]
    for worker in pool:
        worker.start()

    try:
        yield from format_header(var_list, color)

        for number in range(len(slices)):
            rows = pool[number % count].rows
            while True:
                item = rows.get()
                if item is _SLICE_END:
                    break
                if isinstance(item, _WorkerFailure):
                    raise item.exception
                yield item
    finally:
        stop.set()
        for worker in pool:
            worker.join(timeout=1.0)


def print_truth_table(
    formula: Union[str, Tree],
    color: bool = False,
    workers: int = DEFAULT_WORKERS,
    out: Optional[TextIO] = None,
) -> None:
    """Print the truth table of a formula to ``out`` (default: stdout)."""
    out = out if out is not None else sys.stdout
    for line in iter_table_lines(formula, color, workers):
        print(line, file=out)
