"""The ordered tour of closure lessons.

Each :class:`Lesson` pairs a call site with the narration that introduces it
and the exact stdout it prints. :func:`run_tour` plays the lessons in order,
and :func:`check_tour` replays them and compares what was printed against
what each lesson expects.

Example::

    from closure_lessons.tour import check_tour, run_tour

    run_tour()
    assert all(v.verdict == 'PASS' for v in check_tour())
"""

from __future__ import annotations

import contextlib
import difflib
import io
import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from . import lessons, wrappers

logger = logging.getLogger(__name__)

PrintCallback = Callable[[str, str], None]


@dataclass(frozen=True)
class Lesson:
    """One example: what it teaches, how it is called, what it prints."""

    name: str
    description: str
    demo: Callable[[], None]
    expected: str


@dataclass
class LessonVerdict:
    """Outcome of replaying a lesson against its expected output."""

    name: str
    verdict: str  # PASS or FAIL
    diff: Optional[str] = None


# ---------------------------------------------------------------------------
# Call sites
# ---------------------------------------------------------------------------


def _demo_outside_lexical_scope() -> None:
    lessons.log_value_outside_lexical_scope()


def _demo_return_logger() -> None:
    logger_fn = lessons.return_logger()
    logger_fn()


def _demo_return_function() -> None:
    new_printer = lessons.return_function(lessons.printer)
    new_printer()


def _demo_print_one() -> None:
    print_one = lessons.return_print_one()
    print_one()


def _demo_print_two() -> None:
    print_two = lessons.return_print_two()
    print_two()


def _demo_broken_print_two() -> None:
    broken_print_two = lessons.broken_return_print_two()
    broken_print_two()


def _demo_print_num() -> None:
    print_three = lessons.return_print_num(3)
    print_three()


def _demo_concise_print_num() -> None:
    print_four = lessons.concise_return_print_num(4)
    print_four()


def _demo_more_concise_print_num() -> None:
    print_five = lessons.more_concise_return_print_num(5)
    print_five()


def _demo_make_subject() -> None:
    ro = lessons.make_subject('ro')
    for verb in ('smiles', 'laughs', 'eats', 'sleeps'):
        ro(verb)


def _demo_function_with_logging() -> None:
    logged_add = wrappers.make_function_with_logging(wrappers.add)
    logged_add(1, 2)
    logged_add(9, 3)
    logged_add(7, 12)


def _demo_single_call_function() -> None:
    make_person_once = wrappers.make_single_call_function(wrappers.make_person)
    for _ in range(4):
        make_person_once('ro', 'wyatt')


LESSONS: tuple[Lesson, ...] = (
    Lesson(
        'outside_lexical_scope',
        'A function can read values defined outside its own lexical scope.',
        _demo_outside_lexical_scope,
        'outside of function\n',
    ),
    Lesson(
        'return_logger',
        'Functions can return function definitions to be called later.',
        _demo_return_logger,
        'logger\n',
    ),
    Lesson(
        'return_function',
        'Functions can be passed into other functions as values.',
        _demo_return_function,
        'printer\n',
    ),
    Lesson(
        'print_one',
        'A returned function keeps access to bindings outside its own scope.',
        _demo_print_one,
        '1\n',
    ),
    Lesson(
        'print_two',
        'The retained binding can be in any outer scope, not just the outermost.',
        _demo_print_two,
        '2\n',
    ),
    Lesson(
        'broken_print_two',
        'A parameter with the same name shadows the outer binding.',
        _demo_broken_print_two,
        'None\n',
    ),
    Lesson(
        'print_num',
        'Closures retain arguments passed into the outer function.',
        _demo_print_num,
        '3\n',
    ),
    Lesson(
        'concise_print_num',
        'It is common to return an anonymous function directly.',
        _demo_concise_print_num,
        '4\n',
    ),
    Lesson(
        'more_concise_print_num',
        'A chained lambda is the same closure in one expression.',
        _demo_more_concise_print_num,
        '5\n',
    ),
    Lesson(
        'make_subject',
        'A closure can combine a captured value with its own arguments.',
        _demo_make_subject,
        'ro smiles\nro laughs\nro eats\nro sleeps\n',
    ),
    Lesson(
        'function_with_logging',
        'A closure can wrap another function to add behaviour around each call.',
        _demo_function_with_logging,
        (
            'Calling add with arguments 1, 2\n3\n'
            'Calling add with arguments 9, 3\n12\n'
            'Calling add with arguments 7, 12\n19\n'
        ),
    ),
    Lesson(
        'single_call_function',
        'A closure can keep private mutable state between calls.',
        _demo_single_call_function,
        'ro wyatt\n',
    ),
)


def get_lesson(name: str) -> Lesson:
    """Look up a lesson by name. Raises KeyError for unknown names."""
    return {lesson.name: lesson for lesson in LESSONS}[name]


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------


class _CallbackWriter(io.TextIOBase):
    """Text stream that forwards complete lines to a print callback."""

    def __init__(self, callback: PrintCallback) -> None:
        super().__init__()
        self._callback = callback
        self._pending = ''

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        self._pending += text
        *lines, self._pending = self._pending.split('\n')
        for line in lines:
            self._callback('stdout', line + '\n')
        return len(text)

    def flush(self) -> None:
        if self._pending:
            self._callback('stdout', self._pending)
            self._pending = ''


def run_tour(
    lessons_to_run: Iterable[Lesson] = LESSONS,
    *,
    print_callback: Optional[PrintCallback] = None,
) -> None:
    """Run each lesson's call site in order.

    Output goes to stdout unless `print_callback` is given, in which case each
    printed line is forwarded as ``print_callback('stdout', line)``.
    """
    for lesson in lessons_to_run:
        logger.debug('running lesson %s: %s', lesson.name, lesson.description)
        if print_callback is None:
            lesson.demo()
            continue
        writer = _CallbackWriter(print_callback)
        try:
            with contextlib.redirect_stdout(writer):
                lesson.demo()
        finally:
            writer.flush()


def capture_lesson(lesson: Lesson) -> str:
    """Run one lesson and return everything it printed."""
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        lesson.demo()
    return buffer.getvalue()


# ---------------------------------------------------------------------------
# Checking
# ---------------------------------------------------------------------------


def normalize_output(text: str) -> str:
    """Normalize printed output for comparison.

    Converts CRLF to LF, strips trailing whitespace from each line and drops
    trailing empty lines.
    """
    lines = [line.rstrip() for line in re.split(r'\r?\n', text)]
    while lines and not lines[-1]:
        lines.pop()
    return '\n'.join(lines)


def generate_diff(expected: str, actual: str) -> str:
    """Unified diff between expected and actual normalized output."""
    diff = difflib.unified_diff(
        expected.splitlines(),
        actual.splitlines(),
        fromfile='expected',
        tofile='actual',
        lineterm='',
    )
    return '\n'.join(diff)


def check_lesson(lesson: Lesson) -> LessonVerdict:
    expected = normalize_output(lesson.expected)
    actual = normalize_output(capture_lesson(lesson))
    if expected == actual:
        verdict = LessonVerdict(lesson.name, 'PASS')
    else:
        verdict = LessonVerdict(lesson.name, 'FAIL', diff=generate_diff(expected, actual))
    logger.debug('lesson %s: %s', lesson.name, verdict.verdict)
    return verdict


def check_tour(lessons_to_check: Iterable[Lesson] = LESSONS) -> list[LessonVerdict]:
    """Replay every lesson and compare its output with what it expects."""
    return [check_lesson(lesson) for lesson in lessons_to_check]
