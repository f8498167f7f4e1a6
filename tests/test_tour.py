from __future__ import annotations

import logging
from dataclasses import replace

import pytest
from dirty_equals import IsStr
from inline_snapshot import snapshot

from closure_lessons import tour
from closure_lessons.__main__ import main

TOUR_OUTPUT = """\
outside of function
logger
printer
1
2
None
3
4
5
ro smiles
ro laughs
ro eats
ro sleeps
Calling add with arguments 1, 2
3
Calling add with arguments 9, 3
12
Calling add with arguments 7, 12
19
ro wyatt
"""


def test_run_tour_prints_every_lesson(capsys: pytest.CaptureFixture[str]):
    tour.run_tour()
    assert capsys.readouterr().out == TOUR_OUTPUT


def test_run_tour_is_repeatable(capsys: pytest.CaptureFixture[str]):
    tour.run_tour()
    tour.run_tour()
    assert capsys.readouterr().out == TOUR_OUTPUT * 2


def test_expected_outputs_cover_tour():
    assert ''.join(lesson.expected for lesson in tour.LESSONS) == TOUR_OUTPUT


def test_lesson_names():
    assert [lesson.name for lesson in tour.LESSONS] == snapshot(
        [
            'outside_lexical_scope',
            'return_logger',
            'return_function',
            'print_one',
            'print_two',
            'broken_print_two',
            'print_num',
            'concise_print_num',
            'more_concise_print_num',
            'make_subject',
            'function_with_logging',
            'single_call_function',
        ]
    )


def test_print_callback(capsys: pytest.CaptureFixture[str]):
    output = []

    def callback(stream: str, text: str) -> None:
        output.append((stream, text))

    tour.run_tour([tour.get_lesson('make_subject')], print_callback=callback)
    assert output == snapshot(
        [
            ('stdout', 'ro smiles\n'),
            ('stdout', 'ro laughs\n'),
            ('stdout', 'ro eats\n'),
            ('stdout', 'ro sleeps\n'),
        ]
    )
    assert capsys.readouterr().out == ''


def test_print_callback_flushes_partial_line():
    output = []
    lesson = tour.Lesson('partial', 'no newline', lambda: print('tail', end=''), 'tail')
    tour.run_tour([lesson], print_callback=lambda stream, text: output.append((stream, text)))
    assert output == snapshot([('stdout', 'tail')])


def test_print_callback_flushes_when_lesson_raises():
    output = []

    def fail_midline():
        print('partial', end='')
        raise RuntimeError('boom')

    lesson = tour.Lesson('failing', 'raises after printing', fail_midline, 'partial')
    with pytest.raises(RuntimeError, match='boom'):
        tour.run_tour([lesson], print_callback=lambda stream, text: output.append((stream, text)))
    assert output == snapshot([('stdout', 'partial')])


def test_run_tour_logs_description(caplog: pytest.LogCaptureFixture, capsys: pytest.CaptureFixture[str]):
    with caplog.at_level(logging.DEBUG, logger='closure_lessons.tour'):
        tour.run_tour([tour.get_lesson('print_num')])
    assert caplog.messages == snapshot(
        ['running lesson print_num: Closures retain arguments passed into the outer function.']
    )
    assert capsys.readouterr().out == '3\n'


def test_capture_lesson(capsys: pytest.CaptureFixture[str]):
    assert tour.capture_lesson(tour.get_lesson('broken_print_two')) == snapshot('None\n')
    assert capsys.readouterr().out == ''


def test_get_lesson_unknown():
    with pytest.raises(KeyError):
        tour.get_lesson('print_six')


def test_check_tour_all_pass():
    verdicts = tour.check_tour()
    assert len(verdicts) == len(tour.LESSONS)
    assert {v.verdict for v in verdicts} == {'PASS'}
    assert all(v.diff is None for v in verdicts)


def test_check_lesson_reports_diff():
    lesson = replace(tour.get_lesson('print_two'), expected='3\n')
    verdict = tour.check_lesson(lesson)
    assert verdict.verdict == 'FAIL'
    assert verdict.diff == snapshot("""\
--- expected
+++ actual
@@ -1 +1 @@
-3
+2""")


def test_check_lesson_logs_verdict(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger='closure_lessons.tour'):
        tour.check_lesson(tour.get_lesson('print_one'))
    assert caplog.messages == [IsStr(regex=r'lesson print_one: PASS')]


def test_normalize_output():
    assert tour.normalize_output('a  \r\nb\t\n\n\n') == snapshot('a\nb')
    assert tour.normalize_output('') == ''


def test_generate_diff_equal():
    assert tour.generate_diff('a\nb', 'a\nb') == ''


def test_main(capsys: pytest.CaptureFixture[str]):
    assert main() == 0
    assert capsys.readouterr().out == TOUR_OUTPUT
