"""Closures explained through small runnable examples.

Example::

    import closure_lessons

    ro = closure_lessons.make_subject('ro')
    ro('smiles')  # ro smiles

    closure_lessons.run_tour()  # every lesson, in order
"""

from .lessons import (
    broken_return_print_two,
    concise_return_print_num,
    log_value_outside_lexical_scope,
    make_subject,
    more_concise_return_print_num,
    printer,
    return_function,
    return_logger,
    return_print_num,
    return_print_one,
    return_print_two,
)
from .tour import LESSONS, Lesson, LessonVerdict, capture_lesson, check_tour, get_lesson, run_tour
from .wrappers import add, make_function_with_logging, make_person, make_single_call_function

__all__ = [
    # lexical capture
    'log_value_outside_lexical_scope',
    'return_logger',
    'return_function',
    'printer',
    'return_print_one',
    'return_print_two',
    'broken_return_print_two',
    'return_print_num',
    'concise_return_print_num',
    'more_concise_return_print_num',
    'make_subject',
    # wrappers
    'make_function_with_logging',
    'make_single_call_function',
    'add',
    'make_person',
    # tour
    'Lesson',
    'LessonVerdict',
    'LESSONS',
    'run_tour',
    'capture_lesson',
    'check_tour',
    'get_lesson',
]
