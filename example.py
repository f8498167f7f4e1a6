"""Example usage of closure_lessons."""

import closure_lessons

# A closure over a parameter of the outer function
print_three = closure_lessons.return_print_num(3)
print_three()  # 3

# A captured value combined with a call-time argument
ro = closure_lessons.make_subject('ro')
ro('smiles')  # ro smiles

# Wrapping another function to log each call
logged_add = closure_lessons.make_function_with_logging(closure_lessons.add)
print(f'Returned: {logged_add(7, 12)}')

# Private state that survives between calls
greet_once = closure_lessons.make_single_call_function(closure_lessons.make_person)
greet_once('ro', 'wyatt')  # ro wyatt
greet_once('ro', 'wyatt')  # nothing

# Forward tour output somewhere other than stdout
output = []
closure_lessons.run_tour(print_callback=lambda stream, text: output.append(text))
print(f'Tour printed {len(output)} lines')

# Check every lesson still prints what it promises
for verdict in closure_lessons.check_tour():
    print(f'{verdict.name}: {verdict.verdict}')
