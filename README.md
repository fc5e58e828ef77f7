# lineards

Small fixed-capacity linear data structures and some stack-based expression tools.

- `BoundedStack` (in `lineards.stack`) is a fixed-capacity LIFO stack.
- `LinearQueue` (in `lineards.queues`) is a fixed-capacity FIFO queue whose slots are not reused until it drains.
- `CircularQueue` (in `lineards.queues`) is a fixed-capacity ring-buffer FIFO queue.
- `precedence`, `is_balanced`, `infix_to_postfix`, `infix_to_prefix` and `evaluate_postfix` (in `lineards.expressions`) are the expression tools.
- `lineards` is a command-line front end to all of the above.

The package has no dependencies beyond the standard library and supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Stacks

```python
from lineards.stack import BoundedStack, StackFullError, StackEmptyError

stack = BoundedStack(2)
stack.push(10)
stack.push(20)
stack.is_full()   # True
stack.peek()      # 20
stack.pop()       # 20
len(stack)        # 1
list(stack)       # [10]  (iteration runs from top to bottom)
```

Pushing onto a full stack raises `StackFullError` (a subclass of `OverflowError`). Popping or peeking an empty stack raises `StackEmptyError` (a subclass of `IndexError`). A negative capacity raises `ValueError`.

## Queues

```python
from lineards.queues import CircularQueue, LinearQueue, QueueFullError, QueueEmptyError

ring = CircularQueue(3)
for value in (1, 2, 3):
    ring.enqueue(value)
ring.dequeue()    # 1
ring.enqueue(4)   # the freed slot is reused
ring.items()      # [2, 3, 4]

line = LinearQueue(2)
line.enqueue(1)
line.enqueue(2)
line.dequeue()    # 1
line.is_full()    # True: freed front slots are not reused
line.dequeue()    # 2
line.is_full()    # False: the queue drained, so all slots are free again
```

Both queues offer `enqueue`, `dequeue`, `is_full`, `is_empty`, `items()` (front to rear) and `len()`.

Enqueuing onto a full queue raises `QueueFullError` (a subclass of `OverflowError`). Dequeuing from an empty one raises `QueueEmptyError` (a subclass of `IndexError`). `LinearQueue` rejects a negative capacity and `CircularQueue` a capacity below 1, both with `ValueError`.

## Expressions

```python
from lineards.expressions import (
    evaluate_postfix, infix_to_postfix, infix_to_prefix, is_balanced, precedence,
)

is_balanced("{[()]}")          # True
is_balanced("([)]")            # False
infix_to_postfix("a+b*c")      # "abc*+"
infix_to_prefix("(a+b)*c")     # "*+abc"
evaluate_postfix("23*4+")      # 10
precedence("*")                # 2
```

Expressions are read one character at a time. `()`, `[]` and `{}` are brackets, `*` and `/` bind tighter than `+` and `-`, and every other character is treated as an operand. `precedence` returns 2 for `*` and `/`, 1 for `+` and `-`, 0 for opening brackets and -1 for anything else.

`evaluate_postfix` takes single-digit operands, ignores whitespace and truncates division toward zero. It raises `ValueError` for a malformed expression or an unexpected character, and `ZeroDivisionError` when dividing by zero.

## Command line

The `lineards` command has one sub-command per tool:

```
lineards stack                 # interactive stack session
lineards queue                 # interactive linear queue session
lineards queue --circular      # interactive circular queue session
lineards balance "{[()]}"      # prints "balanced" or "not balanced"
lineards postfix "a+b*c"       # prints "Postfix expression: abc*+"
lineards prefix "(a+b)*c"      # prints "Prefix expression: *+abc"
lineards evaluate "23*4+"      # prints "evaluation 10"
```

The interactive sessions first ask for the capacity, then show a numbered menu read from standard input: for the stack, check full, check empty, push, pop, peek and exit; for a queue, enqueue, dequeue, display and exit. A session also ends at end of input. `evaluate` prints the error to standard error and exits with status 1 for a malformed expression or division by zero; an invalid capacity does the same for the sessions.