"""Command-line front end: interactive stack and queue sessions and
expression tools."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from lineards.expressions import (
    evaluate_postfix,
    infix_to_postfix,
    infix_to_prefix,
    is_balanced,
)
from lineards.queues import CircularQueue, LinearQueue, QueueEmptyError, QueueFullError
from lineards.stack import BoundedStack, StackEmptyError, StackFullError

__all__ = ["main"]

_STACK_MENU = (
    "\nEnter the operation\n"
    "1.isfull\n2.isempty\n3.push\n4.pop\n5.peek\n6.exit\n"
)

_QUEUE_MENU = (
    "\nOperations on Queue\n"
    "1.Enque(add elements)\n"
    "2.Deque(del elements)\n"
    "3.Display\n"
    "4.Exit\n"
    "Enter the number = "
)


def _read_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _read_capacity() -> int:
    return _read_int("Enter the size : ")


def _stack_session(args: argparse.Namespace) -> int:
    try:
        stack: BoundedStack[int] = BoundedStack(_read_capacity())
    except EOFError:
        print("error: no size given", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: invalid size: {exc}", file=sys.stderr)
        return 1

    while True:
        try:
            choice = input(_STACK_MENU).strip()
            match choice:
                case "1":
                    print("stack is full" if stack.is_full() else "stack is not full")
                case "2":
                    print("Stack is empty" if stack.is_empty() else "Stack is not empty")
                case "3":
                    try:
                        value = _read_int("Enter the value you want to push: ")
                    except ValueError:
                        print("Enter a valid number")
                        continue
                    try:
                        stack.push(value)
                    except StackFullError:
                        print("Stack is full")
                    else:
                        print(f"{value} is pushed into the stack")
                case "4":
                    try:
                        print(f"popped element {stack.pop()}")
                    except StackEmptyError:
                        print("The stack is empty")
                case "5":
                    try:
                        print(f"top element {stack.peek()}")
                    except StackEmptyError:
                        print("The stack is empty")
                case "6":
                    return 0
                case _:
                    print("Enter a valid operation")
        except EOFError:
            return 0


def _queue_session(args: argparse.Namespace) -> int:
    queue_type = CircularQueue if args.circular else LinearQueue
    try:
        queue = queue_type(_read_capacity())
    except EOFError:
        print("error: no size given", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: invalid size: {exc}", file=sys.stderr)
        return 1

    while True:
        try:
            choice = input(_QUEUE_MENU).strip()
            match choice:
                case "1":
                    try:
                        value = _read_int("Enter the value you want to add in Queue = ")
                    except ValueError:
                        print("Enter a valid number")
                        continue
                    try:
                        queue.enqueue(value)
                    except QueueFullError:
                        print("Queue is full, cant add")
                    else:
                        print(f"{value} is added in the que")
                case "2":
                    try:
                        queue.dequeue()
                    except QueueEmptyError:
                        print("Queue is empty !")
                case "3":
                    if queue.is_empty():
                        print("Que is empty")
                    else:
                        print("Que = " + "\t".join(str(item) for item in queue.items()))
                case "4":
                    return 0
                case _:
                    print("Invalid operation")
        except EOFError:
            return 0


def _balance(args: argparse.Namespace) -> int:
    print("balanced" if is_balanced(args.text) else "not balanced")
    return 0


def _postfix(args: argparse.Namespace) -> int:
    print(f"Postfix expression: {infix_to_postfix(args.expression)}")
    return 0


def _prefix(args: argparse.Namespace) -> int:
    print(f"Prefix expression: {infix_to_prefix(args.expression)}")
    return 0


def _evaluate(args: argparse.Namespace) -> int:
    try:
        result = evaluate_postfix(args.expression)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"evaluation {result}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lineards",
        description="Stacks, queues and expression tools.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    stack = commands.add_parser("stack", help="interactive stack session")
    stack.set_defaults(handler=_stack_session)

    queue = commands.add_parser("queue", help="interactive queue session")
    queue.add_argument(
        "--circular", action="store_true", help="reuse freed slots at once"
    )
    queue.set_defaults(handler=_queue_session)

    balance = commands.add_parser("balance", help="check bracket balance")
    balance.add_argument("text")
    balance.set_defaults(handler=_balance)

    postfix = commands.add_parser("postfix", help="convert infix to postfix")
    postfix.add_argument("expression")
    postfix.set_defaults(handler=_postfix)

    prefix = commands.add_parser("prefix", help="convert infix to prefix")
    prefix.add_argument("expression")
    prefix.set_defaults(handler=_prefix)

    evaluate = commands.add_parser("evaluate", help="evaluate a postfix expression")
    evaluate.add_argument("expression")
    evaluate.set_defaults(handler=_evaluate)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    args = _build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())