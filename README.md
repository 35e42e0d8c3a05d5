# pushswap

`pushswap` sorts a list of integers using two stacks, `a` and `b`, and the
classic stack operations: swap (`sa`, `sb`, `ss`), push (`pa`, `pb`),
rotate (`ra`, `rb`, `rr`) and reverse rotate (`rra`, `rrb`, `rrr`).

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, as space-separated strings, or both:

```
pushswap 3 1 2
pushswap "5 -4 12" 7
```

When two or more numbers are given and they are already in ascending order,
nothing is printed. Otherwise the stack is sorted and printed, smallest
first, one number per line.

Options may come before the numbers:

- `--simple`, `--medium`, `--complex`, `--adaptive` name a strategy
  (`--adaptive` is the default); at most one may be given.
- `--bench` may be given once.

Only the first three arguments are inspected for these options.

The program writes `Error` to standard error and exits with status 1 when:

- a numeric argument holds a character other than a digit, a space, or a
  minus sign that starts a word and is followed by a digit;
- a number is greater than 2147483647;
- the same value is given more than once;
- more than one strategy is named, or `--bench` is given twice.

## What it does not do

- Whichever strategy is named, the same sort is used: the smallest element
  of `a` is rotated to the top the shorter way and pushed onto `b`, then
  everything is pushed back onto `a`. The strategy is checked but not
  otherwise acted on, and `--bench` produces no report.
- The program prints the sorted numbers, not the list of operations that
  sorted them.

## Library use

```python
from pushswap.stack import Stack
from pushswap.sorting import simple_sort
from pushswap.parsing import parse_arguments
from pushswap.cli import compute_disorder

values = parse_arguments(["3 1", "2"])
print(compute_disorder(values))   # share of pairs that are out of order

a = Stack(values)
b = Stack([])
simple_sort(a, b)
print(list(a))                    # [1, 2, 3]
```

`Stack` offers `swap`, `rotate`, `reverse_rotate` and `push_onto`; the
operations `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb` and
`rrr` in `pushswap.stack` act on `Stack` objects, and the swaps print their
name. Parsing failures raise `pushswap.parsing.InputError`, and
`pushswap.options.select_strategy` returns a `Strategy` for the given
arguments. `compute_disorder` returns NaN for fewer than two values.

The package also carries small helpers:

- `pushswap.chars`: ASCII classification and case conversion;
- `pushswap.text`: string search, comparison and bounded copying;
- `pushswap.transform`: `substr`, `strjoin`, `strtrim`, `split`, `itoa`,
  `atoi`, `strmapi`, `striteri`;
- `pushswap.memory`: byte-buffer `memset`, `bzero`, `memcpy`, `memmove`,
  `memchr`, `memcmp`, `calloc`;
- `pushswap.output`: writing characters, strings and numbers to a stream;
- `pushswap.linked_list`: a singly linked list of `Node` objects.

## Tests

```
pip install ".[test]"
pytest
```