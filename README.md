# numcraft

A small collection of number-theory and arithmetic helpers written as plain
Python functions: prime tests and factorisation, digit-based number families,
divisor sums, amicable and perfect numbers, taxicab numbers, Collatz chains,
simple comparisons, calendar arithmetic, a craps simulation, summary
statistics and a few text layouts.

Nothing outside the standard library is required.

## Installation

```
pip install numcraft
```

To run the test suite:

```
pip install "numcraft[test]"
pytest
```

## Modules at a glance

| Module | What it offers |
| --- | --- |
| `numcraft.primes` | `is_prime`, `primes_between`, `closest_prime`, `prime_factors`, `super_prime_index`, `is_super_prime`, `is_smith`, `smith_numbers` |
| `numcraft.digits` | `digits`, `digit_sum`, `is_harshad`, `harshad_numbers`, `digital_root`, `reversed_digits`, `is_armstrong`, `armstrong_numbers`, `is_factorion`, `factorions` |
| `numcraft.divisors` | `proper_divisor_sum`, `are_friends`, `amicable_pairs`, `is_perfect`, `perfect_numbers`, `hardy_ramanujan` (returning `CubeSumPair` records), `collatz` |
| `numcraft.compare` | `max3`, `max4`, `median3`, `symbolic_comparison`, `remainder`, `approximate_sqrt` |
| `numcraft.calendar_days` | `is_leap`, `day_of_year` |
| `numcraft.text` | `sort_names`, `count_words`, `triangle`, `histogram` |
| `numcraft.dice` | `roll_dice`, `play_craps`, `win_probability` |
| `numcraft.stats` | `summarize`, returning a `Summary` |

A few behaviours worth knowing:

- `closest_prime(n)` returns the largest prime strictly below `n` and raises
  `ValueError` when there is none.
- `super_prime_index(p)` gives the 1-based position of the prime `p` among the
  primes; it raises `ValueError` if `p` is not prime.
- `hardy_ramanujan(limit=100000, base_limit=100)` lists every number below
  `limit` written in two ways as a sum of two cubes with four distinct bases
  below `base_limit`; each result is a `CubeSumPair` with `number`, `first`
  and `second`.
- `day_of_year(day, month, year)` raises `ValueError` for a month outside
  1..12; the day itself is added as given.
- `approximate_sqrt(num, tolerance=0.001, step=0.0001)` returns the first
  multiple of `step` whose square lies within `tolerance` of `num`.
- `summarize(values)` raises `ValueError` for an empty series; the returned
  `Summary` has `count`, `total`, `maximum`, `minimum` and a `mean` property.

## Examples

```python
from numcraft.primes import is_prime, prime_factors
from numcraft.digits import digit_sum, is_harshad
from numcraft.divisors import are_friends, collatz
from numcraft.compare import median3, symbolic_comparison
from numcraft.calendar_days import day_of_year, is_leap
from numcraft.text import sort_names

is_prime(97)                    # True
prime_factors(12)               # [2, 2, 3]
digit_sum(734)                  # 14
is_harshad(18)                  # True: 18 is divisible by 1 + 8
are_friends(220, 284)           # True
collatz(6)                      # [6, 3, 10, 5, 16, 8, 4, 2, 1]
median3(3, 9, 5)                # 5
symbolic_comparison(3, 1, 3)    # "3 = 3 > 1"
is_leap(2000)                   # True
day_of_year(1, 3, 2024)         # 61
sort_names(["ayse", "ali", "aban"])  # ["ali", "aban", "ayse"]
```

The dice functions accept a `random.Random` instance, so results can be
reproduced by seeding it:

```python
import random
from numcraft.dice import win_probability

win_probability(100_000, random.Random(1))   # close to 0.493
```

## Command line

Installing the package provides a `numcraft` command. Every subcommand takes
its numbers as arguments:

```
numcraft remainder 7.5 2          # floating-point remainder of x / y
numcraft max4 1.5 -2 9.25 3       # largest of four real numbers
numcraft median 3 9 5             # middle value of three integers
numcraft day-of-year 1 3 2024     # ordinal day, then whether the year is leap
numcraft collatz 6                # the sequence, then its length
```

Invalid input, such as a zero divisor or a month outside 1..12, prints an
error to standard error and exits with status 1. See all options with:

```
numcraft --help
```

The other functions (primes, digit families, divisors, text layouts, dice and
statistics) are available from Python only; the command does not prompt for
input or offer them as subcommands.