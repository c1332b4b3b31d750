# addchain

Addition chains and the programs that compute them, with the integer
helpers needed to work with the large exponents that show up in
cryptography (field inversion, square roots and the like).

An *addition chain* for a target `n` is a sequence of integers that starts
at 1 and ends at `n`, where every entry is the sum of two earlier ones.
Each step corresponds to a multiplication (or, when both operands are the
same, a squaring), so a short chain means a fast exponentiation.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Chains and programs

`addchain.chain.Chain` is a list of integers and `addchain.chain.Program`
is a list of `Op(i, j)` instructions, each adding chain positions `i` and
`j`.

```python
from addchain.chain import Chain, Program, product, plus

c = Chain([1, 2, 4, 6, 10])
c.validate()                 # raises ChainError if c is not an addition chain
print(c.program())           # the Op(i, j) that builds each entry after the first

p = Program()
i = p.double(0)              # position 1 holds 2
i = p.add(0, i)              # position 2 holds 3
i = p.shift(i, 4)            # four doublings: position 6 holds 48
print(p.evaluate())          # Chain [1, 2, 3, 6, 12, 24, 48]
print(p.count())             # (doubles, adds) == (5, 1)

print(product(Chain([1, 2, 4, 6, 10]), Chain([1, 2, 4, 8])))  # [1, 2, 4, 6, 10, 20, 40, 80]
print(plus(Chain([1, 2, 4]), 1))                              # [1, 2, 4, 5]
```

- `Chain.minimal()` is the chain `[1]`; `Chain.end()` is its last entry.
- `Chain.ops(k)` lists every way position `k` can be formed from earlier
  entries; `Chain.op(k)` returns the first and raises `ChainError` if there
  is none.
- `Chain.program()` / `Chain.validate()` raise `ChainError` for an empty
  chain, one not starting with 1, one containing zero or a duplicate, or
  an entry that is not a sum of earlier ones.
- `Chain.produces(target)` checks that a valid chain ends at `target`, and
  `Chain.superset(targets)` checks that it contains them all.
- `Chain.is_ascending()` reports whether the chain starts with 1 and is
  strictly increasing.
- `Program.add`, `double` and `shift` raise `IndexError` for an index that
  is negative or beyond the chain built so far.
- `Program.doubles()`, `adds()`, `read_counts()` and `dependencies()`
  describe the cost of the program and how its entries depend on each
  other (`dependencies()` gives one bitset integer per position).

## Expressions

`addchain.calc.evaluate` evaluates integer expressions with the binary
operators `+ - * / ^` (`^` binds right, `*`, `/` and `^` bind tighter than
`+` and `-`), spaces between tokens, and decimal, `0x` hex, `0b` binary and
leading-zero octal literals, optionally negative:

```python
from addchain.calc import evaluate

evaluate("2^255 - 19 - 2")
evaluate("15^2*9+40/2^2")    # 2035
```

There are no parentheses. Malformed expressions and division by zero raise
`CalcError`.

## Well-known primes

`addchain.prime` has `Crandall` primes (2ⁿ − c), `Solinas` primes (f(2ᵏ)
for a small `addchain.polynomial.Polynomial` f) and `Other` for any prime;
each has `bits()`, `to_int()` and a readable `str()`. `from_hex` builds an
`Other` from a hex literal with optional `_` separators.

```python
from addchain.prime import Crandall

p = Crandall(255, 19)
p.bits()      # 255
str(p)        # "2^255-19"
p.to_int()
```

`addchain.distinguished` defines the primes of popular curves (`P25519`,
`NISTP256`, `GOLDILOCKS`, `SECP256K1`, ...) and the tuple `DISTINGUISHED`.
`addchain.results.RESULTS` records, for the inversion exponent `n - d` of
each, the best chain length and the algorithm name that produced it, with
`Result.target()` and `Result.delta()` against the best known length.

## Field arithmetic example

`addchain.fp25519.Elt` is an element of the field modulo 2²⁵⁵ − 19
(`addchain.fp25519.P`). `Elt(x)` reduces `x`, `*` multiplies, `square()`
squares, `int()` gives the value, and `inverse()` computes the inverse with
a fixed addition chain of 254 squarings and 12 multiplications.

## Command line

```
addchain help
addchain help cite
addchain cite
```

`addchain cite` writes a BibTeX entry for the latest release, but only
when the build version equals the release version. The metadata in
`addchain.meta.META` has an empty build version, so as shipped the command
reports `cannot cite non-release version` and exits with status 1. The
citation text itself is always available from Python:

```python
from addchain.meta import META

print(META.citation())
```

A `version` subcommand is offered only when the build version is set.

## Other helpers

- `addchain.bigint`: `parse_hex` and `parse_binary` (with `_` separators),
  `pow2`, `is_pow2`, `pow2_up_to`, `mask`, `ones`, `bits_set`, `extract`,
  `min_max`, `rand_bits`, `uint64s` and `bytes_little_endian`.
- `addchain.bigints`: `index`, `contains_sorted`, `unique`,
  `insert_sorted_unique` and `merge_unique` over sorted integer sequences.
- `addchain.bigvector`: `zeros`, `basis`, `add` and `lsh` on integer tuples.
- `addchain.heap.MinInts`: a min-heap of integers.
- `addchain.printer`: `Printer`, an indenting line printer with
  %-formatting, and `TabWriter`, which aligns tab-separated cells into
  columns on `flush()`.
- `addchain.rand`: `AddsGenerator(n)` builds random chains of `n` entries;
  `SolverGenerator(n, algorithm)` hands random `n`-bit targets to any object
  with a `find_chain(target)` method.
- `addchain.toc`: `headings`, `anchor`, `toc` and `generate_toc` for
  Markdown tables of contents.

## What this package does not do

It does not search for short addition chains: there are no chain-finding
algorithms, so `SolverGenerator` needs one supplied from elsewhere, and
there is no `search` command. It has no language for writing chains as
scripts, and so no commands to evaluate, format or generate code from
them.