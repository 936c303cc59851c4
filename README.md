# tinycas

A small interactive calculator. It reads one line at a time, evaluates it,
and keeps the results in named variables for later lines.

## Install

    pip install .

## Interactive use

    tinycas

The prompt is `Eval: `. Each line is either a bare expression or an
assignment:

    Eval: 2(3 + 4)
    ans = 14

    Eval: r = 3
    r = 3

    Eval: a = pi r^2
    a = 28.27433

A bare expression is stored in `ans`, which later lines can use. Results are
shown with up to five decimal places, with trailing zeros removed. When a line
cannot be evaluated, the error is written to standard error and the session
goes on. The session ends at the end of input.

### Syntax

- Numbers: `12`, `3.5`, `3,5` (a comma is a decimal point).
- Operators: `+ - * / ^` and parentheses. `^` binds tighter than `*` and `/`,
  which bind tighter than `+` and `-`.
- Unary minus: `-3` is a negative literal; `-x` and `-(1 + 2)` mean
  `-1 * x` and `-1 * (1 + 2)`. A negative literal cannot be the direct right
  operand of an operator: `2 * -3` is an error, write `2 * (-3)`.
- Implicit multiplication: `2x`, `3(1 + 2)`, `(1 + 2)(3 + 4)`, `2 sin 1`.
- Functions: `sqrt sin cos tan asin acos atan log ln`. `log` is base 10 and
  `ln` is natural; angles are in radians. A function applies to the single
  term that follows it, so use parentheses for larger arguments:
  `sqrt(9 + 16)`.
- Constants: `pi`, `e`, `phi`, `tau`.
- Variables are single ASCII letters, plus `ans`. Letters that start a
  function or constant name are read as that name, so `e` is always the
  constant, and `xy` means `x * y`.
- A negative base in a power gives the negated power of its absolute value:
  `(-2)^2` is `-4`.
- Division by zero and out-of-range function arguments give `inf`, `-inf`
  or `nan` rather than an error.

## Library use

```python
from tinycas.cas import Cas
from tinycas.calculate import evaluate_string

cas = Cas()
cas.calc("x = 4")            # ("x", 4.0)
cas.calc("sqrt x + 1")       # ("ans", 3.0)
cas.get_variable("ans")      # 3.0
cas.get_variable("y")        # 0.0, never set
cas.set_variable("y", 2.5)

evaluate_string("2^10")      # 1024.0
```

Lower-level pieces:

- `tinycas.lexer`: `tokenize`, `Lexer`, `Token`, `TokenType`,
  `token_type_name`, `binary_precedence`, and the `CasError` exception that
  all parse and evaluation errors raise.
- `tinycas.parser`: `parse`, `Parser`, and the tree nodes `Number`,
  `Variable`, `Paren`, `BinaryOp`, `FunctionCall` and `Equation`.
- `tinycas.calculate`: `evaluate(expr, variables)` and `evaluate_string`.
- `tinycas.debug`: `format_tokens`, `format_ast`, `print_tokens`,
  `print_ast` for inspecting token lists and trees.
- `tinycas.cli`: `main`, `round_string`, `format_result`.

## What it does not do

Despite the name, there is no symbolic algebra: expressions are evaluated to
floating-point numbers only. Equations are not solved; the left side of `=`
must be a single variable, and anything else raises `CasError`. Variables last
only for one `Cas` session and are not saved.