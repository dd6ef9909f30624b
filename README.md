# rustlings

Working answers to a set of small Rust learning exercises, written as Python
functions and types, plus two helpers for people who work through such
exercises: a writer for the `rust-project.json` file that rust-analyzer reads,
and coloured status messages for the terminal.

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH`, only for `RustAnalyzerProject.get_sysroot_src`

## Installation

```
pip install .
```

## Reference solutions

The `rustlings.exercises` sub-package holds one module per group of exercises:

| Module | Contents |
| --- | --- |
| `basics` | `sale_price`, `is_even`, `square`, `bigger`, `foo_if_fizz`, `longest`, `maybe_icecream`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `quizzes` | `calculate_price_of_apples`, `transformer` with `Command` and `Append`, `ReportCard` |
| `errors` | `generate_nametag_text`, `total_cost`, `spend_tokens`, `PositiveNonzeroInteger`, `CreationError`, `parse_pos_nonzero`, `ParsePosNonzeroError` |
| `structures` | `MachineState` driven by `Move`, `Quit`, `Echo` and `ChangeColor` messages; `Order`, `Package`, `Wrapper`, `append_bar`, `Licensed`, `compare_license_types` |
| `collections` | `fruit_basket`, `fill_fruit_basket`, `build_scores_table`, `array_and_vec`, `vec_loop`, `vec_map`, `fill_vec` |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide`, `result_with_list`, `list_of_results`, `factorial`, the `count_*` functions over `Progress` maps, the `Cons` list, `offset_sums` |

Failures are raised as exceptions rather than returned:

```python
from rustlings.exercises.quizzes import Append, Command, transformer
from rustlings.exercises.iterators import DivideByZeroError, divide
from rustlings.exercises.errors import CreationErrorKind, ParsePosNonzeroError, parse_pos_nonzero

transformer([("hello", Command.UPPERCASE), (" hi ", Command.TRIM), ("foo", Append(1))])
# ['HELLO', 'hi', 'foobar']

divide(81, 9)   # 9
divide(81, 0)   # raises DivideByZeroError

try:
    parse_pos_nonzero("-555")
except ParsePosNonzeroError as err:
    err.creation.kind is CreationErrorKind.NEGATIVE   # True
```

## rust-analyzer project file

`rustlings.project.RustAnalyzerProject` collects one `Crate` (edition 2021,
`cfg` of `["test"]`) for every path below a folder whose text after its first
dot is `rs`:

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()           # runs `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk()             # writes ./rust-project.json
```

`to_json()` returns the same JSON text without writing it.

## Terminal messages

`rustlings.ui.warn(message)` prints a red line and `rustlings.ui.success(message)`
a green one, each with an emoji prefix. Set the `NO_EMOJI` environment variable
to use plain `!` and `✓` prefixes instead.

## What this package does not do

There is no command-line program. The package does not read an `info.toml`
list of exercises, does not compile, run or test Rust exercise files, does not
track which exercises still carry the `// I AM NOT DONE` marker, and has no
watch mode, hint lookup or progress listing.

## Running the tests

```
pip install ".[test]"
pytest
```